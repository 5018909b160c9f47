"""Entrypoints (inbound adapters) for CASECRAFT.

Expose the conversion functions to the outside world. Currently that is the
``casecraft`` command line only: parse and validate inputs, call the domain
converters, and present results.

Dependency rule: may import `casecraft.domain`; the domain must never import
from here.
"""
