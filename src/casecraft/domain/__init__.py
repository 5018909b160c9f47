"""Domain layer for CASECRAFT.

Contains the conversion rules: word splitting, acronym handling, the three
case converters and the style registry. This package is deliberately free of
I/O and presentation concerns.

Dependency rule: do not import from `casecraft.entrypoints`.
"""
