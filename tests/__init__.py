"""CASECRAFT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows through the ``casecraft`` command.
- e2e/          : Global CLI behavior (verbosity, logger levels, debug formatting).

General guidance
- Keep unit tests fast and deterministic (no real I/O).
- Functional tests assert user-observable output, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, e2e, property
"""
