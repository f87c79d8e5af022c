"""
Test package marker.

Keeps `tests` a regular package so `tests.fixtures` resolves to this
checkout rather than another `tests/` directory on `sys.path`.
"""
