"""Standard library module registry.

The registry is built once at import time from ``sys.stdlib_module_names``
and shared read-only by every helper instance.
"""

import sys

__all__ = ['STDLIB_MODULES', 'is_stdlib_module', 'top_level_package']

STDLIB_MODULES: frozenset[str] = frozenset(sys.stdlib_module_names)


def top_level_package(module: str) -> str:
    """Return the first segment of a dotted module path.

    e.g. ``"collections.abc"`` -> ``"collections"``
    """
    return module.split('.', 1)[0]


def is_stdlib_module(module: str) -> bool:
    """Check whether a module belongs to the Python standard library."""
    if not module:
        return False
    return top_level_package(module) in STDLIB_MODULES
