"""Interface package initializer.

Provides a package marker so type checkers and imports treat
the `interface` folder as a proper Python package.
"""

__all__ = [
    "cli",
    "loader",
    "render",
]
