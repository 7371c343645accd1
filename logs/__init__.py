"""Logs package initializer.

Marks `logs` as a package so `logs.logging_utils` resolves when installed.
"""

__all__ = [
    "logging_utils",
]
