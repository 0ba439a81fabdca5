"""
Core package init for the usage stats toolkit.

Makes the `usagestats` modules importable without requiring an editable install.
"""

__all__ = [
    "formatting",
    "io_utils",
    "providers",
    "report",
    "types",
    "validation",
]
