"""
streamhub core package.

Per-backend configuration for a multi-backend content client: the service
registry, selection of the active backend, initialization of backend
credentials from stored preferences, and static lookup tables.
"""

__all__ = [
    "catalog",
    "i18n",
    "initializer",
    "lookups",
    "registry",
    "schemas",
    "selection",
    "store",
    "utils",
]
