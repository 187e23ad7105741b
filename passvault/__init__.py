"""Interactive password store: a chained hash table, MD5-crypt hashing and a menu command."""

__version__ = "0.1.0"
__all__ = ["__version__"]