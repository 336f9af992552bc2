"""Small in-memory databases: a hash-table key-value store and a paged row store."""

__version__ = "0.1.0"
__all__ = ["__version__"]