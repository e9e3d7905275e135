"""A trench coat shop: stock kept in memory or in a file, a shopping basket, CSV/HTML basket export and a text console."""

__version__ = "1.0.0"
__all__ = ["__version__"]