"""Abstract hierarchies and explicit multi-way, k-way and binary trees."""

__version__ = "0.1.0"
__all__ = ["hierarchy", "explicit_hierarchy"]