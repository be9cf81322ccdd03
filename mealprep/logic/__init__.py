"""Core business logic layer.

Subpackages:
- shopping: aggregating the weekly shopping list
"""
__all__ = ["shopping"]
