"""
Product snapshots module.

All snapshots are exported from this module to maintain backward compatibility.
"""
from .product import ProductSnapshot
from .category import CategorySnapshot

__all__ = [
    'ProductSnapshot',
    'CategorySnapshot',
]
