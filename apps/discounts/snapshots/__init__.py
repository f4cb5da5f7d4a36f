"""
Discount snapshots module.
"""
from .discount_code import DiscountType, DiscountCodeSnapshot

__all__ = [
    'DiscountType',
    'DiscountCodeSnapshot',
]
