"""
Discount services module.
"""
from .discount_service import DiscountService, DiscountResult, ApplyDiscountResult, RevalidationResult

__all__ = [
    'DiscountService',
    'DiscountResult',
    'ApplyDiscountResult',
    'RevalidationResult',
]
