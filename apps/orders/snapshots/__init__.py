"""
Order snapshots module.

All snapshots are exported from this module to maintain backward compatibility.
"""
from .status import (
    OrderStatus, PRODUCTION_EXCLUDED_STATUSES, DASHBOARD_EXCLUDED_STATUSES,
    EVENT_EXCLUDED_STATUSES
)
from .order import CartItemSnapshot, AppliedDiscount, OrderSnapshot

__all__ = [
    'OrderStatus',
    'PRODUCTION_EXCLUDED_STATUSES',
    'DASHBOARD_EXCLUDED_STATUSES',
    'EVENT_EXCLUDED_STATUSES',
    'CartItemSnapshot',
    'AppliedDiscount',
    'OrderSnapshot',
]
