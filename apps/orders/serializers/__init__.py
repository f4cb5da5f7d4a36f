"""
Order serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .snapshot_serializers import (
    CartItemSnapshotSerializer, AppliedDiscountSerializer, OrderSnapshotSerializer
)

__all__ = [
    'CartItemSnapshotSerializer',
    'AppliedDiscountSerializer',
    'OrderSnapshotSerializer',
]
