"""
Discount serializers module.
"""
from .snapshot_serializers import DiscountCodeSnapshotSerializer

__all__ = [
    'DiscountCodeSnapshotSerializer',
]
