"""
Product serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .snapshot_serializers import CategorySnapshotSerializer, ProductSnapshotSerializer

__all__ = [
    'CategorySnapshotSerializer',
    'ProductSnapshotSerializer',
]
