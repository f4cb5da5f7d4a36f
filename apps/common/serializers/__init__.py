"""
Common serializers module.
"""
from .snapshot_serializers import SnapshotSerializer, load_snapshot

__all__ = [
    'SnapshotSerializer',
    'load_snapshot',
]
