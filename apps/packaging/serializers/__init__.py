"""
Packaging serializers module.
"""
from .snapshot_serializers import PackagingTypeSnapshotSerializer, PackagingSettingsSerializer

__all__ = [
    'PackagingTypeSnapshotSerializer',
    'PackagingSettingsSerializer',
]
