"""
Capacity serializers module.
"""
from .snapshot_serializers import (
    DayConfigSnapshotSerializer, EventSlotSnapshotSerializer, CapacitySettingsSerializer
)

__all__ = [
    'DayConfigSnapshotSerializer',
    'EventSlotSnapshotSerializer',
    'CapacitySettingsSerializer',
]
