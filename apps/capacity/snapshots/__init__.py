"""
Capacity snapshots module.

All snapshots are exported from this module to maintain backward compatibility.
"""
from .day import DayConfigSnapshot, EventSlotSnapshot
from .settings import CapacitySettings

__all__ = [
    'DayConfigSnapshot',
    'EventSlotSnapshot',
    'CapacitySettings',
]
