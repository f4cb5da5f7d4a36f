from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from apps.common.utils import frozen_mapping


@dataclass(frozen=True)
class DayConfigSnapshot:
    """Per-date exception to the standard lane: closed day or capacity override"""
    date: str
    is_open: bool = True
    capacity_overrides: Mapping = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, 'capacity_overrides', frozen_mapping(self.capacity_overrides))


@dataclass(frozen=True)
class EventSlotSnapshot:
    """
    Date opened for event-only products.

    The event lane has no default capacity: a category missing from
    capacity_overrides admits no event load at all on that date.
    """
    date: str
    capacity_overrides: Mapping = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, 'capacity_overrides', frozen_mapping(self.capacity_overrides))
