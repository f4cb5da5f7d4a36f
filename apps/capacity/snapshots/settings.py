from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from apps.common.utils import frozen_mapping
from apps.products.snapshots import CategorySnapshot
from .day import DayConfigSnapshot, EventSlotSnapshot


def _index_by_date(entries, kind):
    index = {}
    for entry in entries:
        if entry.date in index:
            raise ValueError(f"Duplicate {kind} for date {entry.date}")
        index[entry.date] = entry
    return MappingProxyType(index)


@dataclass(frozen=True)
class CapacitySettings:
    """Capacity configuration: categories, default limits and per-date layers"""
    categories: Tuple[CategorySnapshot, ...] = ()
    default_capacities: Mapping = field(default_factory=lambda: MappingProxyType({}))
    day_configs: Tuple[DayConfigSnapshot, ...] = ()
    event_slots: Tuple[EventSlotSnapshot, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'categories', tuple(self.categories or ()))
        object.__setattr__(self, 'default_capacities', frozen_mapping(self.default_capacities))
        object.__setattr__(self, 'day_configs', tuple(self.day_configs or ()))
        object.__setattr__(self, 'event_slots', tuple(self.event_slots or ()))
        object.__setattr__(self, '_day_index', _index_by_date(self.day_configs, 'day config'))
        object.__setattr__(self, '_event_index', _index_by_date(self.event_slots, 'event slot'))

    @property
    def category_ids(self) -> Tuple[str, ...]:
        return tuple(category.id for category in self.categories)

    def day_config(self, date: str) -> Optional[DayConfigSnapshot]:
        return self._day_index.get(date)

    def event_slot(self, date: str) -> Optional[EventSlotSnapshot]:
        return self._event_index.get(date)
