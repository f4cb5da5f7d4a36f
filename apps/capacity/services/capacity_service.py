"""
Capacity limits per date and category, and load utilisation for the dashboard.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from django.conf import settings as django_settings

from apps.orders.snapshots import DASHBOARD_EXCLUDED_STATUSES, OrderSnapshot
from apps.products.snapshots import ProductSnapshot
from ..snapshots import CapacitySettings
from .workload_service import WorkloadService

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
HUNDRED = Decimal('100')


@dataclass(frozen=True)
class CapacityUsage:
    """Current load against a limit, as shown on the load dashboard"""
    current: Decimal
    limit: Decimal
    percent: Decimal
    band: str

    @property
    def remaining(self) -> Decimal:
        return max(ZERO, self.limit - self.current)


@dataclass(frozen=True)
class CategoryLoad:
    category_id: str
    name: str
    standard: CapacityUsage
    event: CapacityUsage


@dataclass(frozen=True)
class DailyOverview:
    date: str
    is_open: bool
    has_event_slot: bool
    categories: Tuple[CategoryLoad, ...]


class CapacityService:
    """Resolve capacity ceilings from default, day override and event slot layers"""

    BAND_OK = 'ok'
    BAND_WARNING = 'warning'
    BAND_FULL = 'full'

    @staticmethod
    def day_limit(capacity: CapacitySettings, date: str, category: str) -> Decimal:
        """Standard lane: day override, then default capacity, then 0"""
        config = capacity.day_config(date)
        if config is not None and category in config.capacity_overrides:
            return config.capacity_overrides[category]
        return capacity.default_capacities.get(category, ZERO)

    @staticmethod
    def event_limit(capacity: CapacitySettings, date: str, category: str) -> Decimal:
        """Event lane: only the event slot's own override counts, no default"""
        slot = capacity.event_slot(date)
        if slot is None:
            return ZERO
        return slot.capacity_overrides.get(category, ZERO)

    @staticmethod
    def is_day_open(capacity: CapacitySettings, date: str) -> bool:
        config = capacity.day_config(date)
        return config is None or config.is_open

    @staticmethod
    def utilization(current: Decimal, limit: Decimal) -> CapacityUsage:
        """Percentage of the limit in use, capped at 100, with a traffic-light band"""
        warning_percent = Decimal(str(getattr(django_settings, 'CAPACITY_LOAD_WARNING_PERCENT', 80)))

        if limit > 0:
            percent = min(HUNDRED, current / limit * HUNDRED)
        elif current > 0:
            # Nothing may be produced here, yet something is booked.
            percent = HUNDRED
        else:
            percent = ZERO
        percent = percent.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)

        if percent >= HUNDRED:
            band = CapacityService.BAND_FULL
        elif percent > warning_percent:
            band = CapacityService.BAND_WARNING
        else:
            band = CapacityService.BAND_OK

        return CapacityUsage(current=current, limit=limit, percent=percent, band=band)

    @staticmethod
    def daily_overview(
        date: str,
        capacity: CapacitySettings,
        orders: Iterable[OrderSnapshot],
        products: Iterable[ProductSnapshot],
    ) -> DailyOverview:
        """Load table row for one date; only cancelled orders are left out"""
        relevant = WorkloadService.filter_orders(orders, DASHBOARD_EXCLUDED_STATUSES, delivery_date=date)
        totals = WorkloadService.aggregate(relevant, products, capacity.categories)

        rows = []
        for category in sorted(capacity.categories, key=lambda c: c.order):
            rows.append(CategoryLoad(
                category_id=category.id,
                name=category.name,
                standard=CapacityService.utilization(
                    totals.load.get(category.id, ZERO),
                    CapacityService.day_limit(capacity, date, category.id),
                ),
                event=CapacityService.utilization(
                    totals.event_load.get(category.id, ZERO),
                    CapacityService.event_limit(capacity, date, category.id),
                ),
            ))

        logger.debug(f"Built load overview for {date} from {len(relevant)} orders")
        return DailyOverview(
            date=date,
            is_open=CapacityService.is_day_open(capacity, date),
            has_event_slot=capacity.event_slot(date) is not None,
            categories=tuple(rows),
        )
