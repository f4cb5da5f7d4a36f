"""
Admission check for a prospective order on a delivery/pickup date.

The same check serves as the optimistic preview in the cart and as the binding
re-check right before an order is committed; only the freshness of the
snapshots passed in differs.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Tuple

from apps.common.utils import add_days, as_iso_date
from apps.orders.snapshots import DASHBOARD_EXCLUDED_STATUSES, CartItemSnapshot, OrderSnapshot
from apps.products.snapshots import ProductSnapshot
from ..snapshots import CapacitySettings
from .capacity_service import CapacityService
from .workload_service import WorkloadService

logger = logging.getLogger(__name__)


class AvailabilityStatus(str, Enum):
    AVAILABLE = 'available'
    PAST = 'past'
    TOO_SOON = 'too_soon'
    CLOSED = 'closed'
    EXCEEDS = 'exceeds'


@dataclass(frozen=True)
class AvailabilityResult:
    allowed: bool
    status: AvailabilityStatus
    reason: str = ''
    exceeded_categories: Tuple[str, ...] = ()


class AdmissionService:
    """Decide whether a date can take a cart, with a reason users can read"""

    REASONS = {
        AvailabilityStatus.PAST: 'The selected date is in the past.',
        AvailabilityStatus.TOO_SOON: 'The selected date does not leave enough preparation time.',
        AvailabilityStatus.CLOSED: 'We are closed on the selected date.',
        AvailabilityStatus.EXCEEDS: 'Production capacity for the selected date is full.',
    }

    @staticmethod
    def _rejected(status: AvailabilityStatus, exceeded=()) -> AvailabilityResult:
        return AvailabilityResult(
            allowed=False,
            status=status,
            reason=AdmissionService.REASONS[status],
            exceeded_categories=tuple(exceeded),
        )

    @staticmethod
    def check_availability(
        date,
        items: Iterable[CartItemSnapshot],
        capacity: CapacitySettings,
        orders: Iterable[OrderSnapshot],
        products: Iterable[ProductSnapshot],
        today,
        exclude_order_id: Optional[str] = None,
    ) -> AvailabilityResult:
        """
        Check a cart against a date.

        Args:
            date: Requested delivery/pickup date (date or ISO string)
            items: Cart items; empty means "is the date itself still open"
            capacity: Capacity settings snapshot
            orders: Order snapshot; cancelled orders are ignored
            products: Live catalog
            today: Reference date (date or ISO string)
            exclude_order_id: Order being edited, so it does not count twice

        Returns:
            AvailabilityResult: allowed flag, status and reason string
        """
        date = as_iso_date(date)
        today = as_iso_date(today)
        items = list(items)

        if date < today:
            return AdmissionService._rejected(AvailabilityStatus.PAST)

        max_lead_time = max((item.lead_time_days for item in items), default=0)
        if date < add_days(today, max_lead_time):
            return AdmissionService._rejected(AvailabilityStatus.TOO_SOON)

        if not CapacityService.is_day_open(capacity, date):
            return AdmissionService._rejected(AvailabilityStatus.CLOSED)

        products = list(products)
        relevant = WorkloadService.filter_orders(
            orders, DASHBOARD_EXCLUDED_STATUSES, delivery_date=date, exclude_order_id=exclude_order_id
        )
        totals = WorkloadService.aggregate(relevant, products, capacity.categories)
        products_by_id = WorkloadService.index_products(products)

        standard_categories = set()
        event_categories = set()
        for item in items:
            resolved = WorkloadService.resolve_item(item, products_by_id)
            lane = totals.lane(resolved.is_event)
            if resolved.category not in lane:
                logger.debug(f"Cart item {resolved.item_id} has unknown category {resolved.category}")
                continue
            # The cart pays its own overhead in full, shared groups or not.
            lane[resolved.category] += resolved.variable_load + resolved.overhead
            if resolved.is_event:
                event_categories.add(resolved.category)
            else:
                standard_categories.add(resolved.category)

        if not items:
            standard_categories = set(capacity.category_ids)

        exceeded = []
        for category in sorted(standard_categories):
            limit = CapacityService.day_limit(capacity, date, category)
            if totals.load.get(category, Decimal('0')) > limit:
                exceeded.append(category)
        for category in sorted(event_categories):
            limit = CapacityService.event_limit(capacity, date, category)
            if totals.event_load.get(category, Decimal('0')) > limit:
                exceeded.append(category)

        if exceeded:
            logger.info(f"Capacity exceeded on {date} for categories: {', '.join(exceeded)}")
            return AdmissionService._rejected(AvailabilityStatus.EXCEEDS, exceeded)

        return AvailabilityResult(allowed=True, status=AvailabilityStatus.AVAILABLE)

    @staticmethod
    def date_status(date, items, capacity, orders, products, today, exclude_order_id=None) -> AvailabilityStatus:
        """Calendar colouring: just the status of check_availability()"""
        return AdmissionService.check_availability(
            date, items, capacity, orders, products, today, exclude_order_id
        ).status
