"""
Admissible dates for event-only products.
"""
import logging
from decimal import Decimal
from typing import Iterable, List

from apps.common.utils import add_days, as_iso_date
from apps.orders.snapshots import EVENT_EXCLUDED_STATUSES, OrderSnapshot
from apps.products.snapshots import ProductSnapshot
from ..snapshots import CapacitySettings
from .capacity_service import CapacityService
from .workload_service import WorkloadService

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


class EventAvailabilityService:
    """Service listing the event slots an event product can still be ordered for"""

    @staticmethod
    def available_dates(
        product: ProductSnapshot,
        capacity: CapacitySettings,
        orders: Iterable[OrderSnapshot],
        products: Iterable[ProductSnapshot],
        today,
    ) -> List[str]:
        """
        Return the ISO dates, ascending, whose event lane still has room.

        Args:
            product: Event product shown on the catalog page
            capacity: Capacity settings holding the event slots
            orders: Full order list (filtered per slot here)
            products: Live catalog
            today: Reference date (date or ISO string); never read from the clock here

        A slot is admissible while its event limit for the product's category
        is strictly greater than the event load already booked. The product's
        own workload is not added before comparing, so a slot one unit below
        its limit is still offered.
        """
        orders = list(orders)
        products = list(products)
        min_date = add_days(as_iso_date(today), product.lead_time_days)

        candidates = sorted(
            (slot for slot in capacity.event_slots if slot.date >= min_date),
            key=lambda slot: slot.date,
        )

        available = []
        for slot in candidates:
            relevant = WorkloadService.filter_orders(orders, EVENT_EXCLUDED_STATUSES, delivery_date=slot.date)
            totals = WorkloadService.aggregate(relevant, products, capacity.categories)
            current = totals.event_load.get(product.category, ZERO)
            limit = CapacityService.event_limit(capacity, slot.date, product.category)

            if limit > current:
                available.append(slot.date)
            else:
                logger.debug(f"Event slot {slot.date} full for {product.category}: {current}/{limit}")

        return available
