"""
Workload aggregation for the two production capacity lanes.

Every call builds its own overhead bookkeeping, so concurrent callers (cart
preview, commit-time re-check, dashboard polling) never see each other's state.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional

from apps.orders.snapshots import CartItemSnapshot, OrderSnapshot
from apps.products.snapshots import ProductSnapshot

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


@dataclass(frozen=True)
class ResolvedItem:
    """Capacity-relevant values of one line item after the product lookup"""
    item_id: str
    category: Optional[str]
    quantity: int
    workload: Decimal
    overhead: Decimal
    overhead_key: str
    is_event: bool

    @property
    def variable_load(self) -> Decimal:
        return self.workload * self.quantity


@dataclass
class WorkloadTotals:
    """Per-category load of the standard lane and of the event lane"""
    load: Dict[str, Decimal] = field(default_factory=dict)
    event_load: Dict[str, Decimal] = field(default_factory=dict)

    def lane(self, is_event: bool) -> Dict[str, Decimal]:
        return self.event_load if is_event else self.load


def _first_known(*values) -> Decimal:
    for value in values:
        if value is not None:
            return value
    return ZERO


class WorkloadService:
    """Service turning order sets into per-category production load"""

    @staticmethod
    def index_products(products: Iterable[ProductSnapshot]) -> Dict[str, ProductSnapshot]:
        """Map product id -> product for the live catalog"""
        return {str(product.id): product for product in products}

    @staticmethod
    def resolve_item(item: CartItemSnapshot, products_by_id: Mapping[str, ProductSnapshot]) -> ResolvedItem:
        """
        Resolve workload, overhead and lane of a line item.

        The live product wins; when it has been deleted the values embedded in
        the order item are used so that historical orders stay computable.
        """
        product = products_by_id.get(str(item.id))
        source = product if product is not None else item

        workload = _first_known(product.workload if product else None, item.workload)
        overhead = _first_known(
            product.workload_overhead if product else None,
            item.workload_overhead,
        )
        category = item.category or (product.category if product else '') or None

        return ResolvedItem(
            item_id=str(item.id),
            category=category,
            quantity=item.quantity,
            workload=workload,
            overhead=overhead,
            overhead_key=source.capacity_category_id or str(item.id),
            is_event=bool(source.is_event_product),
        )

    @staticmethod
    def filter_orders(
        orders: Iterable[OrderSnapshot],
        excluded_statuses,
        delivery_date: Optional[str] = None,
        exclude_order_id: Optional[str] = None,
    ) -> List[OrderSnapshot]:
        """Build the caller's active order set for one load calculation"""
        active = []
        for order in orders:
            if order.status in excluded_statuses:
                continue
            if delivery_date is not None and order.delivery_date != delivery_date:
                continue
            if exclude_order_id is not None and order.id == str(exclude_order_id):
                continue
            active.append(order)
        return active

    @staticmethod
    def aggregate(orders: Iterable[OrderSnapshot], products: Iterable[ProductSnapshot], categories) -> WorkloadTotals:
        """
        Sum the production load of the given orders per category.

        No status filtering happens here: whatever the caller passes in is
        counted, cancelled orders included.

        Overhead is charged once per overhead key for the whole pass. The key is
        the product's capacity group (products sharing e.g. one fryer) or the
        item id for ungrouped products. The first item encountered for a key
        gets the credit, in its own lane; later items of the same group add
        only their per-unit workload even if their overhead is larger.
        """
        products_by_id = WorkloadService.index_products(products)
        category_ids = [getattr(category, 'id', category) for category in categories]

        totals = WorkloadTotals(
            load={category_id: ZERO for category_id in category_ids},
            event_load={category_id: ZERO for category_id in category_ids},
        )
        used_overhead_keys = set()

        for order in orders:
            for item in order.items:
                resolved = WorkloadService.resolve_item(item, products_by_id)
                if not resolved.category:
                    logger.debug(f"Skipping item {resolved.item_id} of order {order.id}: no category")
                    continue

                contribution = resolved.variable_load
                if resolved.overhead_key not in used_overhead_keys:
                    contribution += resolved.overhead
                    used_overhead_keys.add(resolved.overhead_key)

                totals.load.setdefault(resolved.category, ZERO)
                totals.event_load.setdefault(resolved.category, ZERO)
                lane = totals.lane(resolved.is_event)
                lane[resolved.category] += contribution

        return totals
