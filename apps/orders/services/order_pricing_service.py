"""
Order totals: items, discounts, packaging and delivery fees.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from apps.discounts.services import DiscountService
from apps.discounts.snapshots import DiscountCodeSnapshot
from apps.packaging.services import PackagingService
from apps.packaging.snapshots import PackagingSettings
from apps.common.utils import to_decimal
from ..snapshots import AppliedDiscount, CartItemSnapshot, OrderSnapshot

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


@dataclass(frozen=True)
class OrderTotals:
    items_total: Decimal
    applied_discounts: Tuple[AppliedDiscount, ...]
    removed_discount_codes: Tuple[str, ...]
    discount_total: Decimal
    packaging_fee: Decimal
    package_count: int
    delivery_fee: Decimal
    fee_vat_rate: Decimal
    final_total: Decimal


class OrderPricingService:
    """Service class for order price calculations"""

    @staticmethod
    def items_total(items: Iterable[CartItemSnapshot]) -> Decimal:
        """Calculate total of all line items"""
        total = ZERO
        for item in items:
            total += Decimal(str(item.quantity)) * item.price
        return total

    @staticmethod
    def final_total(
        items_total: Decimal,
        applied_discounts: Iterable[AppliedDiscount],
        packaging_fee: Decimal = ZERO,
        delivery_fee: Decimal = ZERO,
    ) -> Decimal:
        """Discounts reduce the goods only, never the fees, and never below zero"""
        discount_total = sum((discount.amount for discount in applied_discounts), ZERO)
        return max(ZERO, items_total - discount_total) + to_decimal(packaging_fee) + to_decimal(delivery_fee)

    @staticmethod
    def fee_vat_rate(items: Iterable[CartItemSnapshot]) -> Decimal:
        """Packaging and delivery fees carry the highest VAT rate found among the items"""
        return max((item.vat_rate_takeaway for item in items), default=ZERO)

    @staticmethod
    def recalculate(
        items: Iterable[CartItemSnapshot],
        applied_discounts: Iterable[AppliedDiscount],
        discount_codes: Iterable[DiscountCodeSnapshot],
        orders: Iterable[OrderSnapshot],
        packaging: PackagingSettings,
        delivery_fee: Decimal = ZERO,
        today=None,
        exclude_order_id: Optional[str] = None,
    ) -> OrderTotals:
        """
        Recompute every derived amount of a cart or an edited order.

        Applied discounts are revalidated against the new items (codes that no
        longer qualify are dropped), then the packaging fee and package count
        are recomputed.
        """
        items = list(items)
        revalidation = DiscountService.revalidate(
            applied_discounts, items, discount_codes, orders,
            today=today, exclude_order_id=exclude_order_id,
        )

        items_total = OrderPricingService.items_total(items)
        packaging_fee = PackagingService.calculate_fee(items, packaging.types, packaging.free_from)
        package_count = PackagingService.calculate_package_count(items, packaging.types)
        delivery_fee = to_decimal(delivery_fee)

        totals = OrderTotals(
            items_total=items_total,
            applied_discounts=revalidation.applied,
            removed_discount_codes=revalidation.removed_codes,
            discount_total=sum((discount.amount for discount in revalidation.applied), ZERO),
            packaging_fee=packaging_fee,
            package_count=package_count,
            delivery_fee=delivery_fee,
            fee_vat_rate=OrderPricingService.fee_vat_rate(items),
            final_total=OrderPricingService.final_total(
                items_total, revalidation.applied, packaging_fee, delivery_fee
            ),
        )
        logger.debug(f"Recalculated order totals: {totals.final_total} ({len(items)} items)")
        return totals
