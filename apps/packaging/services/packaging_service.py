"""
Packaging fee and package count.

The fee packs volume into a mix of box sizes; the count (driver badge, route
sheet) always assumes boxes of the largest size. The two numbers are allowed
to disagree and are consumed independently.
"""
import logging
import math
from decimal import Decimal
from typing import Iterable, List

from apps.orders.snapshots import CartItemSnapshot
from ..snapshots import PackagingTypeSnapshot

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


class PackagingService:
    """Service for packaging-related cart calculations"""

    @staticmethod
    def usable_types(types: Iterable[PackagingTypeSnapshot]) -> List[PackagingTypeSnapshot]:
        """Enabled packaging types with a real volume, smallest first"""
        return sorted(
            (packaging for packaging in types if packaging.enabled and packaging.volume > 0),
            key=lambda packaging: packaging.volume,
        )

    @staticmethod
    def packable_items(items: Iterable[CartItemSnapshot]) -> List[CartItemSnapshot]:
        return [item for item in items if not item.no_packaging]

    @staticmethod
    def packable_volume(items: Iterable[CartItemSnapshot]) -> Decimal:
        return sum((item.volume * item.quantity for item in PackagingService.packable_items(items)), ZERO)

    @staticmethod
    def calculate_fee(
        items: Iterable[CartItemSnapshot],
        types: Iterable[PackagingTypeSnapshot],
        free_from: Decimal,
    ) -> Decimal:
        """
        Packaging fee for a cart.

        Items marked no_packaging add no volume but still count toward the
        cart total that makes packaging free. Volume above the largest box is
        charged in largest boxes; the remainder goes into the smallest box
        that still fits it.
        """
        items = list(items)
        cart_total = sum((item.price * item.quantity for item in items), ZERO)
        if cart_total >= free_from:
            return ZERO

        boxes = PackagingService.usable_types(types)
        if not boxes:
            return ZERO

        largest = boxes[-1]
        remaining = PackagingService.packable_volume(items)
        fee = ZERO

        while remaining > largest.volume:
            fee += largest.price
            remaining -= largest.volume

        if remaining > 0:
            best_fit = next(box for box in boxes if box.volume >= remaining)
            fee += best_fit.price

        logger.debug(f"Packaging fee {fee} for cart total {cart_total}")
        return fee

    @staticmethod
    def calculate_package_count(items: Iterable[CartItemSnapshot], types: Iterable[PackagingTypeSnapshot]) -> int:
        """
        Number of physical packages, for display only.

        0 without packable items, 1 (a generic bag) when no packaging type is
        configured, otherwise the volume divided by the largest box, rounded up
        and never below 1.
        """
        packable = PackagingService.packable_items(items)
        if not packable:
            return 0

        boxes = PackagingService.usable_types(types)
        if not boxes:
            return 1

        total_volume = PackagingService.packable_volume(packable)
        return max(1, math.ceil(total_volume / boxes[-1].volume))
