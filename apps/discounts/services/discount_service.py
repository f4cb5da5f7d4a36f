"""
Discount code validation and application.

Validation never raises: every rejection is returned with its own message so
the discount entry box can show it verbatim. Amounts are never carried over
between cart edits; callers re-run validation (see revalidate) on every
cart mutation.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR
from typing import Iterable, List, Optional, Tuple

from django.conf import settings as django_settings

from apps.common.utils import as_iso_date, local_today
from apps.orders.snapshots import AppliedDiscount, CartItemSnapshot, OrderSnapshot, OrderStatus
from ..snapshots import DiscountCodeSnapshot, DiscountType

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
HUNDRED = Decimal('100')


@dataclass(frozen=True)
class DiscountResult:
    success: bool
    amount: Optional[Decimal] = None
    discount: Optional[DiscountCodeSnapshot] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ApplyDiscountResult:
    success: bool
    applied: Tuple[AppliedDiscount, ...] = ()
    error: Optional[str] = None


@dataclass(frozen=True)
class RevalidationResult:
    applied: Tuple[AppliedDiscount, ...] = ()
    removed_codes: Tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.removed_codes)


def _total(items: Iterable[CartItemSnapshot]) -> Decimal:
    return sum((item.line_total for item in items), ZERO)


class DiscountService:
    """Service for validating discount codes against a cart"""

    ERROR_INVALID = 'Invalid discount code.'
    ERROR_DISABLED = 'This discount code is not active.'
    ERROR_USED_UP = 'This discount code has already been used up.'
    ERROR_NOT_YET_VALID = 'This discount code is not valid yet.'
    ERROR_EXPIRED = 'This discount code has expired.'
    ERROR_EVENT_ONLY = 'This discount code applies only to event items.'
    ERROR_NOT_APPLICABLE_CATEGORIES = 'The discount does not apply to the items in your cart.'
    ERROR_NOT_APPLICABLE = 'There is nothing in your cart the discount could apply to.'
    ERROR_MIN_ORDER = 'Minimum order value: {min_value} {currency}'
    ERROR_ALREADY_APPLIED = 'This discount code is already applied.'
    ERROR_NOT_STACKABLE = 'This discount code cannot be combined with other discounts.'

    @staticmethod
    def find_code(code: str, discount_codes: Iterable[DiscountCodeSnapshot]) -> Optional[DiscountCodeSnapshot]:
        """Case-insensitive lookup of a discount code"""
        for discount in discount_codes:
            if discount.matches(code):
                return discount
        return None

    @staticmethod
    def count_usage(
        discount: DiscountCodeSnapshot,
        orders: Iterable[OrderSnapshot],
        exclude_order_id: Optional[str] = None,
    ) -> int:
        """Count non-cancelled orders using the code, straight from the order ledger"""
        usage = 0
        for order in orders:
            if order.status == OrderStatus.CANCELLED:
                continue
            if exclude_order_id is not None and order.id == str(exclude_order_id):
                continue
            if order.uses_discount(discount.code):
                usage += 1
        return usage

    @staticmethod
    def applicable_items(discount: DiscountCodeSnapshot, cart: Iterable[CartItemSnapshot]) -> List[CartItemSnapshot]:
        """Category restriction first, then the event-only restriction on what is left"""
        items = list(cart)
        if discount.is_category_restricted:
            items = [item for item in items if item.category in discount.applicable_categories]
        if discount.is_event_only:
            items = [item for item in items if item.is_event_product]
        return items

    @staticmethod
    def calculate_amount(discount: DiscountCodeSnapshot, applicable_total: Decimal) -> Decimal:
        """Percentage codes round down to whole units; the amount stays within 0 and the scoped total"""
        if discount.type == DiscountType.PERCENTAGE:
            amount = (applicable_total * discount.value / HUNDRED).to_integral_value(rounding=ROUND_FLOOR)
        else:
            amount = discount.value
        return max(ZERO, min(amount, applicable_total))

    @staticmethod
    def validate(
        code: str,
        cart: Iterable[CartItemSnapshot],
        discount_codes: Iterable[DiscountCodeSnapshot],
        orders: Iterable[OrderSnapshot],
        today=None,
        exclude_order_id: Optional[str] = None,
    ) -> DiscountResult:
        """
        Validate a discount code against a cart and compute its amount.

        Args:
            code: Code as typed by the customer
            cart: Current cart items
            discount_codes: All configured discount codes
            orders: Order ledger used to count usage
            today: Reference date (date or ISO string), defaults to the local date
            exclude_order_id: Order being edited; its own use of the code is not counted

        Returns:
            DiscountResult: success with amount, or the reason for rejection
        """
        cart = list(cart)
        discount = DiscountService.find_code(code, discount_codes)
        if discount is None:
            return DiscountResult(success=False, error=DiscountService.ERROR_INVALID)

        if not discount.enabled:
            return DiscountResult(success=False, error=DiscountService.ERROR_DISABLED)

        usage = DiscountService.count_usage(discount, orders, exclude_order_id)
        if discount.max_usage > 0 and usage >= discount.max_usage:
            return DiscountResult(success=False, error=DiscountService.ERROR_USED_UP)

        today = as_iso_date(today) if today is not None else local_today()
        if discount.valid_from and today < discount.valid_from:
            return DiscountResult(success=False, error=DiscountService.ERROR_NOT_YET_VALID)
        if discount.valid_to and today > discount.valid_to:
            return DiscountResult(success=False, error=DiscountService.ERROR_EXPIRED)

        applicable = DiscountService.applicable_items(discount, cart)
        if discount.is_event_only and not applicable:
            return DiscountResult(success=False, error=DiscountService.ERROR_EVENT_ONLY)

        applicable_total = _total(applicable)
        if applicable_total == 0:
            if discount.is_category_restricted:
                return DiscountResult(success=False, error=DiscountService.ERROR_NOT_APPLICABLE_CATEGORIES)
            return DiscountResult(success=False, error=DiscountService.ERROR_NOT_APPLICABLE)

        is_scoped = discount.is_category_restricted or discount.is_event_only
        value_to_check = applicable_total if is_scoped else _total(cart)
        if value_to_check < discount.min_order_value:
            currency = getattr(django_settings, 'CURRENCY_LABEL', '')
            return DiscountResult(
                success=False,
                error=DiscountService.ERROR_MIN_ORDER.format(
                    min_value=discount.min_order_value, currency=currency
                ).strip(),
            )

        amount = DiscountService.calculate_amount(discount, applicable_total)
        return DiscountResult(success=True, amount=amount, discount=discount)

    @staticmethod
    def apply_discount(
        code: str,
        applied: Iterable[AppliedDiscount],
        cart: Iterable[CartItemSnapshot],
        discount_codes: Iterable[DiscountCodeSnapshot],
        orders: Iterable[OrderSnapshot],
        today=None,
    ) -> ApplyDiscountResult:
        """
        Add a code to the applied discounts of a cart.

        Returns a new tuple of applied discounts; the one passed in is left
        untouched.
        """
        applied = tuple(applied)
        if any(existing.code.upper() == (code or '').upper() for existing in applied):
            return ApplyDiscountResult(success=False, applied=applied, error=DiscountService.ERROR_ALREADY_APPLIED)

        result = DiscountService.validate(code, cart, discount_codes, orders, today=today)
        if not result.success:
            logger.info(f"Discount code {code!r} rejected: {result.error}")
            return ApplyDiscountResult(success=False, applied=applied, error=result.error)

        if applied and not result.discount.is_stackable:
            return ApplyDiscountResult(success=False, applied=applied, error=DiscountService.ERROR_NOT_STACKABLE)

        new_discount = AppliedDiscount(code=result.discount.code, amount=result.amount)
        return ApplyDiscountResult(success=True, applied=applied + (new_discount,))

    @staticmethod
    def remove_discount(code: str, applied: Iterable[AppliedDiscount]) -> Tuple[AppliedDiscount, ...]:
        return tuple(existing for existing in applied if existing.code != code)

    @staticmethod
    def revalidate(
        applied: Iterable[AppliedDiscount],
        cart: Iterable[CartItemSnapshot],
        discount_codes: Iterable[DiscountCodeSnapshot],
        orders: Iterable[OrderSnapshot],
        today=None,
        exclude_order_id: Optional[str] = None,
    ) -> RevalidationResult:
        """
        Re-run validation of every applied code after the cart changed.

        Codes that still validate get their freshly computed amount, the others
        are dropped and reported in removed_codes.
        """
        cart = list(cart)
        orders = list(orders)
        discount_codes = list(discount_codes)

        kept = []
        removed = []
        for existing in applied:
            result = DiscountService.validate(
                existing.code, cart, discount_codes, orders,
                today=today, exclude_order_id=exclude_order_id,
            )
            if result.success:
                kept.append(AppliedDiscount(code=existing.code, amount=result.amount))
            else:
                removed.append(existing.code)

        if removed:
            logger.info(f"Removed discount codes after cart change: {', '.join(removed)}")
        return RevalidationResult(applied=tuple(kept), removed_codes=tuple(removed))
