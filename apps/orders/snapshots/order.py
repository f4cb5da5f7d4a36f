from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from apps.common.utils import to_decimal
from apps.products.snapshots import ProductSnapshot
from .status import OrderStatus


@dataclass(frozen=True)
class CartItemSnapshot(ProductSnapshot):
    """
    Product snapshot plus quantity.

    The embedded product fields are what the customer ordered; they are the
    fallback when the live product has since been edited away or deleted.
    """
    quantity: int = 1

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, 'quantity', int(self.quantity))

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class AppliedDiscount:
    """Discount code and the amount it was worth when last validated"""
    code: str
    amount: Decimal = Decimal('0')

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))


@dataclass(frozen=True)
class OrderSnapshot:
    """Already-loaded order as supplied by the persistence layer"""
    id: str
    status: OrderStatus = OrderStatus.CREATED
    delivery_date: str = ''
    items: Tuple[CartItemSnapshot, ...] = ()
    applied_discounts: Tuple[AppliedDiscount, ...] = ()
    packaging_fee: Decimal = Decimal('0')
    delivery_fee: Decimal = Decimal('0')

    def __post_init__(self):
        object.__setattr__(self, 'id', str(self.id))
        object.__setattr__(self, 'status', OrderStatus(self.status))
        object.__setattr__(self, 'items', tuple(self.items or ()))
        object.__setattr__(self, 'applied_discounts', tuple(self.applied_discounts or ()))
        object.__setattr__(self, 'packaging_fee', to_decimal(self.packaging_fee))
        object.__setattr__(self, 'delivery_fee', to_decimal(self.delivery_fee))

    def __str__(self):
        return f"Order {self.id} ({self.status.value}) for {self.delivery_date}"

    def uses_discount(self, code: str) -> bool:
        return any(applied.code == code for applied in self.applied_discounts)
