from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Tuple

from apps.common.utils import to_decimal


class DiscountType(str, Enum):
    PERCENTAGE = 'percentage'
    FIXED = 'fixed'


@dataclass(frozen=True)
class DiscountCodeSnapshot:
    """
    Discount code definition.

    Empty valid_from/valid_to mean an unbounded window, max_usage 0 means
    unlimited and an empty applicable_categories means every category.
    """
    code: str
    type: DiscountType = DiscountType.PERCENTAGE
    value: Decimal = Decimal('0')
    valid_from: str = ''
    valid_to: str = ''
    min_order_value: Decimal = Decimal('0')
    max_usage: int = 0
    enabled: bool = True
    applicable_categories: Tuple[str, ...] = ()
    is_event_only: bool = False
    is_stackable: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'type', DiscountType(self.type))
        object.__setattr__(self, 'value', to_decimal(self.value))
        object.__setattr__(self, 'min_order_value', to_decimal(self.min_order_value))
        object.__setattr__(self, 'max_usage', int(self.max_usage or 0))
        object.__setattr__(self, 'valid_from', self.valid_from or '')
        object.__setattr__(self, 'valid_to', self.valid_to or '')
        object.__setattr__(self, 'applicable_categories', tuple(self.applicable_categories or ()))

    def __str__(self):
        return f"{self.code} ({self.type.value} {self.value})"

    @property
    def is_category_restricted(self) -> bool:
        return len(self.applicable_categories) > 0

    def matches(self, code: str) -> bool:
        return self.code.upper() == (code or '').upper()
