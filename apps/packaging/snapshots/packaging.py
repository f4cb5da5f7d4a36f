from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from apps.common.utils import to_decimal


@dataclass(frozen=True)
class PackagingTypeSnapshot:
    """Box/bag SKU with its usable volume (ml) and price"""
    id: str = ''
    name: str = ''
    volume: Decimal = Decimal('0')
    price: Decimal = Decimal('0')
    enabled: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'volume', to_decimal(self.volume))
        object.__setattr__(self, 'price', to_decimal(self.price))

    def __str__(self):
        return f"{self.name or self.id} ({self.volume} ml / {self.price})"


@dataclass(frozen=True)
class PackagingSettings:
    """Configured packaging SKUs and the cart value above which packaging is free"""
    types: Tuple[PackagingTypeSnapshot, ...] = ()
    free_from: Decimal = Decimal('0')

    def __post_init__(self):
        object.__setattr__(self, 'types', tuple(self.types or ()))
        object.__setattr__(self, 'free_from', to_decimal(self.free_from))
