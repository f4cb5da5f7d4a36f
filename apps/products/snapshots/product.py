from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from apps.common.utils import to_decimal


@dataclass(frozen=True)
class ProductSnapshot:
    """Catalog product as seen by the capacity and pricing engine"""
    id: str
    name: str = ''
    price: Decimal = Decimal('0')
    category: str = ''

    # Capacity: per-unit effort and one-time setup cost per capacity group
    workload: Optional[Decimal] = None
    workload_overhead: Optional[Decimal] = None
    capacity_category_id: Optional[str] = None

    volume: Decimal = Decimal('0')
    no_packaging: bool = False

    is_event_product: bool = False
    lead_time_days: int = 0
    vat_rate_takeaway: Decimal = Decimal('0')

    def __post_init__(self):
        object.__setattr__(self, 'id', str(self.id))
        object.__setattr__(self, 'price', to_decimal(self.price))
        object.__setattr__(self, 'volume', to_decimal(self.volume))
        object.__setattr__(self, 'vat_rate_takeaway', to_decimal(self.vat_rate_takeaway))
        object.__setattr__(self, 'lead_time_days', int(self.lead_time_days or 0))
        if self.workload is not None:
            object.__setattr__(self, 'workload', to_decimal(self.workload))
        if self.workload_overhead is not None:
            object.__setattr__(self, 'workload_overhead', to_decimal(self.workload_overhead))
        if not self.capacity_category_id:
            object.__setattr__(self, 'capacity_category_id', None)

    def __str__(self):
        return f"{self.name} (id: {self.id})"
