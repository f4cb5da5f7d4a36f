"""
Test factories for creating engine snapshots using factory_boy.
"""
import factory
from decimal import Decimal

from apps.capacity.snapshots import CapacitySettings, DayConfigSnapshot, EventSlotSnapshot
from apps.discounts.snapshots import DiscountCodeSnapshot, DiscountType
from apps.orders.snapshots import AppliedDiscount, CartItemSnapshot, OrderSnapshot, OrderStatus
from apps.packaging.snapshots import PackagingSettings, PackagingTypeSnapshot
from apps.products.snapshots import CategorySnapshot, ProductSnapshot


class CategoryFactory(factory.Factory):
    """Factory for capacity categories."""

    class Meta:
        model = CategorySnapshot

    id = factory.Sequence(lambda n: f"cat{n}")
    name = factory.LazyAttribute(lambda obj: obj.id.title())
    order = factory.Sequence(lambda n: n)
    enabled = True


class ProductFactory(factory.Factory):
    """Factory for catalog products."""

    class Meta:
        model = ProductSnapshot

    id = factory.Sequence(lambda n: f"product{n}")
    name = factory.Sequence(lambda n: f"Test Product {n}")
    price = Decimal('100')
    category = 'kitchen'
    workload = Decimal('1')
    workload_overhead = Decimal('0')
    capacity_category_id = None
    volume = Decimal('500')
    no_packaging = False
    is_event_product = False
    lead_time_days = 0
    vat_rate_takeaway = Decimal('12')


class EventProductFactory(ProductFactory):
    """Factory for event-only products."""
    is_event_product = True
    category = 'event'


class CartItemFactory(ProductFactory):
    """Factory for cart/order line items."""

    class Meta:
        model = CartItemSnapshot

    quantity = 1

    @classmethod
    def from_product(cls, product, **kwargs):
        """Line item carrying the product's fields as its embedded snapshot"""
        values = {name: getattr(product, name) for name in ProductSnapshot.__dataclass_fields__}
        values.update(kwargs)
        return cls(**values)


class OrderFactory(factory.Factory):
    """Factory for order snapshots."""

    class Meta:
        model = OrderSnapshot

    id = factory.Sequence(lambda n: f"order{n}")
    status = OrderStatus.CONFIRMED
    delivery_date = '2025-03-10'
    items = factory.LazyFunction(tuple)
    applied_discounts = factory.LazyFunction(tuple)
    packaging_fee = Decimal('0')
    delivery_fee = Decimal('0')


class AppliedDiscountFactory(factory.Factory):

    class Meta:
        model = AppliedDiscount

    code = 'SALE10'
    amount = Decimal('10')


class DiscountCodeFactory(factory.Factory):
    """Factory for discount codes."""

    class Meta:
        model = DiscountCodeSnapshot

    code = factory.Sequence(lambda n: f"CODE{n}")
    type = DiscountType.PERCENTAGE
    value = Decimal('10')
    valid_from = ''
    valid_to = ''
    min_order_value = Decimal('0')
    max_usage = 0
    enabled = True
    applicable_categories = factory.LazyFunction(tuple)
    is_event_only = False
    is_stackable = False


class FixedDiscountCodeFactory(DiscountCodeFactory):
    type = DiscountType.FIXED
    value = Decimal('50')


class DayConfigFactory(factory.Factory):

    class Meta:
        model = DayConfigSnapshot

    date = '2025-03-10'
    is_open = True
    capacity_overrides = factory.LazyFunction(dict)


class EventSlotFactory(factory.Factory):

    class Meta:
        model = EventSlotSnapshot

    date = '2025-03-14'
    capacity_overrides = factory.LazyFunction(dict)


class CapacitySettingsFactory(factory.Factory):
    """Factory for capacity settings with a kitchen and an event category."""

    class Meta:
        model = CapacitySettings

    categories = factory.LazyFunction(lambda: (
        CategorySnapshot(id='kitchen', name='Kitchen', order=1),
        CategorySnapshot(id='event', name='Event', order=2),
    ))
    default_capacities = factory.LazyFunction(lambda: {'kitchen': Decimal('100'), 'event': Decimal('100')})
    day_configs = factory.LazyFunction(tuple)
    event_slots = factory.LazyFunction(tuple)


class PackagingTypeFactory(factory.Factory):

    class Meta:
        model = PackagingTypeSnapshot

    id = factory.Sequence(lambda n: f"box{n}")
    name = factory.LazyAttribute(lambda obj: f"Box {obj.volume} ml")
    volume = Decimal('1500')
    price = Decimal('35')
    enabled = True


class PackagingSettingsFactory(factory.Factory):
    """Factory for the packaging catalog used in most cart examples."""

    class Meta:
        model = PackagingSettings

    types = factory.LazyFunction(lambda: (
        PackagingTypeSnapshot(id='small', name='Small', volume=Decimal('500'), price=Decimal('15')),
        PackagingTypeSnapshot(id='medium', name='Medium', volume=Decimal('1500'), price=Decimal('35')),
        PackagingTypeSnapshot(id='large', name='Large', volume=Decimal('3000'), price=Decimal('60')),
    ))
    free_from = Decimal('5000')
