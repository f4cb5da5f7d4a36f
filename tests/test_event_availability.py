"""
Tests for the event product date picker.
"""
from datetime import datetime
from decimal import Decimal

from hypothesis import given, strategies as st, settings

from apps.capacity.services import EventAvailabilityService
from apps.orders.snapshots import OrderStatus
from tests.factories import (
    CapacitySettingsFactory, CartItemFactory, EventProductFactory, EventSlotFactory, OrderFactory
)

TODAY = '2025-03-01'


def _booked_order(product, quantity, date='2025-03-14', status=OrderStatus.CONFIRMED):
    return OrderFactory(
        delivery_date=date,
        status=status,
        items=[CartItemFactory.from_product(product, quantity=quantity)],
    )


class TestEventAvailability:

    def test_slot_exactly_at_limit_is_excluded(self):
        product = EventProductFactory(id='canape', workload=Decimal('1'))
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-14', capacity_overrides={'event': 10}),
        ])
        orders = [_booked_order(product, 10)]

        assert EventAvailabilityService.available_dates(product, capacity, orders, [product], TODAY) == []

    def test_slot_one_unit_below_limit_is_included(self):
        product = EventProductFactory(id='canape', workload=Decimal('1'))
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-14', capacity_overrides={'event': 11}),
        ])
        orders = [_booked_order(product, 10)]

        assert EventAvailabilityService.available_dates(product, capacity, orders, [product], TODAY) == [
            '2025-03-14'
        ]

    def test_own_workload_is_not_added_before_comparing(self):
        product = EventProductFactory(id='tower', workload=Decimal('50'))
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-14', capacity_overrides={'event': 11}),
        ])
        orders = [_booked_order(EventProductFactory(id='canape', workload=Decimal('1')), 10)]

        assert EventAvailabilityService.available_dates(product, capacity, orders, [product], TODAY) == [
            '2025-03-14'
        ]

    def test_slot_without_override_for_category_is_excluded(self):
        product = EventProductFactory(id='canape', lead_time_days=0)
        capacity = CapacitySettingsFactory(
            default_capacities={'event': Decimal('1000')},
            event_slots=[EventSlotFactory(date='2025-03-14', capacity_overrides={'kitchen': 50})],
        )

        assert EventAvailabilityService.available_dates(product, capacity, [], [product], TODAY) == []

    def test_lead_time_hides_early_slots(self):
        product = EventProductFactory(id='canape', lead_time_days=5)
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-05', capacity_overrides={'event': 10}),
            EventSlotFactory(date='2025-03-06', capacity_overrides={'event': 10}),
            EventSlotFactory(date='2025-03-04', capacity_overrides={'event': 10}),
        ])

        assert EventAvailabilityService.available_dates(product, capacity, [], [product], TODAY) == [
            '2025-03-06'
        ]

    def test_dates_are_sorted_ascending(self):
        product = EventProductFactory(id='canape')
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-04-20', capacity_overrides={'event': 10}),
            EventSlotFactory(date='2025-03-14', capacity_overrides={'event': 10}),
            EventSlotFactory(date='2025-03-28', capacity_overrides={'event': 10}),
        ])

        assert EventAvailabilityService.available_dates(product, capacity, [], [product], TODAY) == [
            '2025-03-14', '2025-03-28', '2025-04-20'
        ]

    def test_finished_and_cancelled_orders_free_the_slot(self):
        product = EventProductFactory(id='canape', workload=Decimal('1'))
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-14', capacity_overrides={'event': 10}),
        ])
        orders = [
            _booked_order(product, 10, status=OrderStatus.CANCELLED),
            _booked_order(product, 10, status=OrderStatus.DELIVERED),
            _booked_order(product, 10, status=OrderStatus.NOT_PICKED_UP),
        ]

        assert EventAvailabilityService.available_dates(product, capacity, orders, [product], TODAY) == [
            '2025-03-14'
        ]

    def test_standard_lane_load_does_not_count(self):
        product = EventProductFactory(id='canape', workload=Decimal('1'))
        standard = EventProductFactory(id='soup', workload=Decimal('1'), is_event_product=False)
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-14', capacity_overrides={'event': 10}),
        ])
        orders = [_booked_order(standard, 50)]

        assert EventAvailabilityService.available_dates(
            product, capacity, orders, [product, standard], TODAY
        ) == ['2025-03-14']

    def test_category_without_booked_load_is_offered(self):
        product = EventProductFactory(id='cake', category='pastry')
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-14', capacity_overrides={'pastry': Decimal('0.5')}),
        ])

        assert EventAvailabilityService.available_dates(product, capacity, [], [product], TODAY) == [
            '2025-03-14'
        ]

    def test_today_may_be_a_datetime(self):
        product = EventProductFactory(id='canape', lead_time_days=2)
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-02', capacity_overrides={'event': 10}),
            EventSlotFactory(date='2025-03-03', capacity_overrides={'event': 10}),
        ])

        dates = EventAvailabilityService.available_dates(
            product, capacity, [], [product], datetime(2025, 3, 1, 10, 0)
        )

        assert dates == ['2025-03-03']

    @given(
        booked=st.integers(min_value=0, max_value=200),
        limit=st.integers(min_value=0, max_value=200),
    )
    @settings(max_examples=100, deadline=5000)
    def test_strict_limit_property(self, booked, limit):
        """
        Property 4: Strict event limit
        For any booked load and slot limit the slot is offered iff limit > booked.
        """
        product = EventProductFactory(id='canape', workload=Decimal('1'))
        capacity = CapacitySettingsFactory(event_slots=[
            EventSlotFactory(date='2025-03-14', capacity_overrides={'event': limit}),
        ])
        orders = [_booked_order(product, booked)] if booked else []

        dates = EventAvailabilityService.available_dates(product, capacity, orders, [product], TODAY)

        assert (dates == ['2025-03-14']) == (limit > booked)
