"""
Tests for order total recalculation.
"""
from decimal import Decimal

from hypothesis import given, strategies as st, settings

from apps.orders.services import OrderPricingService
from apps.orders.snapshots import AppliedDiscount
from tests.factories import CartItemFactory, DiscountCodeFactory, PackagingSettingsFactory

TODAY = '2025-03-01'


class TestOrderPricing:

    def test_items_total(self):
        items = [CartItemFactory(price=Decimal('120.50'), quantity=2), CartItemFactory(price=10)]

        assert OrderPricingService.items_total(items) == Decimal('251.00')

    def test_discounts_never_reduce_the_fees(self):
        total = OrderPricingService.final_total(
            Decimal('100'), [AppliedDiscount(code='A', amount=80), AppliedDiscount(code='B', amount=80)],
            packaging_fee=Decimal('35'), delivery_fee=Decimal('90'),
        )

        assert total == Decimal('125')

    def test_fee_vat_rate_is_the_highest_item_rate(self):
        items = [CartItemFactory(vat_rate_takeaway=12), CartItemFactory(vat_rate_takeaway=21)]

        assert OrderPricingService.fee_vat_rate(items) == Decimal('21')
        assert OrderPricingService.fee_vat_rate([]) == Decimal('0')

    def test_recalculate_after_cart_change(self):
        codes = [DiscountCodeFactory(code='SALE', value=10, min_order_value=Decimal('500'))]
        packaging = PackagingSettingsFactory(free_from=Decimal('5000'))
        items = [CartItemFactory(price=200, volume=Decimal('1000'), quantity=2)]

        totals = OrderPricingService.recalculate(
            items, [AppliedDiscount(code='SALE', amount=60)], codes, [], packaging,
            delivery_fee=Decimal('50'), today=TODAY,
        )

        assert totals.items_total == Decimal('400')
        assert totals.applied_discounts == ()
        assert totals.removed_discount_codes == ('SALE',)
        assert totals.packaging_fee == Decimal('60')
        assert totals.package_count == 1
        assert totals.final_total == Decimal('510')

    def test_recalculate_keeps_valid_discounts_with_fresh_amounts(self):
        codes = [DiscountCodeFactory(code='SALE', value=10)]
        packaging = PackagingSettingsFactory(free_from=Decimal('100'))
        items = [CartItemFactory(price=300)]

        totals = OrderPricingService.recalculate(
            items, [AppliedDiscount(code='SALE', amount=5)], codes, [], packaging, today=TODAY,
        )

        assert totals.applied_discounts == (AppliedDiscount(code='SALE', amount=Decimal('30')),)
        assert totals.discount_total == Decimal('30')
        assert totals.packaging_fee == Decimal('0')
        assert totals.final_total == Decimal('270')

    @given(
        items_total=st.decimals(min_value=0, max_value=10000, places=2),
        discounts=st.lists(st.decimals(min_value=0, max_value=10000, places=2), max_size=4),
        packaging_fee=st.decimals(min_value=0, max_value=500, places=2),
        delivery_fee=st.decimals(min_value=0, max_value=500, places=2),
    )
    @settings(max_examples=100, deadline=5000)
    def test_final_total_covers_fees_property(self, items_total, discounts, packaging_fee, delivery_fee):
        """
        Property 10: Final total
        For any discounts the final total is never below the sum of the fees.
        """
        applied = [AppliedDiscount(code=f"C{i}", amount=amount) for i, amount in enumerate(discounts)]

        total = OrderPricingService.final_total(items_total, applied, packaging_fee, delivery_fee)

        assert total >= packaging_fee + delivery_fee
        assert total <= items_total + packaging_fee + delivery_fee
