"""
Order serializers for the snapshot boundary.
"""
from decimal import Decimal
from rest_framework import serializers

from apps.common.serializers import SnapshotSerializer
from apps.common.validators import validate_iso_date, validate_quantity, validate_non_negative
from apps.products.serializers import ProductSnapshotSerializer
from ..snapshots import AppliedDiscount, CartItemSnapshot, OrderSnapshot, OrderStatus


class CartItemSnapshotSerializer(ProductSnapshotSerializer):
    """Line item: the product as ordered plus the quantity"""
    snapshot_class = CartItemSnapshot

    quantity = serializers.IntegerField(validators=[validate_quantity])


class AppliedDiscountSerializer(SnapshotSerializer):
    snapshot_class = AppliedDiscount

    code = serializers.CharField(max_length=50)
    amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal('0'), validators=[validate_non_negative]
    )


class OrderSnapshotSerializer(SnapshotSerializer):
    """Serializer for already-persisted orders handed to the engine"""
    snapshot_class = OrderSnapshot

    id = serializers.CharField(max_length=100)
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus])
    deliveryDate = serializers.CharField(source='delivery_date', validators=[validate_iso_date])
    items = CartItemSnapshotSerializer(many=True, required=False)
    appliedDiscounts = AppliedDiscountSerializer(source='applied_discounts', many=True, required=False)
    packagingFee = serializers.DecimalField(
        source='packaging_fee', max_digits=12, decimal_places=2, default=Decimal('0')
    )
    deliveryFee = serializers.DecimalField(
        source='delivery_fee', max_digits=12, decimal_places=2, default=Decimal('0')
    )

    def create(self, validated_data):
        items = [CartItemSnapshot(**item) for item in validated_data.pop('items', [])]
        applied = [AppliedDiscount(**discount) for discount in validated_data.pop('applied_discounts', [])]
        return OrderSnapshot(items=items, applied_discounts=applied, **validated_data)
