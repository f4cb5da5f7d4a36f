"""
Product and category serializers for the snapshot boundary.
"""
from decimal import Decimal
from rest_framework import serializers

from apps.common.serializers import SnapshotSerializer
from apps.common.validators import validate_non_negative, validate_price_range
from ..snapshots import CategorySnapshot, ProductSnapshot


class CategorySnapshotSerializer(SnapshotSerializer):
    snapshot_class = CategorySnapshot

    id = serializers.CharField(max_length=100)
    name = serializers.CharField(max_length=200, allow_blank=True, default='')
    order = serializers.IntegerField(default=0)
    enabled = serializers.BooleanField(default=True)


class ProductSnapshotSerializer(SnapshotSerializer):
    """Serializer for catalog products, camelCase keys as stored by the storefront"""
    snapshot_class = ProductSnapshot

    id = serializers.CharField(max_length=100)
    name = serializers.CharField(max_length=200, allow_blank=True, default='')
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal('0'), validators=[validate_price_range]
    )
    category = serializers.CharField(max_length=100, allow_blank=True, default='')

    # Capacity fields
    workload = serializers.DecimalField(
        max_digits=12, decimal_places=3, allow_null=True, default=None, validators=[validate_non_negative]
    )
    workloadOverhead = serializers.DecimalField(
        source='workload_overhead', max_digits=12, decimal_places=3, allow_null=True, default=None,
        validators=[validate_non_negative]
    )
    capacityCategoryId = serializers.CharField(
        source='capacity_category_id', max_length=100, allow_blank=True, allow_null=True, default=None
    )

    # Packaging fields
    volume = serializers.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal('0'), validators=[validate_non_negative]
    )
    noPackaging = serializers.BooleanField(source='no_packaging', default=False)

    isEventProduct = serializers.BooleanField(source='is_event_product', default=False)
    leadTimeDays = serializers.IntegerField(source='lead_time_days', min_value=0, default=0)
    vatRateTakeaway = serializers.DecimalField(
        source='vat_rate_takeaway', max_digits=5, decimal_places=2, default=Decimal('0'),
        validators=[validate_non_negative]
    )
