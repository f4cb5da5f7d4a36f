"""
Discount code serializers for the snapshot boundary.
"""
from decimal import Decimal
from rest_framework import serializers

from apps.common.serializers import SnapshotSerializer
from apps.common.validators import validate_iso_date, validate_non_negative, validate_percentage
from ..snapshots import DiscountCodeSnapshot, DiscountType


class DiscountCodeSnapshotSerializer(SnapshotSerializer):
    """Serializer for discount code definitions"""
    snapshot_class = DiscountCodeSnapshot

    code = serializers.CharField(max_length=50)
    type = serializers.ChoiceField(choices=[discount_type.value for discount_type in DiscountType])
    value = serializers.DecimalField(max_digits=12, decimal_places=2, validators=[validate_non_negative])
    validFrom = serializers.CharField(source='valid_from', allow_blank=True, default='')
    validTo = serializers.CharField(source='valid_to', allow_blank=True, default='')
    minOrderValue = serializers.DecimalField(
        source='min_order_value', max_digits=12, decimal_places=2, default=Decimal('0'),
        validators=[validate_non_negative]
    )
    maxUsage = serializers.IntegerField(source='max_usage', min_value=0, default=0)
    enabled = serializers.BooleanField(default=True)
    applicableCategories = serializers.ListField(
        source='applicable_categories', child=serializers.CharField(max_length=100), default=list
    )
    isEventOnly = serializers.BooleanField(source='is_event_only', default=False)
    isStackable = serializers.BooleanField(source='is_stackable', default=False)

    def validate_validFrom(self, value):
        return validate_iso_date(value, allow_blank=True)

    def validate_validTo(self, value):
        return validate_iso_date(value, allow_blank=True)

    def validate(self, attrs):
        """Validate percentage range and the validity window"""
        if attrs['type'] == DiscountType.PERCENTAGE.value:
            try:
                validate_percentage(attrs['value'])
            except serializers.ValidationError as exc:
                raise serializers.ValidationError({'value': exc.detail})

        valid_from = attrs.get('valid_from')
        valid_to = attrs.get('valid_to')
        if valid_from and valid_to and valid_from > valid_to:
            raise serializers.ValidationError({'validTo': 'End of validity must not precede its start.'})
        return attrs
