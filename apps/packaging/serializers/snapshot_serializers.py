"""
Packaging serializers for the snapshot boundary.
"""
from decimal import Decimal
from rest_framework import serializers

from apps.common.serializers import SnapshotSerializer
from apps.common.validators import validate_non_negative, validate_price_range
from ..snapshots import PackagingSettings, PackagingTypeSnapshot


class PackagingTypeSnapshotSerializer(SnapshotSerializer):
    snapshot_class = PackagingTypeSnapshot

    id = serializers.CharField(max_length=100, allow_blank=True, default='')
    name = serializers.CharField(max_length=200, allow_blank=True, default='')
    volume = serializers.DecimalField(max_digits=12, decimal_places=2, validators=[validate_non_negative])
    price = serializers.DecimalField(max_digits=12, decimal_places=2, validators=[validate_price_range])
    enabled = serializers.BooleanField(default=True)


class PackagingSettingsSerializer(SnapshotSerializer):
    """Packaging section of the global settings"""
    snapshot_class = PackagingSettings

    types = PackagingTypeSnapshotSerializer(many=True, required=False)
    freeFrom = serializers.DecimalField(
        source='free_from', max_digits=12, decimal_places=2, default=Decimal('0'),
        validators=[validate_non_negative]
    )

    def create(self, validated_data):
        return PackagingSettings(
            types=[PackagingTypeSnapshot(**packaging) for packaging in validated_data.get('types', [])],
            free_from=validated_data.get('free_from', Decimal('0')),
        )
