"""
Capacity settings serializers for the snapshot boundary.
"""
from decimal import Decimal
from rest_framework import serializers

from apps.common.serializers import SnapshotSerializer
from apps.common.validators import validate_iso_date, validate_non_negative, validate_unique_dates
from apps.products.serializers import CategorySnapshotSerializer
from apps.products.snapshots import CategorySnapshot
from ..snapshots import CapacitySettings, DayConfigSnapshot, EventSlotSnapshot


def capacity_map_field(**kwargs):
    """Category id -> capacity points"""
    return serializers.DictField(
        child=serializers.DecimalField(max_digits=12, decimal_places=3, validators=[validate_non_negative]),
        **kwargs
    )


class DayConfigSnapshotSerializer(SnapshotSerializer):
    snapshot_class = DayConfigSnapshot

    date = serializers.CharField(validators=[validate_iso_date])
    isOpen = serializers.BooleanField(source='is_open', default=True)
    capacityOverrides = capacity_map_field(source='capacity_overrides', default=dict)


class EventSlotSnapshotSerializer(SnapshotSerializer):
    snapshot_class = EventSlotSnapshot

    date = serializers.CharField(validators=[validate_iso_date])
    capacityOverrides = capacity_map_field(source='capacity_overrides', default=dict)


class CapacitySettingsSerializer(SnapshotSerializer):
    """Global capacity settings together with the day configs and event slots"""
    snapshot_class = CapacitySettings

    categories = CategorySnapshotSerializer(many=True, required=False)
    defaultCapacities = capacity_map_field(source='default_capacities', default=dict)
    dayConfigs = DayConfigSnapshotSerializer(source='day_configs', many=True, required=False)
    eventSlots = EventSlotSnapshotSerializer(source='event_slots', many=True, required=False)

    def validate_dayConfigs(self, value):
        return validate_unique_dates(value)

    def validate_eventSlots(self, value):
        return validate_unique_dates(value)

    def create(self, validated_data):
        return CapacitySettings(
            categories=[CategorySnapshot(**category) for category in validated_data.get('categories', [])],
            default_capacities=validated_data.get('default_capacities', {}),
            day_configs=[DayConfigSnapshot(**config) for config in validated_data.get('day_configs', [])],
            event_slots=[EventSlotSnapshot(**slot) for slot in validated_data.get('event_slots', [])],
        )
