"""
Base serializer for the snapshot boundary.

Payloads arrive in the camelCase shape the storefront keeps them in; the
serializers validate them and build frozen snapshot dataclasses that the
capacity, discount and packaging services consume.
"""
import logging

from rest_framework import serializers

from ..exceptions import SnapshotValidationError

logger = logging.getLogger(__name__)


class SnapshotSerializer(serializers.Serializer):
    """Serializer whose save() returns an immutable snapshot"""

    snapshot_class = None

    def create(self, validated_data):
        return self.snapshot_class(**validated_data)


def load_snapshot(serializer_class, payload, many=False):
    """
    Validate a payload and return the snapshot (or list of snapshots).

    Raises:
        SnapshotValidationError: If the payload does not validate
    """
    serializer = serializer_class(data=payload, many=many)
    if not serializer.is_valid():
        snapshot_name = getattr(serializer_class.snapshot_class, '__name__', '')
        logger.warning(f"Rejected {snapshot_name} payload: {serializer.errors}")
        raise SnapshotValidationError(serializer.errors, snapshot_name)
    return serializer.save()
