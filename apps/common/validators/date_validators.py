"""
Validators for ISO date keys used by orders, day configs and event slots.
"""
from datetime import date

from rest_framework import serializers


def validate_iso_date(value, allow_blank=False):
    """
    Validate a YYYY-MM-DD date string.

    Dates are kept as strings so that they compare lexicographically in
    chronological order; anything that is not zero-padded ISO breaks that.

    Raises:
        serializers.ValidationError: If value is not a valid ISO date
    """
    if not value:
        if allow_blank:
            return ''
        raise serializers.ValidationError("Date is required.")

    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        raise serializers.ValidationError(f"'{value}' is not a valid YYYY-MM-DD date.")

    if parsed.isoformat() != value:
        raise serializers.ValidationError(f"'{value}' is not a valid YYYY-MM-DD date.")
    return value


def validate_unique_dates(entries, field_name='date'):
    """
    Validate that each entry of a day config / event slot list has its own date.

    Raises:
        serializers.ValidationError: If a date occurs more than once
    """
    seen = set()
    duplicates = []
    for entry in entries:
        key = entry.get(field_name)
        if key in seen:
            duplicates.append(key)
        seen.add(key)

    if duplicates:
        raise serializers.ValidationError(
            f"Duplicate dates: {', '.join(sorted(set(duplicates)))}"
        )
    return entries
