"""
Price, quantity and percentage validators.
"""
from rest_framework import serializers
from decimal import Decimal


def validate_price_range(value, min_value=0, max_value=None):
    """
    Validate price is within acceptable range.

    Args:
        value: Price decimal
        min_value: Minimum allowed price (default: 0)
        max_value: Maximum allowed price (optional)

    Raises:
        serializers.ValidationError: If price is outside valid range

    Returns:
        decimal.Decimal: Validated price
    """
    if value < min_value:
        raise serializers.ValidationError(f"Price must be at least {min_value}.")

    if max_value is not None and value > max_value:
        raise serializers.ValidationError(f"Price must not exceed {max_value}.")

    return value


def validate_quantity(value, min_value=1):
    """
    Validate quantity is positive and meets minimum requirement.

    Args:
        value: Quantity integer
        min_value: Minimum allowed quantity (default: 1)

    Raises:
        serializers.ValidationError: If quantity is invalid

    Returns:
        int: Validated quantity
    """
    if value < min_value:
        raise serializers.ValidationError(f"Quantity must be at least {min_value}.")

    return value


def validate_non_negative(value):
    """Validate workload, volume or capacity is not negative"""
    if value < 0:
        raise serializers.ValidationError("Value must not be negative.")
    return value


def validate_percentage(value):
    """
    Validate a percentage discount value.

    Raises:
        serializers.ValidationError: If value is outside 0-100
    """
    if value < Decimal('0') or value > Decimal('100'):
        raise serializers.ValidationError("Percentage must be between 0 and 100.")
    return value
