"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .price_validators import (
    validate_price_range, validate_quantity, validate_non_negative, validate_percentage
)
from .date_validators import validate_iso_date, validate_unique_dates

__all__ = [
    'validate_price_range',
    'validate_quantity',
    'validate_non_negative',
    'validate_percentage',
    'validate_iso_date',
    'validate_unique_dates',
]
