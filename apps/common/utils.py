"""
Common helpers for snapshot values: decimals, ISO dates, read-only copies.
"""
from datetime import date, datetime, timedelta
from decimal import Decimal
from types import MappingProxyType

from django.utils import timezone


def to_decimal(value) -> Decimal:
    """Convert int/float/str/None into a Decimal (None becomes 0)"""
    if value is None or value == '':
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def frozen_mapping(values, cast=to_decimal):
    """Copy a mapping into a read-only proxy, casting every value"""
    return MappingProxyType({str(key): cast(value) for key, value in dict(values or {}).items()})


def add_days(iso_date: str, days: int) -> str:
    """Shift an ISO date string by whole days"""
    return (date.fromisoformat(iso_date) + timedelta(days=days)).isoformat()


def local_today() -> str:
    """Today's date in the configured TIME_ZONE as an ISO string"""
    return timezone.localdate().isoformat()


def as_iso_date(value) -> str:
    """Accept a date, a datetime or an ISO string and return the ISO date string"""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    return value
