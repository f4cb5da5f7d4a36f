"""
Order services module.

All services are exported from this module to maintain backward compatibility.
"""
from .order_pricing_service import OrderPricingService, OrderTotals

__all__ = [
    'OrderPricingService',
    'OrderTotals',
]
