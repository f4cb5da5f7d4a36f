from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle; orders are never deleted, only moved to a terminal status"""
    CREATED = 'created'
    CONFIRMED = 'confirmed'
    PREPARING = 'preparing'
    READY = 'ready'
    ON_WAY = 'on_way'
    DELIVERED = 'delivered'
    NOT_PICKED_UP = 'not_picked_up'
    CANCELLED = 'cancelled'


# Which orders still consume capacity depends on who is asking.
# Production views: only work that still has to be cooked or handed over.
PRODUCTION_EXCLUDED_STATUSES = frozenset({
    OrderStatus.DELIVERED,
    OrderStatus.NOT_PICKED_UP,
    OrderStatus.CANCELLED,
})

# Dashboard and admission checks: everything except cancelled orders.
DASHBOARD_EXCLUDED_STATUSES = frozenset({
    OrderStatus.CANCELLED,
})

# Event date picker.
EVENT_EXCLUDED_STATUSES = PRODUCTION_EXCLUDED_STATUSES
