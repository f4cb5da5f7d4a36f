"""
Capacity services module.

All services are exported from this module to maintain backward compatibility.
"""
from .workload_service import WorkloadService, WorkloadTotals, ResolvedItem
from .capacity_service import CapacityService, CapacityUsage, CategoryLoad, DailyOverview
from .event_availability_service import EventAvailabilityService
from .admission_service import AdmissionService, AvailabilityResult, AvailabilityStatus

__all__ = [
    'WorkloadService',
    'WorkloadTotals',
    'ResolvedItem',
    'CapacityService',
    'CapacityUsage',
    'CategoryLoad',
    'DailyOverview',
    'EventAvailabilityService',
    'AdmissionService',
    'AvailabilityResult',
    'AvailabilityStatus',
]
