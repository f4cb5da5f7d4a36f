"""
Packaging services module.
"""
from .packaging_service import PackagingService

__all__ = [
    'PackagingService',
]
