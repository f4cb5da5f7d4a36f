"""
Packaging snapshots module.
"""
from .packaging import PackagingTypeSnapshot, PackagingSettings

__all__ = [
    'PackagingTypeSnapshot',
    'PackagingSettings',
]
