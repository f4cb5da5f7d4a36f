"""
Engine exceptions.

Business outcomes (full dates, rejected discount codes) are returned as values;
exceptions are reserved for malformed input at the snapshot boundary.
"""


class CateringEngineError(Exception):
    pass


class SnapshotValidationError(CateringEngineError):
    """Raised when a payload cannot be turned into a snapshot"""

    def __init__(self, errors, snapshot_name=''):
        message = f"Invalid {snapshot_name} snapshot" if snapshot_name else "Invalid snapshot"
        super().__init__(message)
        self.errors = errors
        self.snapshot_name = snapshot_name
