"""Domain errors for the calorie tracker."""


class TrackerError(Exception):
    """Base class for calorie tracker errors."""


class ValidationError(TrackerError):
    """Raised when user-supplied input is rejected."""


class StorageReadError(TrackerError):
    """Raised when persisted data is present but cannot be parsed."""


class NotFoundError(TrackerError):
    """Raised when a requested entry does not exist."""
