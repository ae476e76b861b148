"""Custom exception classes for the application."""

class BaseAppException(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(BaseAppException):
    """Error related to configuration values or the rule table."""
    pass

class ValidationError(BaseAppException):
    """Input rejected by a component (empty name, out-of-range grade, ...)."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

class CapacityExceededError(ValidationError):
    """A record was added to a grade book that is already full."""
    def __init__(self, capacity: int):
        super().__init__(f"Cannot add more students. Tracker is at maximum capacity of {capacity}.", field="capacity")
        self.capacity = capacity

class EmptyStateError(BaseAppException):
    """A report was requested before any data was recorded."""
    pass

class UserCancelledError(BaseAppException):
    """Error raised when the user cancels an operation (Ctrl+C or end of input)."""
    pass
