class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class SchedulerError(AppError):
    """Raised when the scheduler is asked to work on input it cannot repair."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)

class GridDefinitionError(SchedulerError):
    """Raised when a weekly grid has empty or duplicate day/time labels."""
    def __init__(self, message: str, labels: list[str] | None = None):
        super().__init__(message, details={"labels": list(labels or [])})

class ConfigurationError(AppError):
    """Raised when system configuration is invalid."""
    def __init__(self, message: str):
        super().__init__(message, status_code=500)
