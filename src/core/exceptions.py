class DomainError(Exception):
    """Base class for domain-specific errors."""

    pass


class DraftRequestValidationError(DomainError):
    """Exception raised when a draft request is missing or has invalid fields."""

    pass


class SourceItemNotFoundError(DomainError):
    """Exception raised when a request references an unknown source item."""

    pass
