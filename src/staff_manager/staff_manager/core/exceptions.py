class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class BackupError(DomainError):
    """Raised when a database backup could not be produced."""
