class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class StorageError(DomainError):
    """Raised when the record store is unreachable or a query fails."""


class InvariantViolation(DomainError):
    """Raised when stored punch data breaks the one-open-session rule."""
