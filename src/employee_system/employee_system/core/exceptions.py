class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when form data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when the current role lacks permission for an action."""


class ConfigurationError(DomainError):
    """Raised when the remote service URL or API key is missing."""


class AuthError(DomainError):
    """Raised when sign-in credentials are rejected."""


class RemoteOperationError(DomainError):
    """Raised when a query or mutation against the remote store fails."""


class RecordNotFound(DomainError):
    """Raised when a lookup that must match exactly one row matches none."""


class AmbiguousRecord(DomainError):
    """Raised when a lookup that must match exactly one row matches several."""
