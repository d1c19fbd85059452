class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class UnauthorizedError(DomainError):
    """Raised when a request carries no session token."""


class AuthorizationError(DomainError):
    """Raised when a token is invalid or the caller lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a resource is absent or not visible to the caller."""


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or unsafe."""
