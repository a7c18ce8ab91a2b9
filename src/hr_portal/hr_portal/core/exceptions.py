class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateError(ValidationError):
    """Raised when a date value cannot be parsed."""

    def __init__(self, value: object, field_name: str = "date"):
        self.value = value
        self.field_name = field_name
        super().__init__(f"Enter a valid {field_name}.")


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a requested row does not exist."""
