"""
Errors raised by GraphQL resolvers
"""


class CompanyNotFoundError(LookupError):
    """Raised when no company matches the requested ID."""

    def __init__(self, message: str = "Company not found"):
        super().__init__(message)


class CompanyValidationError(ValueError):
    """Raised when mutation arguments break a field rule."""
