"""Domain exceptions.

All domain-level errors raised by the catalog. Each error carries a
machine-readable code and the HTTP status the API layer maps it to,
so routers never translate errors by hand.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code: str = "DOMAIN_ERROR"
    status_code: int = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Request Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when a request parameter or entity field is malformed.

    The offending field is always named so callers can point at it.
    """

    error_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        """Initialize validation error.

        Args:
            field: Name of the offending field.
            message: Explanation of what is wrong with it.
            value: The rejected value, if useful for diagnostics.
        """
        super().__init__(
            f"Invalid {field}: {message}",
            details={"field": field, "reason": message, "value": value},
        )
        self.field = field
        self.reason = message


class NotFoundError(DomainError):
    """Raised when a specific entity is looked up by id and is absent.

    A filter that matches zero products is an empty result, never this.
    """

    status_code = 404

    def __init__(self, entity_type: str, entity_id: Any) -> None:
        """Initialize not found error.

        Args:
            entity_type: Type of entity (e.g., "Product", "Category").
            entity_id: The id that was looked up.
        """
        super().__init__(
            f"{entity_type} not found: {entity_id}",
            details={"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id

    @property
    def error_code(self) -> str:  # type: ignore[override]
        """Entity specific code, e.g. PRODUCT_NOT_FOUND."""
        return f"{self.entity_type.upper()}_NOT_FOUND"


# ============================================================================
# Infrastructure Errors
# ============================================================================


class StoreUnavailableError(DomainError):
    """Raised when the product store cannot be reached or timed out.

    Never retried by the catalog itself.
    """

    error_code = "STORE_UNAVAILABLE"
    status_code = 503

    def __init__(self, reason: str, operation: str | None = None) -> None:
        """Initialize store unavailable error.

        Args:
            reason: What went wrong talking to the store.
            operation: Store operation that failed.
        """
        super().__init__(
            f"Product store unavailable: {reason}",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation
