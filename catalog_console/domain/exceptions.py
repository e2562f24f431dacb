"""Domain exceptions.

The draft core never raises for a missing tab or item; those calls
degrade to no-ops. The errors below are raised at the session
boundary, where a request names something that cannot be acted on.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code: str = "DOMAIN_ERROR"

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
# Session Errors
# ============================================================================


class DraftSessionNotFoundError(DomainError):
    """Raised when an editing session does not exist or was discarded."""

    error_code = "DRAFT_SESSION_NOT_FOUND"

    def __init__(self, session_id: str) -> None:
        """Initialize session not found error.

        Args:
            session_id: The unknown session ID.
        """
        super().__init__(
            f"Draft session not found: {session_id}",
            details={"session_id": session_id},
        )


# ============================================================================
# Catalog Errors
# ============================================================================


class ProductNotInCatalogError(DomainError):
    """Raised when selecting a product the catalog does not know."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        """Initialize product not in catalog error.

        Args:
            product_id: The unknown product ID.
        """
        super().__init__(
            f"Product not found in catalog: {product_id}",
            details={"product_id": product_id},
        )


# ============================================================================
# Validation Errors
# ============================================================================


class DraftValidationError(DomainError):
    """Raised when a draft fails boundary validation on submit.

    Attributes:
        issues: The validation issues that blocked submission.
    """

    error_code = "DRAFT_VALIDATION_FAILED"

    def __init__(self, session_id: str, issues: list[Any]) -> None:
        """Initialize draft validation error.

        Args:
            session_id: Session whose draft failed validation.
            issues: List of ValidationIssue values.
        """
        self.issues = list(issues)
        super().__init__(
            f"Draft has {len(self.issues)} validation issue(s)",
            details={
                "session_id": session_id,
                "issue_count": len(self.issues),
            },
        )
