"""Error Hierarchy — one typed exception per way a discovery, like, message or photo request can fail.

Invariants:
    - Each subclass fixes its code, category, severity and HTTP status as class attributes
    - Client mistakes map to 4xx with WARNING/ERROR severity; storage failures to 503 CRITICAL
    - to_response() is the only shape clients see: {"error": {...}}
    - The "context" block lists only the user/resource ids that were actually set

Design Decisions:
    - Class attributes instead of per-instance constructor arguments: a code is a
      property of the failure kind, BusinessRuleError alone overrides it per raise
    - ErrorContext stays a plain dataclass so core/ never imports logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PERMISSION = "permission"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Who acted on what when the error was raised."""
    user_id: int | None = None
    resource_id: int | None = None
    debug_info: dict[str, Any] | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def ids(self) -> dict[str, int]:
        return {
            name: value
            for name, value in (("user_id", self.user_id), ("resource_id", self.resource_id))
            if value is not None
        }


class DatingError(Exception):
    """Base for every failure the API reports to a client."""

    code = "INTERNAL_ERROR"
    category = ErrorCategory.INTERNAL
    severity = ErrorSeverity.ERROR
    http_status = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        ids = self.context.ids()
        if ids:
            body["context"] = ids
        return {"error": body}

    def log_fields(self) -> dict:
        """Extra fields for the structured log line describing this error."""
        return {"error_code": self.code, **self.context.ids()}


# ─── Request errors (4xx) ───────────────────────────────────────

class ResourceNotFoundError(DatingError):
    """Requested user, message or photo does not exist."""
    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        context = context or ErrorContext()
        context.resource_id = resource_id
        super().__init__(f"{resource_type} '{resource_id}' not found", context)
        self.resource_type = resource_type


class ForbiddenError(DatingError):
    """Acting user lacks rights over the target entity."""
    code = "FORBIDDEN"
    category = ErrorCategory.PERMISSION
    severity = ErrorSeverity.WARNING
    http_status = 403


class DuplicateLikeError(DatingError):
    """Like edge (liker, likee) already exists."""
    code = "DUPLICATE_LIKE"
    category = ErrorCategory.CONFLICT
    severity = ErrorSeverity.WARNING
    http_status = 400

    def __init__(self, liker_id: int, likee_id: int, context: ErrorContext | None = None):
        super().__init__("You already like this user", context)
        self.liker_id = liker_id
        self.likee_id = likee_id


class UnknownRecipientError(DatingError):
    """Like or message target does not resolve to an existing user."""
    code = "UNKNOWN_RECIPIENT"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(self, recipient_id: int, context: ErrorContext | None = None):
        context = context or ErrorContext()
        context.resource_id = recipient_id
        super().__init__(f"Recipient '{recipient_id}' does not exist", context)
        self.recipient_id = recipient_id


class BusinessRuleError(DatingError):
    """A domain rule rejected the operation, e.g. deleting the main photo."""
    category = ErrorCategory.BUSINESS_RULE
    severity = ErrorSeverity.WARNING
    http_status = 400

    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(message, context)
        self.code = code


# ─── Storage errors (5xx) ───────────────────────────────────────

class PersistenceError(DatingError):
    """Commit reported no changed rows or the storage layer raised."""
    code = "PERSISTENCE_FAILURE"
    category = ErrorCategory.DATABASE
    severity = ErrorSeverity.CRITICAL
    http_status = 503

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(f"Saving {operation} failed: {message}", context)
        self.operation = operation
