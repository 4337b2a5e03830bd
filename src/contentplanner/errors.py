"""Error taxonomy for content plan generation.

Every failure surfaced by the tool derives from :class:`PlannerError` and is
terminal for the call that raised it.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class PlannerError(Exception):
    """Base class for classified planning failures."""

    code = "PLANNER_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": str(self),
            "details": self.details,
        }


class ValidationError(PlannerError, ValueError):
    """Raised when caller-supplied input violates the input schema."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class ConfigurationError(PlannerError):
    """Raised when a required setting (the API credential) is missing."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, setting: str | None = None) -> None:
        super().__init__(message, details={"setting": setting} if setting else None)
        self.setting = setting


class TransportError(PlannerError):
    """Raised when the completion endpoint cannot be reached or answers non-2xx."""

    code = "TRANSPORT_ERROR"

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message, details={"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class RequestTimeoutError(PlannerError):
    """Raised when the completion endpoint does not answer within the deadline."""

    code = "REQUEST_TIMEOUT"

    def __init__(self, message: str, timeout: float | None = None) -> None:
        super().__init__(message, details={"timeout": timeout})
        self.timeout = timeout


class EmptyResponseError(PlannerError):
    """Raised when a successful response carries no message content."""

    code = "EMPTY_RESPONSE"


class MalformedOutputError(PlannerError):
    """Raised when the message content is not JSON at all."""

    code = "MALFORMED_OUTPUT"

    def __init__(self, message: str, content: str = "") -> None:
        super().__init__(message, details={"content": content})
        self.content = content


class SchemaValidationError(PlannerError):
    """Raised when parsed JSON does not match the plan schema."""

    code = "SCHEMA_VALIDATION_ERROR"

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message, details={"path": path})
        self.path = path
