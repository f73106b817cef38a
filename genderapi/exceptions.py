"""
Custom exceptions for the GenderAPI client
Every failure surfaced to callers is one of these kinds
"""
from typing import Any, Dict, Optional

# Raw bodies attached to error messages are cut to this many characters
MAX_BODY_PREVIEW = 500


def _preview(body: Optional[str]) -> str:
    if not body:
        return ""
    if len(body) > MAX_BODY_PREVIEW:
        return body[:MAX_BODY_PREVIEW] + "..."
    return body


class GenderAPIError(Exception):
    """Base exception for all GenderAPI client errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for host-side reporting"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(GenderAPIError):
    """Raised when a required input is missing or malformed, before any request is sent"""

    def __init__(self, message: str, field: Optional[str] = None, **details):
        self.field = field
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **details} if field else details,
        )


class ConfigurationError(GenderAPIError):
    """Raised when client configuration is invalid or missing"""

    def __init__(self, message: str, setting: Optional[str] = None):
        self.setting = setting
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting} if setting else {},
        )


class TransportError(GenderAPIError):
    """Raised when the request could not be sent or no response was received"""

    def __init__(self, cause: str, endpoint: Optional[str] = None):
        self.cause = cause
        self.endpoint = endpoint
        super().__init__(
            message=f"GenderAPI request failed: {cause}",
            error_code="TRANSPORT_ERROR",
            details={"endpoint": endpoint, "cause": cause},
        )


class ServerError(GenderAPIError):
    """Raised when the service reports a failure the client cannot recover from"""

    def __init__(
        self,
        status_code: int,
        response_body: Optional[str] = None,
        response_data: Any = None,
        errno: Optional[int] = None,
        errmsg: Optional[str] = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        self.response_data = response_data
        self.errno = errno
        self.errmsg = errmsg

        message = f"GenderAPI server error: HTTP {status_code}"
        if errmsg:
            message += f" ({errmsg})"
        body = _preview(response_body)
        if body:
            message += f" - {body}"

        super().__init__(
            message=message,
            error_code="SERVER_ERROR",
            details={
                "status_code": status_code,
                "errno": errno,
                "errmsg": errmsg,
                "response_body": body,
            },
        )


class InvalidResponseError(GenderAPIError):
    """Raised when the response body is not valid JSON, whatever the status code"""

    def __init__(self, status_code: int, response_body: Optional[str] = None):
        self.status_code = status_code
        self.response_body = response_body
        body = _preview(response_body)
        super().__init__(
            message=f"GenderAPI response is not valid JSON: HTTP {status_code} - {body!r}",
            error_code="INVALID_RESPONSE",
            details={"status_code": status_code, "response_body": body},
        )
