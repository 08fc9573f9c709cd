"""Exception classes for the Zendesk SDK."""

from typing import Any, Dict, Optional, Type


class ZendeskError(Exception):
    """Base exception for all Zendesk SDK errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[str] = None,
        result: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details
        self.result = result

    def __str__(self) -> str:
        base_msg = self.message
        if self.status_code:
            base_msg = f"HTTP {self.status_code}: {base_msg}"
        if self.details:
            base_msg = f"{base_msg} - {self.details}"
        return base_msg

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"code={self.code!r})"
        )


class AuthConfigurationError(ZendeskError):
    """Raised when the credentials required by the auth mode are missing."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", "AUTH_CONFIG")
        super().__init__(message, **kwargs)


class ConfigurationError(ZendeskError):
    """Raised when the client configuration is invalid."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, code="CONFIG_ERROR", **kwargs)
        self.field = field


class RequestBodyEncodingError(ZendeskError):
    """Raised when a request body cannot be encoded as JSON."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code="BODY_ENCODING", **kwargs)


class ResponseDecodeError(ZendeskError):
    """Raised when a JSON response body cannot be decoded."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code="BODY_DECODING", **kwargs)


class NetworkError(ZendeskError):
    """Raised when the default transport cannot complete a request."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("code", "NETWORK_ERROR")
        super().__init__(message, **kwargs)
        self.url = url


class RequestTimeoutError(NetworkError):
    """Raised when the default transport times out."""

    def __init__(
        self,
        message: str,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, code="TIMEOUT", **kwargs)
        self.timeout = timeout


class EmptyResultError(ZendeskError):
    """Raised when the API returned no body where one was expected."""

    def __init__(self, message: str = "Zendesk returned an empty result", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 204)
        super().__init__(message, code="EMPTY_RESULT", **kwargs)


class NoContentError(ZendeskError):
    """Marker for a successful response without content (HTTP 204).

    Instances are returned rather than raised: a delete that comes back
    with ``204 No Content`` resolves to one of these.
    """

    def __init__(self, message: str = "No Content", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 204)
        super().__init__(message, code="NO_CONTENT", **kwargs)


class ApiError(ZendeskError):
    """Raised when the API answers with a status from the fail-code table."""

    def __init__(self, message: str, status_code: int, **kwargs: Any) -> None:
        kwargs.setdefault("code", "API_ERROR")
        super().__init__(message, status_code=status_code, **kwargs)


class BadRequestError(ApiError):
    """Raised on HTTP 400."""

    def __init__(self, message: str = "Bad Request", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 400)
        super().__init__(message, code="BAD_REQUEST", **kwargs)


class UnauthorizedError(ApiError):
    """Raised when authentication is required or invalid (HTTP 401)."""

    def __init__(self, message: str = "Not Authorized", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 401)
        super().__init__(message, code="UNAUTHORIZED", **kwargs)


class ForbiddenError(ApiError):
    """Raised when access is forbidden (HTTP 403)."""

    def __init__(self, message: str = "Forbidden", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 403)
        super().__init__(message, code="FORBIDDEN", **kwargs)


class NotFoundError(ApiError):
    """Raised when a resource is not found (HTTP 404)."""

    def __init__(self, message: str = "Item not found", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 404)
        super().__init__(message, code="NOT_FOUND", **kwargs)


class RateLimitError(ApiError):
    """Raised when the API signals throttling (HTTP 429 or a Retry-After header)."""

    def __init__(
        self,
        message: str = "Too Many Requests",
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("status_code", 429)
        super().__init__(message, code="RATE_LIMITED", **kwargs)
        self.retry_after = retry_after


class ServerError(ApiError):
    """Raised when the server returns a 5xx error."""

    def __init__(self, message: str = "Internal Server Error", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 500)
        super().__init__(message, code="SERVER_ERROR", **kwargs)


class PaginationFetchError(ZendeskError):
    """Raised when a page fetch fails during a paginated walk."""

    def __init__(self, message: str, page_uri: Optional[Any] = None, **kwargs: Any) -> None:
        kwargs.setdefault("code", "PAGINATION_FAILED")
        super().__init__(message, **kwargs)
        self.page_uri = page_uri


class UploadError(ZendeskError):
    """Raised when a file upload fails."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", "UPLOAD_FAILED")
        super().__init__(message, **kwargs)


FAIL_CODES: Dict[int, str] = {
    400: "Bad Request",
    401: "Not Authorized",
    403: "Forbidden",
    404: "Item not found",
    405: "Method not Allowed",
    409: "Conflict",
    422: "Unprocessable Entity",
    429: "Too Many Requests",
    500: "Internal Server Error",
    503: "Service Unavailable",
}

_STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def api_error_for(status_code: int, result: Optional[Any] = None) -> ApiError:
    """Build the classified error for a status from the fail-code table."""
    message = f"Zendesk Error ({status_code}): {FAIL_CODES.get(status_code, 'Unknown error')}"
    details = None
    if isinstance(result, dict):
        error = result.get("error")
        details = result.get("description") or (error if isinstance(error, str) else None)

    error_class = _STATUS_ERRORS.get(status_code)
    if error_class is not None:
        return error_class(message, status_code=status_code, details=details, result=result)
    if 500 <= status_code < 600:
        return ServerError(message, status_code=status_code, details=details, result=result)
    return ApiError(message, status_code=status_code, details=details, result=result)
