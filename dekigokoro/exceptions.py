"""Custom exceptions for the Dekigokoro API client."""


class DekigokoroError(Exception):
    """Base exception for Dekigokoro client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidArgumentError(DekigokoroError, ValueError):
    """Bad input rejected before any request was sent."""

    pass


class DekigokoroTransportError(DekigokoroError):
    """The request could not complete (DNS, connection, TLS, timeout)."""

    pass


class DekigokoroDecodeError(DekigokoroError):
    """Response body is not valid JSON or has the wrong shape."""

    pass


class DekigokoroHTTPError(DekigokoroError):
    """The API answered with a non-success status code."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message, status_code=status_code, body=body)


class DekigokoroBadRequestError(DekigokoroHTTPError):
    """Invalid request parameters (400)."""

    pass


class DekigokoroAuthError(DekigokoroHTTPError):
    """Authentication failed (401/403)."""

    pass


class DekigokoroNotFoundError(DekigokoroHTTPError):
    """Resource not found (404)."""

    pass


class DekigokoroRateLimitError(DekigokoroHTTPError):
    """Rate limit exceeded (429)."""

    pass


class DekigokoroServerError(DekigokoroHTTPError):
    """Server-side error (5xx)."""

    pass


def error_for_status(status_code: int) -> type[DekigokoroHTTPError]:
    """Pick the most specific HTTP error class for a status code."""
    if status_code == 400:
        return DekigokoroBadRequestError
    elif status_code in (401, 403):
        return DekigokoroAuthError
    elif status_code == 404:
        return DekigokoroNotFoundError
    elif status_code == 429:
        return DekigokoroRateLimitError
    elif status_code >= 500:
        return DekigokoroServerError
    return DekigokoroHTTPError
