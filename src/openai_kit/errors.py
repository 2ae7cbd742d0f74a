"""Errors raised while sending a request or consuming its response.

Every failure surfaces as a ``RequestError``. The subclasses say where it
was detected; ``code`` carries the HTTP status when one exists, else -1::

    try:
        response = await client.chat_completion.request(request)
    except RequestError as e:
        print(str(e))  # "Error: Response with non-success status code code: 429"
"""

NO_STATUS_CODE = -1

NON_SUCCESS_STATUS_MESSAGE = "Response with non-success status code"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class RequestError(Exception):
    """Base error for request failures. ``code`` is -1 when no HTTP status is available."""

    def __init__(self, message: str = "", code: int = NO_STATUS_CODE) -> None:
        super().__init__(message, code)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"Error: {self.message} code: {self.code}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code})"

    def __reduce__(self):
        # pickle and copy rebuild from constructor arguments, not self.args
        return type(self), (self.message, self.code)


class TransportFailure(RequestError):
    """Network failure before any status was received (DNS, TLS, timeout, reset)."""


class HTTPStatusFailure(RequestError):
    """Response status outside [200, 300)."""

    def __init__(self, code: int, message: str = NON_SUCCESS_STATUS_MESSAGE, body: str = "") -> None:
        super().__init__(message, code=code)
        self.body = body

    def __reduce__(self):
        return type(self), (self.code, self.message, self.body)


class DecodeFailure(RequestError):
    """A 2xx response (or stream event) that could not be decoded as the expected type."""


class StreamModeMismatch(RequestError):
    """Streaming call on a non-stream request, or single-shot call on a stream request."""


class EncodeFailure(RequestError):
    """Request body could not be serialized. Raised before any network call."""
