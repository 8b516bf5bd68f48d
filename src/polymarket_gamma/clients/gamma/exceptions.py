"""Exception hierarchy for Gamma client errors.

A base exception class with one subclass per failure the request executor
can classify.  Transport failures (DNS, refused connections, TLS) are not
wrapped: they surface as the transport's own exceptions.
"""


class GammaError(Exception):
    """Base exception for all Gamma client errors."""


class GammaAPIError(GammaError):
    """Non-2xx response returned by a Gamma API call.

    Carry the numeric status code and the reason phrase so callers can
    distinguish client errors from server errors.

    Args:
        status_code: HTTP status code from the API response.
        status_text: Reason phrase sent with the status line.

    """

    def __init__(self, status_code: int, status_text: str) -> None:
        """Initialize Gamma API error.

        Args:
            status_code: HTTP status code from the API response.
            status_text: Reason phrase sent with the status line.

        """
        self.msg = f"HTTP {status_code}: {status_text}"
        super().__init__(self.msg)
        self.status_code = status_code
        self.status_text = status_text


class GammaTimeoutError(GammaError, TimeoutError):
    """Request cancelled because it did not complete within the timeout.

    Also a ``TimeoutError`` so callers catching the builtin keep working.
    """

    def __init__(self, url: str, timeout_ms: int) -> None:
        """Initialize Gamma timeout error.

        Args:
            url: Address of the request that timed out.
            timeout_ms: Configured timeout in milliseconds.

        """
        super().__init__(f"Request to {url} timed out after {timeout_ms}ms")
        self.url = url
        self.timeout_ms = timeout_ms


class GammaDecodeError(GammaError):
    """Successful response whose body is not valid JSON or lacks the expected shape."""

    def __init__(self, url: str, status_code: int | None = None, detail: str | None = None) -> None:
        """Initialize Gamma decode error.

        Args:
            url: Address of the request whose body failed to decode.
            status_code: HTTP status code of the response, when known.
            detail: What was wrong with a body that did decode.

        """
        msg = f"Invalid JSON body from {url}"
        if status_code is not None:
            msg += f" (HTTP {status_code})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.url = url
        self.status_code = status_code
        self.detail = detail
