"""Tests for the Gamma exception hierarchy."""

from polymarket_gamma.clients.gamma.exceptions import (
    GammaAPIError,
    GammaDecodeError,
    GammaError,
    GammaTimeoutError,
)

_STATUS_NOT_FOUND = 404
_STATUS_SERVER_ERROR = 500
_TIMEOUT_MS = 250


class TestGammaError:
    """Test suite for GammaError base exception."""

    def test_is_exception(self) -> None:
        """Test GammaError inherits from Exception."""
        assert issubclass(GammaError, Exception)

    def test_can_be_raised(self) -> None:
        """Test GammaError can be raised and caught."""
        error = GammaError("test error")
        assert str(error) == "test error"


class TestGammaAPIError:
    """Test suite for GammaAPIError."""

    def test_inherits_from_base(self) -> None:
        """Test GammaAPIError inherits from GammaError."""
        assert issubclass(GammaAPIError, GammaError)

    def test_attributes(self) -> None:
        """Test GammaAPIError stores status code and status text."""
        error = GammaAPIError(_STATUS_NOT_FOUND, "Not Found")
        assert error.status_code == _STATUS_NOT_FOUND
        assert error.status_text == "Not Found"

    def test_string_representation(self) -> None:
        """Test GammaAPIError formats as 'HTTP <code>: <text>'."""
        error = GammaAPIError(_STATUS_SERVER_ERROR, "Internal Server Error")
        assert str(error) == "HTTP 500: Internal Server Error"
        assert error.msg == "HTTP 500: Internal Server Error"


class TestGammaTimeoutError:
    """Test suite for GammaTimeoutError."""

    def test_is_gamma_error_and_builtin_timeout(self) -> None:
        """Test the timeout error can be caught either way."""
        error = GammaTimeoutError("https://example.com/markets", _TIMEOUT_MS)
        assert isinstance(error, GammaError)
        assert isinstance(error, TimeoutError)

    def test_attributes(self) -> None:
        """Test GammaTimeoutError stores url and timeout."""
        error = GammaTimeoutError("https://example.com/markets", _TIMEOUT_MS)
        assert error.url == "https://example.com/markets"
        assert error.timeout_ms == _TIMEOUT_MS
        assert "250ms" in str(error)

    def test_not_an_api_error(self) -> None:
        """Test timeouts are distinguishable from HTTP status failures."""
        assert not issubclass(GammaTimeoutError, GammaAPIError)


class TestGammaDecodeError:
    """Test suite for GammaDecodeError."""

    def test_inherits_from_base(self) -> None:
        """Test GammaDecodeError inherits from GammaError."""
        assert issubclass(GammaDecodeError, GammaError)

    def test_message(self) -> None:
        """Test GammaDecodeError names the url and status."""
        error = GammaDecodeError("https://example.com/markets", 200)
        assert str(error) == "Invalid JSON body from https://example.com/markets (HTTP 200)"

    def test_message_with_detail(self) -> None:
        """Test a shape problem is appended to the message."""
        error = GammaDecodeError("https://example.com/x", detail="expected a string 'summary'")
        assert str(error) == (
            "Invalid JSON body from https://example.com/x: expected a string 'summary'"
        )
        assert error.status_code is None
