from typing import NoReturn

import pytest

from a2a_chat.client import (
    A2AClientError,
    A2AClientHTTPError,
    A2AClientJSONError,
    A2AClientPaymentRequiredError,
    A2AClientTransportError,
)
from a2a_chat.client.errors import (
    A2AClientInvalidStateError,
    A2AClientJSONRPCError,
    A2AClientTimeoutError,
)
from a2a_chat.types import JSONRPCError, JSONRPCErrorResponse


class TestA2AClientError:
    """Test cases for the base A2AClientError class."""

    def test_instantiation(self) -> None:
        """Test that A2AClientError can be instantiated."""
        error = A2AClientError('Test error message')
        assert isinstance(error, Exception)
        assert str(error) == 'Test error message'


class TestA2AClientHTTPError:
    """Test cases for A2AClientHTTPError class."""

    def test_instantiation(self) -> None:
        """Test that A2AClientHTTPError can be instantiated with status_code and message."""
        error = A2AClientHTTPError(404, 'Not Found')
        assert isinstance(error, A2AClientTransportError)
        assert error.status_code == 404
        assert error.message == 'Not Found'

    def test_message_formatting(self) -> None:
        """Test that the error message includes the status code."""
        error = A2AClientHTTPError(500, 'Internal Server Error')
        assert str(error) == 'HTTP Error 500: Internal Server Error'

    def test_repr(self) -> None:
        """Test that __repr__ shows structured attributes."""
        error = A2AClientHTTPError(404, 'Not Found')
        assert (
            repr(error)
            == "A2AClientHTTPError(status_code=404, message='Not Found')"
        )

    def test_body_and_headers_default(self) -> None:
        error = A2AClientHTTPError(503, 'Unavailable')
        assert error.body is None
        assert error.headers == {}


@pytest.mark.parametrize(
    'error_class, prefix, name',
    [
        (A2AClientJSONError, 'JSON Error', 'A2AClientJSONError'),
        (A2AClientTimeoutError, 'Timeout Error', 'A2AClientTimeoutError'),
        (
            A2AClientTransportError,
            'Transport Error',
            'A2AClientTransportError',
        ),
        (
            A2AClientInvalidStateError,
            'Invalid state error',
            'A2AClientInvalidStateError',
        ),
    ],
)
class TestSingleMessageClientError:
    """Test cases for client errors that take a single message argument."""

    def test_instantiation(self, error_class, prefix, name) -> None:
        error = error_class('Test message')
        assert isinstance(error, A2AClientError)
        assert error.message == 'Test message'

    def test_message_formatting(self, error_class, prefix, name) -> None:
        error = error_class('Details here')
        assert str(error) == f'{prefix}: Details here'

    def test_repr(self, error_class, prefix, name) -> None:
        error = error_class('A test message')
        assert repr(error) == f"{name}(message='A test message')"


class TestA2AClientJSONRPCError:
    """Test cases for A2AClientJSONRPCError class."""

    def _make_error_response(
        self, code: int = -32600, message: str = 'Invalid Request'
    ) -> JSONRPCErrorResponse:
        return JSONRPCErrorResponse(
            id=1, error=JSONRPCError(code=code, message=message)
        )

    def test_exposes_code_and_message(self) -> None:
        error = A2AClientJSONRPCError(self._make_error_response(-32601, 'nope'))
        assert error.code == -32601
        assert error.message == 'nope'
        assert error.error.code == -32601

    def test_repr(self) -> None:
        response = self._make_error_response(-32601, 'Method not found')
        error = A2AClientJSONRPCError(response)
        assert repr(error) == f'A2AClientJSONRPCError({response.error!r})'

    def test_str(self) -> None:
        response = self._make_error_response()
        error = A2AClientJSONRPCError(response)
        assert str(error) == f'JSON-RPC Error {response.error}'


class TestA2AClientPaymentRequiredError:
    def test_carries_payment_info_verbatim(self) -> None:
        info = {'amount': '0.01', 'asset': 'USDC'}
        error = A2AClientPaymentRequiredError(info)
        assert error.payment_info is info
        assert str(error) == 'Payment required'

    def test_is_not_a_transport_error(self) -> None:
        error = A2AClientPaymentRequiredError(None)
        assert not isinstance(error, A2AClientTransportError)
        assert isinstance(error, A2AClientError)


class TestExceptionHierarchy:
    """Test the exception hierarchy and relationships."""

    def test_exception_hierarchy(self) -> None:
        assert issubclass(A2AClientError, Exception)
        assert issubclass(A2AClientTransportError, A2AClientError)
        assert issubclass(A2AClientHTTPError, A2AClientTransportError)
        assert issubclass(A2AClientTimeoutError, A2AClientTransportError)
        assert issubclass(A2AClientJSONError, A2AClientError)
        assert issubclass(A2AClientInvalidStateError, A2AClientError)
        assert issubclass(A2AClientJSONRPCError, A2AClientError)
        assert issubclass(A2AClientPaymentRequiredError, A2AClientError)

    def test_raising_http_error(self) -> NoReturn:
        with pytest.raises(A2AClientTransportError) as excinfo:
            raise A2AClientHTTPError(429, 'Too Many Requests')

        error = excinfo.value
        assert error.status_code == 429
        assert str(error) == 'HTTP Error 429: Too Many Requests'
