"""Custom exceptions for the A2A client."""

from typing import Any

from a2a_chat.types import JSONRPCErrorResponse


class A2AClientError(Exception):
    """Base exception for A2A Client errors."""


class A2AClientTransportError(A2AClientError):
    """Client exception for network and HTTP level failures."""

    def __init__(self, message: str):
        """Initializes the A2AClientTransportError.

        Args:
            message: A descriptive error message.
        """
        self.message = message
        super().__init__(f'Transport Error: {message}')

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(message={self.message!r})'


class A2AClientHTTPError(A2AClientTransportError):
    """Client exception for HTTP errors received from the server."""

    def __init__(
        self,
        status_code: int,
        message: str,
        body: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        """Initializes the A2AClientHTTPError.

        Args:
            status_code: The HTTP status code of the response.
            message: A descriptive error message.
            body: The raw response body, if it was read.
            headers: The response headers, if available.
        """
        self.status_code = status_code
        self.message = message
        self.body = body
        self.headers = headers or {}
        A2AClientError.__init__(self, f'HTTP Error {status_code}: {message}')

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return (
            f'{self.__class__.__name__}(status_code={self.status_code!r}, '
            f'message={self.message!r})'
        )


class A2AClientTimeoutError(A2AClientTransportError):
    """Client exception for timeout errors during a request."""

    def __init__(self, message: str):
        """Initializes the A2AClientTimeoutError.

        Args:
            message: A descriptive error message.
        """
        self.message = message
        A2AClientError.__init__(self, f'Timeout Error: {message}')


class A2AClientJSONError(A2AClientError):
    """Client exception for JSON errors during response parsing or validation."""

    def __init__(self, message: str):
        """Initializes the A2AClientJSONError.

        Args:
            message: A descriptive error message.
        """
        self.message = message
        super().__init__(f'JSON Error: {message}')

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(message={self.message!r})'


class A2AClientJSONRPCError(A2AClientError):
    """Client exception for JSON-RPC errors returned by the server."""

    def __init__(self, error: JSONRPCErrorResponse):
        """Initializes the A2AClientJSONRPCError.

        Args:
            error: The JSON-RPC error response object.
        """
        self.error = error.error
        super().__init__(f'JSON-RPC Error {error.error}')

    @property
    def code(self) -> int:
        """The JSON-RPC error code."""
        return self.error.code

    @property
    def message(self) -> str:
        """The JSON-RPC error message."""
        return self.error.message

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}({self.error!r})'


class A2AClientInvalidStateError(A2AClientError):
    """Client exception for calls made in an illegal session state."""

    def __init__(self, message: str):
        """Initializes the A2AClientInvalidStateError.

        Args:
            message: A descriptive error message.
        """
        self.message = message
        super().__init__(f'Invalid state error: {message}')

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(message={self.message!r})'


class A2AClientPaymentRequiredError(A2AClientError):
    """Raised when the agent answers with HTTP 402 Payment Required.

    The challenge body is kept verbatim in `payment_info`.
    """

    def __init__(self, payment_info: Any):
        """Initializes the A2AClientPaymentRequiredError.

        Args:
            payment_info: The payment challenge returned by the server.
        """
        self.payment_info = payment_info
        super().__init__('Payment required')

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(payment_info={self.payment_info!r})'
