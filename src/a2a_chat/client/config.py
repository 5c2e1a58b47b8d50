"""Client configuration."""

import os

from dataclasses import dataclass

import httpx

from a2a_chat.utils.constants import DEFAULT_SERVER_URL, DEFAULT_TIMEOUT


SERVER_URL_ENV = 'A2A_SERVER_URL'
TIMEOUT_ENV = 'A2A_TIMEOUT'


@dataclass
class ClientConfig:
    """Configuration for an `A2ASession`.

    Attributes:
        url: Base URL of the agent.
        streaming: Whether drivers start in streaming mode.
        timeout: Timeout in seconds for unary requests and discovery.
            Streaming reads never time out.
        httpx_client: Client to reuse. When unset the session creates one
            and closes it on `close()`.
    """

    url: str = DEFAULT_SERVER_URL
    streaming: bool = False
    timeout: float = DEFAULT_TIMEOUT
    httpx_client: httpx.AsyncClient | None = None

    @classmethod
    def from_env(cls, **overrides) -> 'ClientConfig':
        """Builds a configuration from `A2A_SERVER_URL` and `A2A_TIMEOUT`.

        Keyword arguments whose value is not None take precedence over the
        environment.

        Raises:
            ValueError: If `A2A_TIMEOUT` is not a number.
        """
        raw_timeout = os.environ.get(TIMEOUT_ENV) or DEFAULT_TIMEOUT
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValueError(
                f'{TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}'
            ) from e
        values = {
            'url': os.environ.get(SERVER_URL_ENV) or DEFAULT_SERVER_URL,
            'timeout': timeout,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
