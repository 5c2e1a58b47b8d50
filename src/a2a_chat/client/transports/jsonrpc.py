import logging

from collections.abc import AsyncGenerator
from contextlib import aclosing
from typing import Any

import httpx

from httpx_sse import aconnect_sse

from a2a_chat.client.card_resolver import A2ACardResolver
from a2a_chat.client.codec import (
    END_OF_STREAM,
    decode_stream_frame,
    decode_unary_response,
    encode_request,
)
from a2a_chat.client.errors import A2AClientHTTPError, A2AClientTimeoutError
from a2a_chat.client.transports._streaming_utils import (
    ensure_success_response,
    is_json_response,
)
from a2a_chat.client.transports.base import ClientTransport
from a2a_chat.client.transports.sse import SSEStreamReader
from a2a_chat.types import AgentCard, SendMessageRequest, Task
from a2a_chat.utils.constants import DEFAULT_RPC_URL


logger = logging.getLogger(__name__)


class JsonRpcTransport(ClientTransport):
    """A JSON-RPC transport for the A2A client.

    Discovery is a GET of the well-known agent card; every message goes to
    a single JSON-RPC endpoint as a POST. No request is ever retried.
    """

    def __init__(
        self,
        httpx_client: httpx.AsyncClient,
        url: str,
        rpc_path: str = DEFAULT_RPC_URL,
        http_kwargs: dict[str, Any] | None = None,
    ):
        """Initializes the JsonRpcTransport.

        Args:
            httpx_client: The async HTTP client used for every request.
            url: Base URL of the agent.
            rpc_path: Path of the JSON-RPC endpoint relative to `url`.
            http_kwargs: Extra keyword arguments passed to every httpx call.
        """
        self.url = url.rstrip('/')
        self.rpc_url = f'{self.url}/{rpc_path.lstrip("/")}'
        self.httpx_client = httpx_client
        self.http_kwargs = http_kwargs or {}
        self._card_resolver = A2ACardResolver(httpx_client, self.url)

    async def get_card(self) -> AgentCard:
        """Fetches the agent card from the well-known path."""
        return await self._card_resolver.get_agent_card(
            http_kwargs=self.http_kwargs
        )

    async def send_message(self, request: SendMessageRequest) -> Task:
        """Sends a non-streaming message request to the agent."""
        payload = encode_request(request)
        logger.debug('Sending request %s: %s', request.id, payload)
        try:
            response = await self.httpx_client.post(
                self.rpc_url, json=payload, **self.http_kwargs
            )
        except httpx.TimeoutException as e:
            raise A2AClientTimeoutError('Client Request timed out') from e
        except httpx.RequestError as e:
            raise A2AClientHTTPError(
                503, f'Network communication error: {e}'
            ) from e

        await ensure_success_response(response)
        logger.debug('Received response %s: %s', request.id, response.text)
        return decode_unary_response(response.content)

    async def send_message_streaming(
        self, request: SendMessageRequest
    ) -> AsyncGenerator[Task, None]:
        """Sends a streaming message request to the agent and yields tasks as they arrive.

        Every yielded Task holds the cumulative state so far. The generator
        returns once the `[DONE]` sentinel is decoded, without waiting for the
        server to close the connection.
        """
        payload = encode_request(request)
        logger.debug('Sending streaming request %s: %s', request.id, payload)
        http_kwargs = dict(self.http_kwargs)
        http_kwargs.setdefault('timeout', None)

        try:
            async with aconnect_sse(
                self.httpx_client,
                'POST',
                self.rpc_url,
                json=payload,
                **http_kwargs,
            ) as event_source:
                response = event_source.response
                await ensure_success_response(response)

                if is_json_response(response):
                    # The agent answered with a plain JSON-RPC response.
                    await response.aread()
                    logger.debug(
                        'Received non-stream response %s: %s',
                        request.id,
                        response.text,
                    )
                    yield decode_unary_response(response.content)
                    return

                reader = SSEStreamReader()
                async with aclosing(
                    reader.aiter_events(response.aiter_bytes())
                ) as events:
                    async for sse in events:
                        frame = decode_stream_frame(sse.data)
                        if frame is END_OF_STREAM:
                            logger.debug('Stream %s finished', request.id)
                            return
                        if frame is None:
                            continue
                        logger.debug(
                            'Received stream frame %s: status=%s',
                            request.id,
                            frame.status.value,
                        )
                        yield frame
        except httpx.TimeoutException as e:
            raise A2AClientTimeoutError('Client Request timed out') from e
        except httpx.RequestError as e:
            raise A2AClientHTTPError(
                503, f'Network communication error: {e}'
            ) from e

    async def close(self) -> None:
        """Closes the httpx client."""
        await self.httpx_client.aclose()
