import logging

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import aclosing
from types import TracebackType

import httpx

from typing_extensions import Self

from a2a_chat.client.codec import encode_send_request
from a2a_chat.client.config import ClientConfig
from a2a_chat.client.errors import (
    A2AClientInvalidStateError,
    A2AClientJSONError,
)
from a2a_chat.client.transports.base import (
    ClientTransport,
    FinalOutcome,
    StreamOutcome,
)
from a2a_chat.client.transports.jsonrpc import JsonRpcTransport
from a2a_chat.types import AgentCard, SendMessageRequest, Task
from a2a_chat.utils.task import (
    get_agent_text,
    is_status_regression,
    text_increment,
)


logger = logging.getLogger(__name__)


class A2ASession:
    """A single conversation with a remote agent.

    The session owns the current context id and the request id counter.
    It is not safe for overlapping calls: callers must await each call
    before issuing the next one, or use one session per conversation.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: ClientTransport | None = None,
    ) -> None:
        """Initializes the `A2ASession`.

        Args:
            config: Client configuration. Defaults to `ClientConfig()`.
            transport: Transport to use instead of a `JsonRpcTransport`
                built from `config`.
        """
        self.config = config or ClientConfig()
        self._owns_client = False
        if transport is None:
            httpx_client = self.config.httpx_client
            if httpx_client is None:
                httpx_client = httpx.AsyncClient(timeout=self.config.timeout)
                self._owns_client = True
            transport = JsonRpcTransport(httpx_client, self.config.url)
        self._transport = transport
        self._context_id: str | None = None
        self._request_id = 0

    async def __aenter__(self) -> Self:
        """Enters the async context manager, returning the session itself."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exits the async context manager, ensuring close() is called."""
        await self.close()

    async def discover(self) -> AgentCard:
        """Fetches the agent card describing the remote agent."""
        return await self._transport.get_card()

    async def send(
        self,
        text: str,
        *,
        context_id: str | None = None,
        streaming: bool = False,
    ) -> Task:
        """Sends a user message and returns the agent's Task.

        Args:
            text: The user's message.
            context_id: Conversation to address. Defaults to the session's
                current conversation.
            streaming: Whether to receive the reply as an SSE stream. The
                last Task of the stream is returned.

        Returns:
            The final `Task` of the exchange.

        Raises:
            A2AClientPaymentRequiredError: If the agent requires payment.
            A2AClientJSONRPCError: If the agent returns a JSON-RPC error.
            A2AClientJSONError: If the response cannot be decoded.
            A2AClientTransportError: On network or HTTP failures.
        """
        request = self._new_request(
            text, context_id or self._context_id, streaming
        )
        outcome = await self._transport.call(request)
        if isinstance(outcome, StreamOutcome):
            task = await self._drain(outcome.events)
        else:
            task = outcome.task
        self._context_id = task.context_id
        return task

    async def stream(self, text: str) -> AsyncIterator[str]:
        """Sends a user message and yields the agent's reply as it grows.

        Each yielded string is the text appended since the previous one, so
        joining all of them gives the final agent text.

        Args:
            text: The user's message.

        Yields:
            Newly appended agent text.
        """
        request = self._new_request(text, self._context_id, True)
        outcome = await self._transport.call(request)
        if isinstance(outcome, FinalOutcome):
            self._context_id = outcome.task.context_id
            if agent_text := get_agent_text(outcome.task):
                yield agent_text
            return

        last_task: Task | None = None
        last_text = ''
        async with aclosing(outcome.events) as events:
            async for task in events:
                if not self._accept(last_task, task):
                    continue
                last_task = task
                self._context_id = task.context_id
                agent_text = get_agent_text(task)
                if agent_text is None:
                    continue
                if increment := text_increment(last_text, agent_text):
                    last_text = agent_text
                    yield increment

    async def continue_conversation(
        self, text: str, streaming: bool = False
    ) -> Task:
        """Sends a follow-up message in the current conversation.

        Raises:
            A2AClientInvalidStateError: If no conversation has been started.
        """
        if not self._context_id:
            raise A2AClientInvalidStateError(
                'No active conversation. Call send() first.'
            )
        return await self.send(
            text, context_id=self._context_id, streaming=streaming
        )

    def new_conversation(self) -> None:
        """Forgets the current context id so the next send starts afresh."""
        self._context_id = None

    def get_context_id(self) -> str | None:
        """Returns the current context id, if a conversation is active."""
        return self._context_id

    async def close(self) -> None:
        """Closes the HTTP client if this session created it."""
        if self._owns_client:
            await self._transport.close()

    def _new_request(
        self, text: str, context_id: str | None, streaming: bool
    ) -> SendMessageRequest:
        self._request_id += 1
        return encode_send_request(
            text,
            self._request_id,
            context_id=context_id,
            streaming=streaming,
        )

    async def _drain(self, events: AsyncGenerator[Task, None]) -> Task:
        last_task: Task | None = None
        async with aclosing(events):
            async for task in events:
                if self._accept(last_task, task):
                    last_task = task
        if last_task is None:
            raise A2AClientJSONError('No task received in stream')
        return last_task

    @staticmethod
    def _accept(previous: Task | None, current: Task) -> bool:
        if previous and is_status_regression(previous.status, current.status):
            logger.warning(
                'Discarding stream frame for task %s: status went from %s to %s',
                current.id,
                previous.status.value,
                current.status.value,
            )
            return False
        return True
