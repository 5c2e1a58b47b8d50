from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from types import TracebackType

from typing_extensions import Self

from a2a_chat.types import AgentCard, SendMessageRequest, Task


@dataclass(frozen=True)
class FinalOutcome:
    """A unary exchange: the agent answered with exactly one Task."""

    task: Task


@dataclass(frozen=True)
class StreamOutcome:
    """A streaming exchange: Tasks arrive lazily, each superseding the last.

    The HTTP request is issued when `events` is first iterated; closing the
    generator closes the connection.
    """

    events: AsyncGenerator[Task, None]


ExchangeOutcome = FinalOutcome | StreamOutcome


class ClientTransport(ABC):
    """Abstract base class for a client transport."""

    async def __aenter__(self) -> Self:
        """Enters the async context manager, returning the transport itself."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exits the async context manager, ensuring close() is called."""
        await self.close()

    async def call(self, request: SendMessageRequest) -> ExchangeOutcome:
        """Performs a `message/send` exchange in the mode the request asks for."""
        if request.params.configuration.streaming:
            return StreamOutcome(self.send_message_streaming(request))
        return FinalOutcome(await self.send_message(request))

    @abstractmethod
    async def get_card(self) -> AgentCard:
        """Retrieves the agent's card."""

    @abstractmethod
    async def send_message(self, request: SendMessageRequest) -> Task:
        """Sends a non-streaming message request to the agent."""

    @abstractmethod
    async def send_message_streaming(
        self, request: SendMessageRequest
    ) -> AsyncGenerator[Task, None]:
        """Sends a streaming message request to the agent and yields tasks as they arrive."""
        return
        yield

    @abstractmethod
    async def close(self) -> None:
        """Closes the transport."""
