"""Reassembly of server-sent event data lines from raw byte chunks."""

import codecs
import logging

from collections.abc import AsyncIterable, AsyncIterator

from httpx_sse import ServerSentEvent

from a2a_chat.client.errors import A2AClientTransportError


logger = logging.getLogger(__name__)

DATA_FIELD = 'data:'


class SSEStreamReader:
    """Turns an unbounded byte stream into an ordered sequence of SSE data lines.

    Network reads may split a line anywhere, including inside a multi-byte
    character. Bytes are decoded incrementally and buffered until a newline
    completes the line; only `data:` lines are forwarded. Blank lines,
    comments and other fields are dropped.
    """

    def __init__(self, encoding: str = 'utf-8') -> None:
        """Initializes the `SSEStreamReader`.

        Args:
            encoding: Character encoding of the stream.
        """
        self._decoder = codecs.getincrementaldecoder(encoding)(errors='replace')
        self._buffer = ''

    def feed(self, chunk: bytes) -> list[ServerSentEvent]:
        """Appends a chunk and returns the events its complete lines carry."""
        self._buffer += self._decoder.decode(chunk)
        *lines, self._buffer = self._buffer.split('\n')
        events = []
        for line in lines:
            event = self._parse_line(line.removesuffix('\r'))
            if event is not None:
                events.append(event)
        return events

    def close(self) -> None:
        """Flushes the decoder and discards any unterminated trailing line."""
        self._buffer += self._decoder.decode(b'', final=True)
        if self._buffer:
            logger.debug(
                'Discarding unterminated stream line: %r', self._buffer
            )
        self._buffer = ''

    async def aiter_events(
        self, chunks: AsyncIterable[bytes] | None
    ) -> AsyncIterator[ServerSentEvent]:
        """Yields data events in arrival order until the byte stream ends.

        Args:
            chunks: The response body as an async iterable of byte chunks.

        Raises:
            A2AClientTransportError: If there is no body or it is empty.
        """
        if chunks is None:
            raise A2AClientTransportError('no response body')
        received = False
        async for chunk in chunks:
            if not chunk:
                continue
            received = True
            for event in self.feed(chunk):
                yield event
        self.close()
        if not received:
            raise A2AClientTransportError('no response body')

    @staticmethod
    def _parse_line(line: str) -> ServerSentEvent | None:
        if not line.startswith(DATA_FIELD):
            return None
        data = line[len(DATA_FIELD) :]
        return ServerSentEvent(data=data.removeprefix(' '))
