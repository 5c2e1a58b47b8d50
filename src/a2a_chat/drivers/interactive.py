"""Interactive chat loop built on `A2ASession`."""

import asyncio
import logging
import sys

from collections.abc import Awaitable, Callable
from typing import TextIO

from a2a_chat.client.errors import (
    A2AClientError,
    A2AClientPaymentRequiredError,
)
from a2a_chat.client.session import A2ASession
from a2a_chat.utils.task import get_agent_text


logger = logging.getLogger(__name__)

HELP_TEXT = """
Commands:
  /help     Show this help message
  /new      Start new conversation
  /stream   Toggle streaming mode
  /context  Show current context ID
  /exit     Exit
"""


async def _read_stdin(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


class ChatRepl:
    """A read-eval-print loop that chats with one agent.

    Slash commands only touch local state and never reach the network.
    """

    def __init__(
        self,
        session: A2ASession,
        streaming: bool = False,
        read_line: Callable[[str], Awaitable[str]] = _read_stdin,
        output: TextIO | None = None,
    ) -> None:
        self.session = session
        self.streaming = streaming
        self._read_line = read_line
        self._output = output or sys.stdout

    async def run(self) -> None:
        """Connects to the agent and chats until `/exit` or end of input."""
        card = await self.session.discover()
        self._print(f'\nConnected to: {card.name}')
        self._print(f'Skills: {", ".join(skill.id for skill in card.skills)}')
        self._print(HELP_TEXT)

        while True:
            try:
                line = await self._read_line('You: ')
            except EOFError:
                self._print('\nBye!')
                return
            text = line.strip()
            if not text:
                continue
            if text.startswith('/'):
                if not self.handle_command(text):
                    return
                continue
            await self.chat(text)

    def handle_command(self, command: str) -> bool:
        """Runs a local command.

        Returns:
            False when the loop should stop, True otherwise.
        """
        if command == '/exit':
            self._print('Bye!')
            return False
        if command == '/help':
            self._print(HELP_TEXT)
        elif command == '/new':
            self.session.new_conversation()
            self._print('Started new conversation.\n')
        elif command == '/stream':
            self.streaming = not self.streaming
            self._print(f'Streaming: {"ON" if self.streaming else "OFF"}\n')
        elif command == '/context':
            context_id = self.session.get_context_id() or '(none)'
            self._print(f'Context ID: {context_id}\n')
        else:
            self._print(f'Unknown command: {command}. Type /help for help.\n')
        return True

    async def chat(self, text: str) -> None:
        """Sends one message and prints the agent's reply."""
        try:
            if self.streaming:
                self._write('Agent: ')
                async for chunk in self.session.stream(text):
                    self._write(chunk)
                self._print('\n')
            else:
                task = await self.session.send(text)
                reply = get_agent_text(task) or '(no response)'
                self._print(f'Agent: {reply}\n')
        except A2AClientPaymentRequiredError as e:
            logger.debug('Payment challenge: %s', e.payment_info)
            self._print('[402] Payment required\n')
        except A2AClientError as e:
            self._print(f'Error: {e}\n')

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def _print(self, text: str) -> None:
        self._write(f'{text}\n')
