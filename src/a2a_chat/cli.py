import argparse
import asyncio
import logging
import sys

from typing import TextIO

from dotenv import load_dotenv

from a2a_chat.client import (
    A2AClientError,
    A2AClientPaymentRequiredError,
    A2ASession,
    ClientConfig,
)
from a2a_chat.drivers import ChatRepl, ScenarioRunner, all_passed
from a2a_chat.utils.task import get_agent_text


logger = logging.getLogger(__name__)

DEMO_PREVIEW_LENGTH = 100


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the A2A client."""
    parser = argparse.ArgumentParser(
        description='A2A client: discover, chat with and test an A2A agent.'
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '-d',
        '--discover',
        action='store_true',
        help='Show the agent card and exit.',
    )
    mode.add_argument(
        '-i',
        '--interactive',
        action='store_true',
        help='Chat with the agent interactively.',
    )
    mode.add_argument(
        '-t',
        '--test',
        action='store_true',
        help='Run the test scenarios; exits non-zero if any fails.',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Enable verbose output (logs JSON-RPC payloads)',
    )
    parser.add_argument(
        '-u',
        '--url',
        help='Agent base URL. If not set, the A2A_SERVER_URL environment variable will be used.',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        help='Request timeout in seconds. If not set, A2A_TIMEOUT or 30 is used.',
    )
    return parser


async def discover_command(session: A2ASession, out: TextIO) -> int:
    """Prints the agent card."""
    out.write('\n--- Agent Discovery ---\n\n')
    card = await session.discover()

    out.write(f'Name: {card.name}\n')
    out.write(f'Description: {card.description}\n')
    out.write(f'Version: {card.version}\n')
    out.write('\nCapabilities:\n')
    out.write(f'  Streaming: {card.capabilities.streaming}\n')
    out.write('\nSkills:\n')
    for skill in card.skills:
        out.write(f'  - {skill.name}\n')
        out.write(f'    {skill.description}\n')
        if skill.examples:
            out.write(f'    Examples: {", ".join(skill.examples)}\n')
    schemes = card.authentication.schemes if card.authentication else []
    out.write(f'\nAuthentication: {", ".join(schemes) or "none"}\n')
    return 0


async def interactive_command(
    session: A2ASession, out: TextIO, streaming: bool = False
) -> int:
    """Runs the interactive chat loop."""
    await ChatRepl(session, streaming=streaming, output=out).run()
    return 0


async def test_command(session: A2ASession, out: TextIO) -> int:
    """Runs the scenario battery."""
    results = await ScenarioRunner(session, output=out).run()
    return 0 if all_passed(results) else 1


async def demo_command(session: A2ASession, out: TextIO) -> int:
    """Walks through discovery and a two-turn conversation."""
    out.write('\n=== A2A Client Demo ===\n\n')

    out.write('1. Discovering agent...\n')
    card = await session.discover()
    out.write(f'   Found: {card.name}\n\n')

    out.write('2. Sending simple message...\n')
    session.new_conversation()
    first = await session.send('Hello! What can you do?')
    out.write(f'   Agent: {_preview(get_agent_text(first))}\n\n')

    out.write('3. Testing multi-turn conversation...\n')
    second = await session.continue_conversation(
        'Tell me more about your first skill.'
    )
    out.write(f'   Agent: {_preview(get_agent_text(second))}\n\n')

    out.write('=== Demo Complete ===\n\n')
    return 0


def _preview(text: str | None) -> str:
    if text is None:
        return '(no response)'
    return f'{text[:DEMO_PREVIEW_LENGTH]}...'


async def main(
    argv: list[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Parses arguments, runs the selected command and returns the exit status.

    Command output goes to `out`; failures are reported on `err`.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    args = create_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s  %(name)s  %(message)s',
    )

    load_dotenv()
    try:
        config = ClientConfig.from_env(url=args.url, timeout=args.timeout)
    except ValueError as e:
        err.write(f'Error: invalid configuration: {e}\n')
        return 1
    out.write(f'A2A Client - Target: {config.url}\n')

    async with A2ASession(config) as session:
        try:
            if args.discover:
                return await discover_command(session, out)
            if args.interactive:
                return await interactive_command(
                    session, out, streaming=config.streaming
                )
            if args.test:
                return await test_command(session, out)
            return await demo_command(session, out)
        except A2AClientPaymentRequiredError as e:
            logger.debug('Payment challenge: %s', e.payment_info)
            err.write('\nError: Payment required (402)\n')
            err.write('The A2A endpoint requires x402 payment.\n')
        except A2AClientError as e:
            err.write(f'\nError: {e}\n')
    return 1


def run() -> None:
    """Console script entry point."""
    try:
        status = asyncio.run(main())
    except KeyboardInterrupt:
        sys.stderr.write('\nInterrupted\n')
        status = 130
    sys.exit(status)


if __name__ == '__main__':
    run()
