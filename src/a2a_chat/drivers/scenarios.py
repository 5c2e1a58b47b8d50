"""Scripted conformance scenarios run against a live agent."""

import logging
import sys
import time

from collections.abc import Awaitable, Callable
from contextlib import aclosing
from dataclasses import dataclass
from typing import TextIO

from a2a_chat.client.session import A2ASession
from a2a_chat.types import Role, TaskState


logger = logging.getLogger(__name__)

MAX_STREAM_CHUNKS = 100


class ScenarioFailed(Exception):
    """A scenario's expectation did not hold."""


class ScenarioSkipped(Exception):
    """The agent lacks a capability the scenario needs."""


@dataclass
class Scenario:
    """A named check against the agent."""

    name: str
    run: Callable[[A2ASession], Awaitable[None]]


@dataclass
class ScenarioResult:
    """Outcome of one scenario run."""

    name: str
    passed: bool
    elapsed_ms: int
    error: str | None = None
    skipped: bool = False


async def check_discovery(session: A2ASession) -> None:
    card = await session.discover()
    if not card.name:
        raise ScenarioFailed('Missing name')
    if not card.skills:
        raise ScenarioFailed('No skills defined')


async def check_simple_message(session: A2ASession) -> None:
    session.new_conversation()
    task = await session.send('Hello')
    if task.status != TaskState.COMPLETED:
        raise ScenarioFailed(f'Status: {task.status.value}')
    if not any(m.role == Role.AGENT for m in task.messages):
        raise ScenarioFailed('No response')


async def check_multi_turn(session: A2ASession) -> None:
    session.new_conversation()
    first = await session.send('My name is TestUser')
    second = await session.continue_conversation('What is my name?')
    if second.context_id != first.context_id:
        raise ScenarioFailed('Context ID changed')


async def check_context_isolation(session: A2ASession) -> None:
    session.new_conversation()
    await session.send('Remember: secret=42')
    first_context = session.get_context_id()

    session.new_conversation()
    task = await session.send('What is the secret?')
    if task.context_id == first_context:
        raise ScenarioFailed('Context not isolated')


async def check_streaming(session: A2ASession) -> None:
    card = await session.discover()
    if not card.capabilities.streaming:
        raise ScenarioSkipped('streaming not enabled')

    session.new_conversation()
    chunks = 0
    async with aclosing(session.stream('Say hello')) as increments:
        async for _ in increments:
            chunks += 1
            if chunks >= MAX_STREAM_CHUNKS:
                break
    if chunks == 0:
        raise ScenarioFailed('No streaming chunks received')


def default_scenarios() -> list[Scenario]:
    """The standard battery, in execution order."""
    return [
        Scenario('Agent Discovery', check_discovery),
        Scenario('Simple Message', check_simple_message),
        Scenario('Multi-turn Conversation', check_multi_turn),
        Scenario('Context Isolation', check_context_isolation),
        Scenario('Streaming Response', check_streaming),
    ]


class ScenarioRunner:
    """Runs scenarios in order and reports pass/fail with elapsed time.

    A skipped scenario counts as passed. Any exception other than
    `ScenarioSkipped` fails the scenario without stopping the battery.
    """

    def __init__(
        self,
        session: A2ASession,
        scenarios: list[Scenario] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.session = session
        self.scenarios = (
            default_scenarios() if scenarios is None else scenarios
        )
        self._output = output or sys.stdout

    async def run(self) -> list[ScenarioResult]:
        """Runs every scenario and prints a summary."""
        self._print('\nA2A Test Suite\n')
        self._print('-' * 50)

        results = [await self._run_one(s) for s in self.scenarios]
        passed = sum(result.passed for result in results)

        self._print('-' * 50)
        self._print(f'\n{passed}/{len(results)} tests passed')
        return results

    async def _run_one(self, scenario: Scenario) -> ScenarioResult:
        start = time.perf_counter()
        try:
            await scenario.run(self.session)
        except ScenarioSkipped as e:
            elapsed_ms = _elapsed_ms(start)
            self._print(f'       (skipped - {e})')
            self._print(f'[PASS] {scenario.name} ({elapsed_ms}ms)')
            return ScenarioResult(
                scenario.name, True, elapsed_ms, skipped=True
            )
        except Exception as e:  # noqa: BLE001
            logger.debug('Scenario %s failed', scenario.name, exc_info=True)
            self._print(f'[FAIL] {scenario.name}')
            self._print(f'       {e}')
            return ScenarioResult(
                scenario.name, False, _elapsed_ms(start), error=str(e)
            )
        elapsed_ms = _elapsed_ms(start)
        self._print(f'[PASS] {scenario.name} ({elapsed_ms}ms)')
        return ScenarioResult(scenario.name, True, elapsed_ms)

    def _print(self, text: str) -> None:
        self._output.write(f'{text}\n')
        self._output.flush()


def all_passed(results: list[ScenarioResult]) -> bool:
    """Whether every scenario passed."""
    return all(result.passed for result in results)


def _elapsed_ms(start: float) -> int:
    return round((time.perf_counter() - start) * 1000)
