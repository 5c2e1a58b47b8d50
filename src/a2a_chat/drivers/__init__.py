"""Drivers that exercise an `A2ASession` on behalf of a user."""

from a2a_chat.drivers.interactive import ChatRepl
from a2a_chat.drivers.scenarios import (
    Scenario,
    ScenarioFailed,
    ScenarioResult,
    ScenarioRunner,
    ScenarioSkipped,
    all_passed,
    default_scenarios,
)


__all__ = [
    'ChatRepl',
    'Scenario',
    'ScenarioFailed',
    'ScenarioResult',
    'ScenarioRunner',
    'ScenarioSkipped',
    'all_passed',
    'default_scenarios',
]
