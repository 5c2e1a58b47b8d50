"""Utility functions for reading A2A Task objects."""

from a2a_chat.types import Message, Role, Task, TaskState
from a2a_chat.utils.message import get_message_text


TERMINAL_TASK_STATES = frozenset(
    {TaskState.COMPLETED, TaskState.FAILED, TaskState.CANCELED}
)

_STATE_ORDER = {
    TaskState.SUBMITTED: 0,
    TaskState.WORKING: 1,
    TaskState.INPUT_REQUIRED: 2,
    TaskState.COMPLETED: 3,
    TaskState.FAILED: 3,
    TaskState.CANCELED: 3,
}


def get_agent_message(task: Task) -> Message | None:
    """Returns the most recent agent message of a task, if any."""
    for message in reversed(task.messages):
        if message.role == Role.AGENT:
            return message
    return None


def get_agent_text(task: Task) -> str | None:
    """Returns the text of the most recent agent message of a task.

    Args:
        task: The `Task` object.

    Returns:
        The joined text parts of the agent message, or `None` when the task
        has no agent message yet.
    """
    message = get_agent_message(task)
    if message is None:
        return None
    return get_message_text(message)


def is_status_regression(previous: TaskState, current: TaskState) -> bool:
    """Whether `current` is an earlier lifecycle stage than `previous`."""
    return _STATE_ORDER[current] < _STATE_ORDER[previous]


def text_increment(previous: str, current: str) -> str:
    """Computes the text to emit when `current` supersedes `previous`.

    Agents stream the full text seen so far, so when `current` extends
    `previous` only the appended suffix is new. Text that does not extend
    `previous` starts a new message and is returned whole, unless it is a
    stale prefix of what was already seen, in which case nothing is new.

    Args:
        previous: The longest text observed so far.
        current: The text carried by the latest frame.

    Returns:
        The newly appended text, possibly empty.
    """
    if current.startswith(previous):
        return current[len(previous) :]
    if previous.startswith(current):
        return ''
    return current
