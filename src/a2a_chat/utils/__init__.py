"""Utility functions for the A2A client."""

from a2a_chat.utils.constants import (
    AGENT_CARD_WELL_KNOWN_PATH,
    DEFAULT_RPC_URL,
)
from a2a_chat.utils.message import get_message_text, new_user_text_message
from a2a_chat.utils.parts import get_text_parts
from a2a_chat.utils.task import (
    TERMINAL_TASK_STATES,
    get_agent_message,
    get_agent_text,
    is_status_regression,
    text_increment,
)


__all__ = [
    'AGENT_CARD_WELL_KNOWN_PATH',
    'DEFAULT_RPC_URL',
    'TERMINAL_TASK_STATES',
    'get_agent_message',
    'get_agent_text',
    'get_message_text',
    'get_text_parts',
    'is_status_regression',
    'new_user_text_message',
    'text_increment',
]
