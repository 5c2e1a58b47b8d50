"""Utility functions for creating and handling A2A Message objects."""

from a2a_chat.types import Message, Part, Role
from a2a_chat.utils.parts import get_text_parts


def new_user_text_message(text: str) -> Message:
    """Creates a new user message containing a single text Part.

    Args:
        text: The text content of the message.

    Returns:
        A new `Message` object with role 'user'.
    """
    return Message(role=Role.USER, parts=[Part(text=text)])


def get_message_text(message: Message, delimiter: str = '\n') -> str:
    """Extracts and joins all text content from a Message's parts.

    Args:
        message: The `Message` object.
        delimiter: The string to use when joining text from multiple text Parts.

    Returns:
        A single string containing all text content, or an empty string if no text parts are found.
    """
    return delimiter.join(get_text_parts(message.parts))
