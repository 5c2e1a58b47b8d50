"""Utility functions for handling A2A Part objects."""

from a2a_chat.types import Part


def get_text_parts(parts: list[Part]) -> list[str]:
    """Extracts text content from all text Parts in a list of Parts.

    Args:
        parts: A list of `Part` objects.

    Returns:
        A list of strings containing the text content of every `text` Part.
    """
    return [
        part.text
        for part in parts
        if part.type == 'text' and part.text is not None
    ]
