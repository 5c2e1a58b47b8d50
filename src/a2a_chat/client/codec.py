"""JSON-RPC encoding and decoding for the A2A `message/send` exchange."""

import json
import logging

from enum import Enum
from typing import Any

from pydantic import ValidationError

from a2a_chat.client.errors import A2AClientJSONError, A2AClientJSONRPCError
from a2a_chat.types import (
    JSONRPCErrorResponse,
    MessageSendParams,
    SendMessageConfiguration,
    SendMessageRequest,
    Task,
)
from a2a_chat.utils.constants import SSE_DONE_SENTINEL
from a2a_chat.utils.message import new_user_text_message


logger = logging.getLogger(__name__)


class StreamMarker(Enum):
    """Control markers produced while decoding a stream."""

    END_OF_STREAM = 'end_of_stream'


END_OF_STREAM = StreamMarker.END_OF_STREAM


def encode_send_request(
    text: str,
    request_id: int,
    *,
    context_id: str | None = None,
    streaming: bool = False,
) -> SendMessageRequest:
    """Builds a `message/send` request carrying one user text message.

    Args:
        text: The user's message.
        request_id: Correlation id, unique within the session.
        context_id: Conversation to continue, if any.
        streaming: Whether to ask for an SSE response.

    Returns:
        The `SendMessageRequest` envelope.
    """
    return SendMessageRequest(
        id=request_id,
        params=MessageSendParams(
            message=new_user_text_message(text),
            configuration=SendMessageConfiguration(
                context_id=context_id or None, streaming=streaming
            ),
        ),
    )


def encode_request(request: SendMessageRequest) -> dict[str, Any]:
    """Serializes a request to its JSON wire form."""
    return request.model_dump(mode='json', by_alias=True, exclude_none=True)


def decode_unary_response(content: bytes | str) -> Task:
    """Decodes a single JSON-RPC response into a Task.

    Args:
        content: The raw response body.

    Returns:
        The `Task` carried in the `result` member.

    Raises:
        A2AClientJSONRPCError: If the response carries an `error` member.
        A2AClientJSONError: If the body is not JSON or not a Task response.
    """
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        raise A2AClientJSONError(
            f'Failed to parse JSON-RPC response: {e}'
        ) from e
    if not isinstance(payload, dict):
        raise A2AClientJSONError('JSON-RPC response is not an object')
    _raise_for_rpc_error(payload)
    if payload.get('result') is None:
        raise A2AClientJSONError('JSON-RPC response has no result')
    try:
        return Task.model_validate(payload['result'])
    except ValidationError as e:
        raise A2AClientJSONError(
            f'Failed to validate task structure: {e}'
        ) from e


def decode_stream_frame(data: str) -> Task | StreamMarker | None:
    """Decodes the payload of one SSE data line.

    Args:
        data: The text after the `data:` prefix.

    Returns:
        `END_OF_STREAM` for the `[DONE]` sentinel, `None` for a frame that
        carries no usable task (partial JSON, no result, invalid task), or
        the decoded `Task`.

    Raises:
        A2AClientJSONRPCError: If the frame carries an `error` member.
    """
    if data.strip() == SSE_DONE_SENTINEL:
        return END_OF_STREAM
    try:
        payload = json.loads(data)
    except json.JSONDecodeError:
        logger.debug('Skipping unparseable stream frame: %r', data)
        return None
    if not isinstance(payload, dict):
        logger.debug('Skipping non-object stream frame: %r', data)
        return None
    _raise_for_rpc_error(payload)
    result = payload.get('result')
    if result is None:
        return None
    try:
        return Task.model_validate(result)
    except ValidationError as e:
        logger.debug('Skipping stream frame with invalid task: %s', e)
        return None


def _raise_for_rpc_error(payload: dict[str, Any]) -> None:
    if payload.get('error') is None:
        return
    try:
        error_response = JSONRPCErrorResponse.model_validate(payload)
    except ValidationError as e:
        raise A2AClientJSONError(
            f'Failed to validate JSON-RPC error structure: {e}'
        ) from e
    raise A2AClientJSONRPCError(error_response)
