# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""JSON-RPC envelope types used on the A2A wire."""

from typing import Any, Literal

from pydantic import Field

from a2a_chat.types.models import A2ABaseModel, Message, Task


SEND_MESSAGE_METHOD = 'message/send'


class JSONRPCError(A2ABaseModel):
    """Represents a JSON-RPC 2.0 Error object."""

    code: int
    """A number that indicates the error type that occurred."""
    message: str
    """A string providing a short description of the error."""
    data: Any | None = None
    """Additional information about the error."""


class SendMessageConfiguration(A2ABaseModel):
    """Per-request options of a `message/send` call."""

    context_id: str | None = None
    """Conversation to continue; omitted to start a new one."""
    streaming: bool = False
    """Whether the agent should answer with an SSE stream."""


class MessageSendParams(A2ABaseModel):
    """Parameters of a `message/send` call."""

    message: Message
    configuration: SendMessageConfiguration = Field(
        default_factory=SendMessageConfiguration
    )


class JSONRPCRequest(A2ABaseModel):
    """Represents a JSON-RPC 2.0 Request object."""

    jsonrpc: Literal['2.0'] = '2.0'
    method: str
    params: Any | None = None
    id: str | int | None = None


class SendMessageRequest(JSONRPCRequest):
    """A `message/send` JSON-RPC request."""

    method: Literal['message/send'] = SEND_MESSAGE_METHOD  # pyright: ignore [reportIncompatibleVariableOverride]
    params: MessageSendParams  # pyright: ignore [reportIncompatibleVariableOverride]


class JSONRPCResponse(A2ABaseModel):
    """Represents a JSON-RPC 2.0 Success Response object."""

    jsonrpc: Literal['2.0'] = '2.0'
    result: Any
    id: str | int | None = None


class SendMessageSuccessResponse(JSONRPCResponse):
    """Success response for a `message/send` call."""

    result: Task  # pyright: ignore [reportIncompatibleVariableOverride]


class JSONRPCErrorResponse(A2ABaseModel):
    """Represents a JSON-RPC 2.0 Error Response object."""

    jsonrpc: Literal['2.0'] = '2.0'
    error: JSONRPCError
    id: str | int | None = None


__all__ = [
    'SEND_MESSAGE_METHOD',
    'JSONRPCError',
    'JSONRPCErrorResponse',
    'JSONRPCRequest',
    'JSONRPCResponse',
    'MessageSendParams',
    'SendMessageConfiguration',
    'SendMessageRequest',
    'SendMessageSuccessResponse',
]
