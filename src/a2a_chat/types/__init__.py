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


"""A2A types module.

This module provides the pydantic models for the A2A conversational protocol
and the JSON-RPC envelopes that carry them.
"""

from a2a_chat.types.extras import (
    SEND_MESSAGE_METHOD,
    JSONRPCError,
    JSONRPCErrorResponse,
    JSONRPCRequest,
    JSONRPCResponse,
    MessageSendParams,
    SendMessageConfiguration,
    SendMessageRequest,
    SendMessageSuccessResponse,
)
from a2a_chat.types.models import (
    A2ABaseModel,
    AgentAuthentication,
    AgentCapabilities,
    AgentCard,
    AgentSkill,
    Artifact,
    Message,
    Part,
    Role,
    Task,
    TaskState,
)


__all__ = [
    'SEND_MESSAGE_METHOD',
    'A2ABaseModel',
    'AgentAuthentication',
    'AgentCapabilities',
    'AgentCard',
    'AgentSkill',
    'Artifact',
    'JSONRPCError',
    'JSONRPCErrorResponse',
    'JSONRPCRequest',
    'JSONRPCResponse',
    'Message',
    'MessageSendParams',
    'Part',
    'Role',
    'SendMessageConfiguration',
    'SendMessageRequest',
    'SendMessageSuccessResponse',
    'Task',
    'TaskState',
]
