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


"""Pydantic models for the A2A conversational protocol.

Field names are snake_case in Python and camelCase on the wire; every model
accepts both spellings when validating.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class A2ABaseModel(BaseModel):
    """Base model for all A2A types."""

    model_config = {
        'extra': 'allow',
        'populate_by_name': True,
        'alias_generator': to_camel,
    }


class Role(str, Enum):
    """The sender of a message."""

    USER = 'user'
    AGENT = 'agent'


class TaskState(str, Enum):
    """Lifecycle state of a task."""

    SUBMITTED = 'submitted'
    WORKING = 'working'
    INPUT_REQUIRED = 'input-required'
    COMPLETED = 'completed'
    FAILED = 'failed'
    CANCELED = 'canceled'


class Part(A2ABaseModel):
    """A typed piece of message content.

    Only the `text` kind is interpreted by the client; other kinds are kept
    as extra fields.
    """

    type: str = 'text'
    text: str | None = None


class Message(A2ABaseModel):
    """A single turn in a conversation."""

    role: Role
    """Who sent the message."""
    parts: list[Part] = Field(default_factory=list)
    """The content of the message."""


class Artifact(A2ABaseModel):
    """A named output produced by the agent."""

    name: str | None = None
    parts: list[Part] = Field(default_factory=list)


class Task(A2ABaseModel):
    """The unit of conversational state returned by the agent."""

    id: str
    """Opaque task identifier."""
    context_id: str
    """Identifier shared by every task of one conversation."""
    status: TaskState
    """Current lifecycle state."""
    messages: list[Message] = Field(default_factory=list)
    """Ordered message history of the task."""
    artifacts: list[Artifact] = Field(default_factory=list)
    """Ordered artifacts produced by the task."""

    @field_validator('status', mode='before')
    @classmethod
    def _unwrap_status(cls, value: Any) -> Any:
        # Some agents send `{"state": "..."}` instead of a bare string.
        if isinstance(value, dict):
            return value.get('state')
        return value


class AgentCapabilities(A2ABaseModel):
    """Optional protocol features supported by an agent."""

    streaming: bool = False
    push_notifications: bool = False


class AgentSkill(A2ABaseModel):
    """A distinct capability advertised by an agent."""

    id: str
    name: str
    description: str = ''
    tags: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)


class AgentAuthentication(A2ABaseModel):
    """Authentication schemes accepted by an agent."""

    schemes: list[str] = Field(default_factory=list)


class AgentCard(A2ABaseModel):
    """The identity and capability document an agent exposes for discovery."""

    model_config = {'frozen': True}

    name: str
    description: str = ''
    url: str
    version: str
    capabilities: AgentCapabilities = Field(default_factory=AgentCapabilities)
    skills: list[AgentSkill] = Field(default_factory=list)
    authentication: AgentAuthentication | None = None
