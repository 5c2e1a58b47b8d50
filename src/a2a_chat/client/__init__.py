"""Client-side components for interacting with an A2A agent."""

import logging

from a2a_chat.client.card_resolver import A2ACardResolver
from a2a_chat.client.config import ClientConfig
from a2a_chat.client.errors import (
    A2AClientError,
    A2AClientHTTPError,
    A2AClientInvalidStateError,
    A2AClientJSONError,
    A2AClientJSONRPCError,
    A2AClientPaymentRequiredError,
    A2AClientTimeoutError,
    A2AClientTransportError,
)
from a2a_chat.client.session import A2ASession
from a2a_chat.client.transports import (
    ClientTransport,
    ExchangeOutcome,
    FinalOutcome,
    JsonRpcTransport,
    SSEStreamReader,
    StreamOutcome,
)


logger = logging.getLogger(__name__)


__all__ = [
    'A2ACardResolver',
    'A2AClientError',
    'A2AClientHTTPError',
    'A2AClientInvalidStateError',
    'A2AClientJSONError',
    'A2AClientJSONRPCError',
    'A2AClientPaymentRequiredError',
    'A2AClientTimeoutError',
    'A2AClientTransportError',
    'A2ASession',
    'ClientConfig',
    'ClientTransport',
    'ExchangeOutcome',
    'FinalOutcome',
    'JsonRpcTransport',
    'SSEStreamReader',
    'StreamOutcome',
]
