"""A2A Client Transports."""

from a2a_chat.client.transports.base import (
    ClientTransport,
    ExchangeOutcome,
    FinalOutcome,
    StreamOutcome,
)
from a2a_chat.client.transports.jsonrpc import JsonRpcTransport
from a2a_chat.client.transports.sse import SSEStreamReader


__all__ = [
    'ClientTransport',
    'ExchangeOutcome',
    'FinalOutcome',
    'JsonRpcTransport',
    'SSEStreamReader',
    'StreamOutcome',
]
