"""Constants for well-known URIs and defaults used throughout the client."""

AGENT_CARD_WELL_KNOWN_PATH = '/.well-known/agent-card.json'
DEFAULT_RPC_URL = '/a2a'
DEFAULT_SERVER_URL = 'http://localhost:3000'
DEFAULT_TIMEOUT = 30.0
"""Default timeout in seconds for unary requests."""
SSE_DONE_SENTINEL = '[DONE]'
