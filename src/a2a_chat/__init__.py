"""A client for A2A (Agent-to-Agent) conversational agents.

This package talks JSON-RPC over HTTP to an A2A agent, with optional
server-sent event streaming, and provides:

- Agent discovery through the well-known agent card (see a2a_chat.client)
- Multi-turn conversations with unary or streamed replies
- Interactive and scripted drivers (see a2a_chat.cli)

Example usage:

    from a2a_chat.client import A2ASession, ClientConfig

    async with A2ASession(ClientConfig(url='http://localhost:3000')) as session:
        card = await session.discover()
        task = await session.send('Hello')
        async for chunk in session.stream('Tell me more'):
            print(chunk, end='')
"""

from a2a_chat import client, types


__all__ = ['client', 'types']
