"""Tests for the JSON-RPC client transport."""

import json

from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio
import respx

from a2a_chat.client.codec import encode_send_request
from a2a_chat.client.errors import (
    A2AClientHTTPError,
    A2AClientJSONError,
    A2AClientJSONRPCError,
    A2AClientPaymentRequiredError,
    A2AClientTimeoutError,
)
from a2a_chat.client.transports import (
    FinalOutcome,
    JsonRpcTransport,
    StreamOutcome,
)
from a2a_chat.types import TaskState


BASE_URL = 'http://agent.example.com'
RPC_URL = f'{BASE_URL}/a2a'


def make_task(text: str, status: str = 'completed') -> dict:
    return {
        'id': 'task-1',
        'contextId': 'ctx-1',
        'status': status,
        'messages': [
            {'role': 'agent', 'parts': [{'type': 'text', 'text': text}]}
        ],
        'artifacts': [],
    }


def sse_response(*frames: str) -> httpx.Response:
    body = ''.join(f'data: {frame}\n\n' for frame in frames)
    return httpx.Response(
        200,
        headers={'content-type': 'text/event-stream'},
        content=body.encode(),
    )


def result_frame(text: str, status: str = 'working') -> str:
    return json.dumps(
        {'jsonrpc': '2.0', 'result': make_task(text, status), 'id': 1}
    )


@pytest_asyncio.fixture
async def transport():
    async with httpx.AsyncClient() as client:
        yield JsonRpcTransport(client, BASE_URL)


async def collect(transport: JsonRpcTransport, streaming: bool = True):
    request = encode_send_request('Hello', 1, streaming=streaming)
    return [task async for task in transport.send_message_streaming(request)]


class TestJsonRpcTransportInit:
    def test_rpc_url(self):
        transport = JsonRpcTransport(httpx.AsyncClient(), f'{BASE_URL}/')
        assert transport.url == BASE_URL
        assert transport.rpc_url == RPC_URL

    def test_custom_rpc_path(self):
        transport = JsonRpcTransport(
            httpx.AsyncClient(), BASE_URL, rpc_path='/rpc'
        )
        assert transport.rpc_url == f'{BASE_URL}/rpc'


class TestSendMessage:
    @pytest.mark.asyncio
    @respx.mock
    async def test_send_message_success(self, transport):
        route = respx.post(RPC_URL).mock(
            return_value=httpx.Response(
                200,
                json={'jsonrpc': '2.0', 'result': make_task('Hi'), 'id': 1},
            )
        )

        task = await transport.send_message(
            encode_send_request('Hello', 1, context_id='ctx-1')
        )

        assert task.status == TaskState.COMPLETED
        sent = json.loads(route.calls.last.request.content)
        assert sent['method'] == 'message/send'
        assert sent['params']['configuration']['contextId'] == 'ctx-1'
        assert route.calls.last.request.headers['content-type'] == (
            'application/json'
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_message_rpc_error(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    'jsonrpc': '2.0',
                    'error': {'code': -32602, 'message': 'Invalid params'},
                    'id': 1,
                },
            )
        )

        with pytest.raises(A2AClientJSONRPCError) as excinfo:
            await transport.send_message(encode_send_request('Hello', 1))
        assert excinfo.value.code == -32602

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_message_payment_required(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(402, json={'amount': '0.01'})
        )

        with pytest.raises(A2AClientPaymentRequiredError) as excinfo:
            await transport.send_message(encode_send_request('Hello', 1))
        assert excinfo.value.payment_info == {'amount': '0.01'}

    @pytest.mark.asyncio
    @respx.mock
    async def test_payment_required_with_non_json_body(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(402, text='pay up')
        )

        with pytest.raises(A2AClientPaymentRequiredError) as excinfo:
            await transport.send_message(encode_send_request('Hello', 1))
        assert excinfo.value.payment_info == 'pay up'

    @pytest.mark.parametrize(
        ('status', 'body', 'expected'),
        [
            (500, {'message': 'DB down'}, 'DB down'),
            (
                500,
                {'jsonrpc': '2.0', 'error': {'code': -32603, 'message': 'boom'}},
                'boom',
            ),
            (404, {'title': 'Not Found', 'detail': 'No route'}, 'Not Found: No route'),
        ],
    )
    @pytest.mark.asyncio
    @respx.mock
    async def test_send_message_http_error(
        self, transport, status, body, expected
    ):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(status, json=body)
        )

        with pytest.raises(A2AClientHTTPError) as excinfo:
            await transport.send_message(encode_send_request('Hello', 1))
        assert excinfo.value.status_code == status
        assert expected in excinfo.value.message
        assert str(status) in str(excinfo.value)

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_message_invalid_json(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(200, text='<html>oops</html>')
        )

        with pytest.raises(A2AClientJSONError):
            await transport.send_message(encode_send_request('Hello', 1))

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_message_network_error(self, transport):
        respx.post(RPC_URL).mock(side_effect=httpx.ConnectError('refused'))

        with pytest.raises(A2AClientHTTPError) as excinfo:
            await transport.send_message(encode_send_request('Hello', 1))
        assert excinfo.value.status_code == 503
        assert 'Network communication error' in excinfo.value.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_send_message_timeout(self, transport):
        respx.post(RPC_URL).mock(side_effect=httpx.ReadTimeout('slow'))

        with pytest.raises(A2AClientTimeoutError):
            await transport.send_message(encode_send_request('Hello', 1))


class TestSendMessageStreaming:
    @pytest.mark.asyncio
    @respx.mock
    async def test_yields_tasks_until_done(self, transport):
        route = respx.post(RPC_URL).mock(
            return_value=sse_response(
                result_frame('Hi'),
                result_frame('Hi there', 'completed'),
                '[DONE]',
                result_frame('after done'),
            )
        )

        tasks = await collect(transport)

        assert [t.messages[0].parts[0].text for t in tasks] == [
            'Hi',
            'Hi there',
        ]
        request = route.calls.last.request
        assert request.headers['accept'] == 'text/event-stream'
        assert json.loads(request.content)['params']['configuration'] == {
            'streaming': True
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_skips_malformed_frames(self, transport):
        respx.post(RPC_URL).mock(
            return_value=sse_response(
                '{"jsonrpc": "2.0", "res',
                result_frame('Hi', 'completed'),
                '[DONE]',
            )
        )

        tasks = await collect(transport)

        assert len(tasks) == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_frame_raises(self, transport):
        error = json.dumps(
            {
                'jsonrpc': '2.0',
                'error': {'code': -32603, 'message': 'agent crashed'},
                'id': 1,
            }
        )
        respx.post(RPC_URL).mock(
            return_value=sse_response(result_frame('Hi'), error, '[DONE]')
        )

        with pytest.raises(A2AClientJSONRPCError, match='agent crashed'):
            await collect(transport)

    @pytest.mark.asyncio
    @respx.mock
    async def test_payment_required_short_circuits_sse(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(402, json={'amount': '0.01'})
        )

        with (
            patch(
                'a2a_chat.client.transports.jsonrpc.SSEStreamReader'
            ) as mock_reader,
            pytest.raises(A2AClientPaymentRequiredError) as excinfo,
        ):
            await collect(transport)

        assert excinfo.value.payment_info == {'amount': '0.01'}
        mock_reader.assert_not_called()

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(503, json={'detail': 'overloaded'})
        )

        with pytest.raises(A2AClientHTTPError) as excinfo:
            await collect(transport)
        assert excinfo.value.status_code == 503
        assert excinfo.value.message == 'overloaded'

    @pytest.mark.asyncio
    @respx.mock
    async def test_json_response_to_streaming_request(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(
                200,
                json={'jsonrpc': '2.0', 'result': make_task('Hi'), 'id': 1},
            )
        )

        tasks = await collect(transport)

        assert len(tasks) == 1
        assert tasks[0].status == TaskState.COMPLETED

    @pytest.mark.parametrize(
        'content_type',
        ['text/plain; charset=utf-8', 'application/octet-stream', None],
    )
    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_content_type_is_read_as_stream(
        self, transport, content_type
    ):
        response = sse_response(
            result_frame('Hi'),
            result_frame('Hi there', 'completed'),
            '[DONE]',
        )
        if content_type is None:
            del response.headers['content-type']
        else:
            response.headers['content-type'] = content_type
        respx.post(RPC_URL).mock(return_value=response)

        tasks = await collect(transport)

        assert [t.messages[0].parts[0].text for t in tasks] == [
            'Hi',
            'Hi there',
        ]
        assert tasks[-1].status == TaskState.COMPLETED

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_error(self, transport):
        respx.post(RPC_URL).mock(side_effect=httpx.ConnectError('refused'))

        with pytest.raises(A2AClientHTTPError) as excinfo:
            await collect(transport)
        assert excinfo.value.status_code == 503


class TestCall:
    @pytest.mark.asyncio
    @respx.mock
    async def test_unary_request_gives_final_outcome(self, transport):
        respx.post(RPC_URL).mock(
            return_value=httpx.Response(
                200,
                json={'jsonrpc': '2.0', 'result': make_task('Hi'), 'id': 1},
            )
        )

        outcome = await transport.call(encode_send_request('Hello', 1))

        assert isinstance(outcome, FinalOutcome)
        assert outcome.task.id == 'task-1'

    @pytest.mark.asyncio
    @respx.mock
    async def test_streaming_request_gives_lazy_stream_outcome(self, transport):
        route = respx.post(RPC_URL).mock(
            return_value=sse_response(result_frame('Hi', 'completed'), '[DONE]')
        )

        outcome = await transport.call(
            encode_send_request('Hello', 1, streaming=True)
        )

        assert isinstance(outcome, StreamOutcome)
        assert not route.called
        tasks = [task async for task in outcome.events]
        assert len(tasks) == 1
        assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_get_card(transport):
    respx.get(f'{BASE_URL}/.well-known/agent-card.json').mock(
        return_value=httpx.Response(
            200,
            json={
                'name': 'Echo',
                'description': 'Echoes',
                'url': BASE_URL,
                'version': '1.0.0',
                'capabilities': {'streaming': True},
                'skills': [],
            },
        )
    )

    card = await transport.get_card()

    assert card.name == 'Echo'
    assert card.capabilities.streaming is True
    assert card.capabilities.push_notifications is False
