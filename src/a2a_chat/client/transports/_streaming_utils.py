"""Shared helpers for classifying HTTP responses before decoding them."""

from __future__ import annotations

import json
import logging

from typing import Any

import httpx  # noqa: TC002

from a2a_chat.client.errors import (
    A2AClientHTTPError,
    A2AClientPaymentRequiredError,
)


logger = logging.getLogger(__name__)

SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 300
PAYMENT_REQUIRED_STATUS = 402


async def ensure_success_response(response: httpx.Response) -> None:
    """Validate the HTTP status before any JSON-RPC or SSE decoding.

    A 402 short-circuits into `A2AClientPaymentRequiredError` carrying the
    challenge body; any other non-2xx status becomes `A2AClientHTTPError`.
    """
    if response.status_code == PAYMENT_REQUIRED_STATUS:
        raise await _build_payment_required_error(response)

    if not SUCCESS_STATUS_MIN <= response.status_code < SUCCESS_STATUS_MAX:
        raise await _build_http_error(response)


def is_json_response(response: httpx.Response) -> bool:
    """Whether the response declares a plain JSON body.

    Any other Content-Type, or none at all, is read as an SSE stream.
    """
    content_type = response.headers.get('content-type', '').lower()
    return 'application/json' in content_type


async def _build_payment_required_error(
    response: httpx.Response,
) -> A2AClientPaymentRequiredError:
    body_text = await _read_body(response)
    payment_info: Any | None
    try:
        payment_info = response.json()
    except (json.JSONDecodeError, ValueError):
        payment_info = body_text
    logger.info('Payment required (402): %s', payment_info)
    return A2AClientPaymentRequiredError(payment_info)


async def _build_http_error(response: httpx.Response) -> A2AClientHTTPError:
    body_text = await _read_body(response)
    json_payload: Any | None
    try:
        json_payload = response.json()
    except (json.JSONDecodeError, ValueError):
        json_payload = None

    message = _extract_message(response, json_payload, body_text)
    return A2AClientHTTPError(
        response.status_code,
        message,
        body=body_text,
        headers=dict(response.headers),
    )


async def _read_body(response: httpx.Response) -> str | None:
    await response.aread()
    text = response.text
    return text if text else None


def _extract_message(
    response: httpx.Response,
    json_payload: Any | None,
    body_text: str | None,
) -> str:
    message: str | None = None
    if isinstance(json_payload, dict):
        error = json_payload.get('error')
        title = _coerce_str(json_payload.get('title'))
        detail = _coerce_str(json_payload.get('detail'))
        if isinstance(error, dict):
            # JSON-RPC error envelope returned with a non-2xx status.
            message = _coerce_str(error.get('message'))
        elif title and detail:
            message = f'{title}: {detail}'
        else:
            for key in ('message', 'detail', 'error', 'title'):
                value = _coerce_str(json_payload.get(key))
                if value:
                    message = value
                    break
    elif isinstance(json_payload, list):
        for item in json_payload:
            value = _coerce_str(item)
            if value:
                message = value
                break

    if not message and body_text:
        stripped = body_text.strip()
        if stripped:
            message = stripped

    if not message:
        reason = getattr(response, 'reason_phrase', '') or ''
        message = reason or 'HTTP error'

    return message


def _coerce_str(value: Any) -> str | None:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None
