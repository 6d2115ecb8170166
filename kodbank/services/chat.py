"""Chat assistant: forward the conversation to the Hugging Face chat-completions router."""

import json
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from kodbank.core.errors import UpstreamError
from kodbank.schemas.chat import ChatRequest

if TYPE_CHECKING:
    from kodbank.core.config import Settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful and concise AI assistant for Kodbank, a modern online banking "
    "platform. You answer financial questions clearly and helpfully."
)

PROVIDER_FAILURE_MESSAGE = "Failed to communicate with AI provider"


def build_messages(body: ChatRequest) -> list[dict[str, str]]:
    """System prompt, then history ('bot' turns become 'assistant'), then the new input."""
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    for m in body.messages:
        role = "assistant" if m.role == "bot" else "user"
        messages.append({"role": role, "content": m.content})
    if body.input:
        messages.append({"role": "user", "content": body.input})
    return messages


async def run_chat(body: ChatRequest, settings: "Settings") -> dict[str, Any]:
    """
    Send the conversation to the model and return the provider's JSON response unchanged.

    Raises UpstreamError with the provider's status and body on a non-2xx reply, or
    with status 502 when the provider is unreachable, times out or returns non-JSON.
    """
    url = f"{settings.HF_BASE_URL}/chat/completions"
    payload = {
        "model": settings.HF_MODEL,
        "messages": build_messages(body),
        "max_tokens": settings.HF_MAX_TOKENS,
        "temperature": settings.HF_TEMPERATURE,
    }
    headers = {
        "Authorization": f"Bearer {settings.HF_API_KEY.get_secret_value()}",
        "Content-Type": "application/json",
    }
    timeout = httpx.Timeout(settings.HF_REQUEST_TIMEOUT_SEC)
    start = time.perf_counter()

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as e:
        logger.warning(
            "Chat request failed",
            extra={
                "llm_latency_seconds": time.perf_counter() - start,
                "model": settings.HF_MODEL,
                "error_type": type(e).__name__,
            },
        )
        raise UpstreamError(PROVIDER_FAILURE_MESSAGE, cause=e) from e

    elapsed = time.perf_counter() - start
    ok = 200 <= response.status_code < 300
    try:
        data = response.json()
    except json.JSONDecodeError as e:
        logger.warning(
            "Chat provider returned a non-JSON body",
            extra={"status_code": response.status_code, "model": settings.HF_MODEL},
        )
        # keep the provider status on error replies; a 2xx without JSON is a bad gateway
        raise UpstreamError(
            PROVIDER_FAILURE_MESSAGE,
            status_code=None if ok else response.status_code,
            cause=e,
        ) from e

    logger.info(
        "Chat request completed",
        extra={
            "llm_latency_seconds": elapsed,
            "model": settings.HF_MODEL,
            "status_code": response.status_code,
            "message_count": len(payload["messages"]),
        },
    )

    if not ok:
        raise UpstreamError(
            f"AI provider returned status {response.status_code}",
            status_code=response.status_code,
            body=data,
        )
    return data
