"""Chat endpoint: proxy the dashboard assistant to the hosted model."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from kodbank.api.auth import get_current_claims
from kodbank.core.config import Settings, get_settings
from kodbank.core.security import SessionClaims
from kodbank.schemas.chat import ChatRequest
from kodbank.services.chat import run_chat

router = APIRouter()


@router.post("/chat")
async def post_chat(
    body: ChatRequest,
    _claims: Annotated[SessionClaims, Depends(get_current_claims)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, Any]:
    """
    Send the conversation to the model and return its chat-completions response as-is.

    Provider errors come back with the provider's status and body.
    """
    return await run_chat(body, settings)
