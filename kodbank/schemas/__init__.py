"""Pydantic request/response schemas."""

from kodbank.schemas.account import BalanceResponse
from kodbank.schemas.auth import LoginRequest, MessageResponse, RegisterRequest
from kodbank.schemas.chat import ChatMessage, ChatRequest
from kodbank.schemas.health import HealthResponse

__all__ = [
    "BalanceResponse",
    "ChatMessage",
    "ChatRequest",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
]
