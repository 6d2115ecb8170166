"""Pydantic schemas for the chat assistant proxy."""

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """One turn of the conversation as the dashboard sends it (role is 'user' or 'bot')."""

    role: str = Field(..., max_length=32)
    content: str = Field(..., max_length=8000)


class ChatRequest(BaseModel):
    """Conversation history plus the new user input. Both are optional."""

    messages: list[ChatMessage] = Field(default_factory=list, max_length=100)
    input: str | None = Field(default=None, max_length=8000)
