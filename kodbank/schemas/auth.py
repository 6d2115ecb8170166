"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """New account details. phone is optional."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    email: str = Field(..., min_length=1, max_length=255, description="Email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")
    phone: str | None = Field(default=None, max_length=50, description="Phone number")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by register, login and logout."""

    message: str
