"""Register, login and logout routes, plus the session-cookie auth dependency."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from kodbank.core.config import Settings, get_settings
from kodbank.core.database import get_db
from kodbank.core.errors import InvalidCredentialsError
from kodbank.core.security import SessionClaims, verify_token
from kodbank.schemas.auth import LoginRequest, MessageResponse, RegisterRequest
from kodbank.services import accounts

router = APIRouter()


def get_current_claims(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionClaims:
    """
    Dependency: require a valid session cookie and return its claims. Raises 401 otherwise.

    Trusts the signed claims; the token log is not consulted.
    """
    token = request.cookies.get(settings.COOKIE_NAME)
    if not token:
        raise InvalidCredentialsError("Auth token is missing")
    return verify_token(token, settings)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Create an account. Does not log the user in."""
    accounts.register_account(db, body)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=MessageResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Check credentials and set the session cookie (valid for SESSION_TTL_MINUTES)."""
    session = accounts.login(db, body, settings)
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=session.token,
        max_age=settings.SESSION_TTL_MINUTES * 60,
        httponly=settings.COOKIE_HTTPONLY,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return MessageResponse(message="Login successful")


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Clear the session cookie. Always succeeds; the token itself stays valid until expiry."""
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=settings.COOKIE_HTTPONLY,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return MessageResponse(message="Logged out successfully")
