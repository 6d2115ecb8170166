"""Account operations: registration, login (token issuance) and balance lookup."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kodbank.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from kodbank.core.security import SessionClaims, hash_password, issue_token, verify_password
from kodbank.models import Account, SessionToken
from kodbank.models.account import DEFAULT_BALANCE, DEFAULT_ROLE
from kodbank.schemas.auth import LoginRequest, RegisterRequest

if TYPE_CHECKING:
    from kodbank.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


@dataclass(frozen=True)
class IssuedSession:
    """Result of a successful login: the signed token and when it stops being valid."""

    token: str
    expiry: datetime
    claims: SessionClaims


def register_account(db: Session, body: RegisterRequest) -> Account:
    """
    Create an account with the default balance and role.

    Duplicate username or email is detected from the unique constraint on insert
    (no lookup first), so two concurrent registrations cannot both succeed.
    Raises ConflictError on a duplicate.
    """
    account = Account(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password),
        balance=DEFAULT_BALANCE,
        phone=body.phone,
        role=DEFAULT_ROLE,
    )
    db.add(account)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Registration rejected: username or email already exists")
        raise ConflictError("Username or email already exists") from e
    db.refresh(account)
    logger.info("Account registered", extra={"account_id": account.id})
    return account


def authenticate(db: Session, username: str, password: str) -> Account:
    """
    Return the account for a username/password pair.

    Unknown username and wrong password raise the same InvalidCredentialsError.
    """
    # No rate limiting or timing equalization on failures; both are known gaps.
    account = db.query(Account).filter(Account.username == username).first()
    if account is None or not verify_password(password, account.password_hash):
        logger.info("Login failed: invalid credentials")
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
    return account


def login(db: Session, body: LoginRequest, settings: "Settings") -> IssuedSession:
    """Authenticate, issue a session token and record it in the token log."""
    account = authenticate(db, body.username, body.password)

    ttl = timedelta(minutes=settings.SESSION_TTL_MINUTES)
    claims = SessionClaims(subject=account.username, account_id=account.id, role=account.role)
    now = datetime.now(UTC)
    expiry = now + ttl
    token = issue_token(claims, settings, ttl=ttl, now=now)

    db.add(SessionToken(token=token, account_id=account.id, expiry=expiry))
    db.commit()
    logger.info("Login succeeded", extra={"account_id": account.id})
    return IssuedSession(token=token, expiry=expiry, claims=claims)


def get_balance(db: Session, account_id: int) -> Decimal:
    """Return the balance for an account id. Raises NotFoundError if the account is gone."""
    balance = db.query(Account.balance).filter(Account.id == account_id).scalar()
    if balance is None:
        raise NotFoundError("User not found")
    return balance
