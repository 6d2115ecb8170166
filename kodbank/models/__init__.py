"""SQLAlchemy ORM models."""

from kodbank.models.account import Account
from kodbank.models.base import Base
from kodbank.models.session_token import SessionToken

__all__ = ["Account", "Base", "SessionToken"]
