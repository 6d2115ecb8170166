"""ORM model for bank accounts (credentials, balance and role)."""

from decimal import Decimal

from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import relationship

from kodbank.models.base import Base

DEFAULT_BALANCE = Decimal("100000.00")
DEFAULT_ROLE = "customer"


class Account(Base):
    """
    Customer account used for login and balance lookup.

    password_hash holds the bcrypt output and is never returned to clients.
    """

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    balance = Column(Numeric(15, 2), nullable=False, default=DEFAULT_BALANCE)
    phone = Column(String(50), nullable=True)
    role = Column(String(32), nullable=False, default=DEFAULT_ROLE)

    session_tokens = relationship(
        "SessionToken",
        back_populates="account",
        cascade="all, delete-orphan",
    )
