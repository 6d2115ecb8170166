"""ORM model for issued session tokens (audit log; never read on the request path)."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from kodbank.models.base import Base


class SessionToken(Base):
    """One row per successful login. Rows are inserted once and never updated."""

    __tablename__ = "session_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(1000), nullable=False)
    account_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expiry = Column(DateTime(timezone=True), nullable=False)

    account = relationship("Account", back_populates="session_tokens")
