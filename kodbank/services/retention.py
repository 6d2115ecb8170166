"""Token retention: delete session-token rows whose expiry has passed."""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from kodbank.models import SessionToken

if TYPE_CHECKING:
    from kodbank.core.config import Settings

logger = logging.getLogger(__name__)


def purge_expired_tokens(
    session: Session,
    settings: "Settings",
    now: datetime | None = None,
) -> int:
    """
    Delete SessionToken rows with expiry before now. Returns the number deleted.

    Idempotent: safe to run repeatedly. Does not affect authentication, which
    only looks at the token itself.
    """
    if not settings.TOKEN_RETENTION_ENABLED:
        logger.info("Token retention is disabled (TOKEN_RETENTION_ENABLED=false); skipping.")
        return 0

    cutoff = now or datetime.now(timezone.utc)
    deleted_count = (
        session.query(SessionToken)
        .filter(SessionToken.expiry < cutoff)
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Token retention run: cutoff=%s, tokens_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
