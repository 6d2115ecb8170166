"""
CLI entrypoint for the expired session-token purge. Run from cron, e.g.:

  python -m kodbank.retention

Or hourly: 0 * * * * cd /path/to/kodbank && .venv/bin/python -m kodbank.retention
"""

import logging
import sys

from kodbank.core.config import get_settings
from kodbank.core.database import SessionLocal
from kodbank.services.retention import purge_expired_tokens

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete session-token rows whose expiry has passed."""
    settings = get_settings()
    db = SessionLocal()
    try:
        tokens_deleted = purge_expired_tokens(db, settings)
        logger.info("Token retention completed: tokens_deleted=%s", tokens_deleted)
        return 0
    except Exception as e:
        logger.exception("Token retention job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
