"""
Create the accounts and session_tokens tables if they do not exist. Run from project root:
  python -m kodbank.scripts.init_db
Safe to run repeatedly; existing tables and rows are left alone.
"""
import logging
import sys

from kodbank.core.database import engine
from kodbank.models import Base

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.exception("Schema creation failed: %s", e)
        return 1
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
