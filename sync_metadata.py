import logging
import sys

from config import load_settings
from logging_setup import configure_logging
from sync.job import run_sync

logger = logging.getLogger("sync_metadata")


def main() -> int:
    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        result = run_sync(settings)
    except Exception:
        logger.exception("Sync failed")
        return 1

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
