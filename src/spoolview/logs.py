# =============================================================================
# Logging Setup
# =============================================================================
# Modules log through `logging.getLogger(__name__)`. While the pager runs
# the terminal belongs to Textual, so log records go to a file instead of
# stderr (by default spoolview.log in the XDG state directory).
# =============================================================================

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | int, log_file: Path) -> logging.Logger:
    """
    Send spoolview's log records to a file.

    Args:
        level: Level name ("DEBUG", "WARNING", ...) or number.
        log_file: File to append to. Its directory is created if needed.

    Returns:
        The configured "spoolview" logger.
    """
    logger = logging.getLogger("spoolview")
    logger.setLevel(level)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Replace handlers from an earlier call
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)

    return logger
