import logging
import sys


def setup_logging(level: str = "INFO", *, silent: bool = False):
    """
    Configures the application's logging settings.

    silent=True raises the root level above CRITICAL so nothing is emitted.
    """
    level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(logging.CRITICAL + 1 if silent else level)
