from __future__ import annotations

import logging

from sfdxpackage.exceptions.errors import SfdxPackageError

logger = logging.getLogger("sfdxpackage")


def handle_error(exc: SfdxPackageError) -> int:
    """Log a failed run and return the process exit code for it."""
    logger.error("ERROR kind=%s An error has occurred: %s", type(exc).__name__, exc)
    return exc.exit_code
