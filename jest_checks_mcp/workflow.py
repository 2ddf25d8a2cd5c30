"""GitHub Actions workflow commands, emitted through logging.

The CI entry point routes this logger to stdout with a bare message format so
the runner picks the commands up. Elsewhere they are ordinary log lines.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold the log lines emitted inside the block under `title`."""
    logger.info(f"::group::{title}")
    try:
        yield
    finally:
        logger.info("::endgroup::")


def error(message: str) -> None:
    """Report an error on the workflow run."""
    # Multi-line messages must be URL-style escaped in workflow commands
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    logger.error(f"::error::{escaped}")
