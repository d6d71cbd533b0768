import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Send application logs to stdout, message only."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )
