"""
Logging utilities for the analyzer client.

Every record carries a ``job_id`` attribute so upload, polling and terminal
events for one analysis job can be followed in the output.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | job=%(job_id)s | %(message)s"


class JobContextFilter(logging.Filter):
    """Default ``job_id`` for records logged without ``extra={"job_id": ...}``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "job_id"):
            record.job_id = "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the job-aware format."""
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(JobContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level.upper(), handlers=[handler])

    # httpx logs each request at INFO; keep it at WARNING unless debugging.
    if logging.getLogger().level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["JobContextFilter", "LOG_FORMAT", "configure_logging"]
