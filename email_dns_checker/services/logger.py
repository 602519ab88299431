"""Structured JSON logging."""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from email_dns_checker.config import Config


# Process-wide run ID for correlation across log entries
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
        )
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(
    verbose: bool = False, config: Optional[Config] = None
) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Call as setup_logging(config=Config.from_env()) so VERBOSE selects
    the level.

    Args:
        verbose: Log at DEBUG instead of INFO.
        config: When given, config.verbose overrides verbose.

    Returns:
        logging.Logger: Configured root logger.
    """
    if config is not None:
        verbose = config.verbose

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stdout)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_email_check(
    domain: Optional[str],
    code: int,
    failure_type: Optional[str],
    duration_ms: int,
) -> None:
    """Log structured per-address check result.

    Only the domain is logged, never the local part.

    Args:
        domain: Domain checked, or None if the address could not be split.
        code: Result code returned to the caller.
        failure_type: DNS failure label for code 3, otherwise None.
        duration_ms: Processing time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Email domain check completed",
        extra={
            "domain": domain,
            "code": int(code),
            "failure_type": failure_type,
            "duration_ms": duration_ms,
        },
    )
