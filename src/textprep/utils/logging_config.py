"""Logging configuration backed by loguru.

Library modules log through the standard ``logging`` module
(``logging.getLogger(__name__)``). CLI entry points call ``setup_logging()``,
which routes those records into loguru and installs a stdout sink, either
human-readable or serialized JSON.
"""

import inspect
import logging
import sys
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from textprep.constants import ENV, LOG_FORMAT, LOG_LEVEL, PRODUCT

__all__ = ["logger", "setup_logging", "stage_logger", "InterceptHandler"]


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists.
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message.
        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    log_level: Union[str, int] = LOG_LEVEL,
    json_format: Optional[bool] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Configure loguru sinks and intercept standard logging.

    Args:
        log_level: Minimum level (default: LOG_LEVEL env var, INFO)
        json_format: Serialize records as JSON; None follows LOG_FORMAT=json
        log_file: Optional extra file sink (default: /tmp/<product>-dev.log in dev)

    Example:
        >>> setup_logging(log_level="DEBUG", json_format=False)
    """
    if isinstance(log_level, int):
        log_level = logging.getLevelName(log_level)
    if json_format is None:
        json_format = LOG_FORMAT == "json"

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    logger.remove()  # Remove default configuration
    logger.add(
        sys.stdout,
        level=log_level,
        backtrace=True,
        diagnose=False,
        serialize=json_format,
    )

    if log_file is None and ENV == "dev":
        log_file = f"/tmp/{PRODUCT}-{ENV}.log"
    if log_file:
        logger.add(str(log_file), level=log_level, serialize=json_format)

    logger.debug(f"Logging configured: level={log_level}, json_format={json_format}")


@contextmanager
def stage_logger(stage_name: str, **context):
    """Context manager for logging a processing stage.

    Logs entry and exit of the stage with timing information. Exceptions are
    logged and re-raised.

    Args:
        stage_name: Name of the stage
        **context: Additional context fields bound to every record

    Yields:
        Bound loguru logger for the stage

    Example:
        >>> with stage_logger("clean", source="tweets.jsonl") as log:
        ...     log.info("Cleaning records")
    """
    stage_log = logger.bind(stage=stage_name, **context)

    start_time = datetime.now(UTC)
    stage_log.info(f"Starting stage: {stage_name}")

    try:
        yield stage_log

        duration_ms = (datetime.now(UTC) - start_time).total_seconds() * 1000
        stage_log.bind(status="completed", duration_ms=round(duration_ms, 2)).info(
            f"Completed stage: {stage_name} in {duration_ms:.0f} ms"
        )

    except Exception as e:
        duration_ms = (datetime.now(UTC) - start_time).total_seconds() * 1000
        stage_log.bind(
            status="failed", duration_ms=round(duration_ms, 2), error=str(e)[:200]
        ).error(f"Failed stage: {stage_name}")
        raise
