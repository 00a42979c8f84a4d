"""
Logging Utilities

Service logging setup and the request-scoped adapter the publishing
components log through.

Components never print or configure logging themselves; they receive a
logger (or build a PublishLogAdapter) so tests can inject their own and
every line carries request_id / media_id.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, MutableMapping, Optional, Tuple

from config.settings import LOG_BACKUP_DAYS, LOG_DIR, LOG_LEVEL, LOG_SERVICE_FILE


class PublishLogAdapter(logging.LoggerAdapter):
    """
    Logger adapter carrying request context.

    Context keys are added to each record's extra (for structured
    handlers) and rendered as a "[request_id=... media_id=...]" prefix.

    Usage:
        log = PublishLogAdapter(logging.getLogger(__name__), request_id="ab12")
        log = log.bind(media_id="dQw4w9WgXcQ")
        log.info("Upload finished")
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        super().__init__(logger, context)

    def bind(self, **context: Any) -> "PublishLogAdapter":
        """Return a new adapter with extra context keys"""
        merged = dict(self.extra)
        merged.update(context)
        return PublishLogAdapter(self.logger, **merged)

    def process(
        self,
        msg: Any,
        kwargs: MutableMapping[str, Any],
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        context = {key: value for key, value in self.extra.items() if value is not None}

        extra = dict(kwargs.get("extra") or {})
        extra.update(context)
        kwargs["extra"] = extra

        if context:
            prefix = " ".join(f"{key}={value}" for key, value in context.items())
            msg = f"[{prefix}] {msg}"
        return msg, kwargs


def get_publish_logger(
    name: str,
    logger: Optional[logging.Logger] = None,
    **context: Any,
) -> PublishLogAdapter:
    """
    Build a context adapter around an injected or module logger.

    Args:
        name: Module name used when no logger is injected
        logger: Injected logger or adapter (optional)
        **context: request_id, media_id, ...

    Returns:
        PublishLogAdapter
    """
    if isinstance(logger, PublishLogAdapter):
        return logger.bind(**context)
    return PublishLogAdapter(logger or logging.getLogger(name), **context)


def setup_logging(
    level: str = LOG_LEVEL,
    log_dir: Optional[str] = LOG_DIR,
) -> None:
    """
    Setup logging with rotation.

    Logs to the console and, when the log directory is writable, to a
    daily-rotated file (7 days kept). Falls back to ./logs otherwise.

    Args:
        level: Root log level name
        log_dir: Directory for the rotated log file (None = console only)
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    log_format = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s | %(name)s",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_format)
    logger.addHandler(console_handler)

    if log_dir is None:
        return

    log_file = Path(log_dir) / LOG_SERVICE_FILE
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(log_file),
            when="midnight",
            interval=1,
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
    except OSError:
        # Fallback to local logs directory if log_dir not writable
        fallback_log = Path("logs") / LOG_SERVICE_FILE
        fallback_log.parent.mkdir(exist_ok=True)
        logger.warning(f"Cannot write to {log_file}, using fallback: {fallback_log}")

        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(fallback_log),
            when="midnight",
            interval=1,
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )

    file_handler.setFormatter(log_format)
    logger.addHandler(file_handler)
