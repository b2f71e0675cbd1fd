import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


_LOG_FILE_NAME = "todo_sync.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(debug: bool = False, log_dir: Path | None = None) -> None:
    """Log to stdout and a rotating file; calling again only changes the level."""
    log_level = logging.DEBUG if debug else logging.INFO
    root_logger = logging.getLogger()
    # httpx logs every request at INFO; the API client already logs them at DEBUG.
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(log_level if debug else logging.WARNING)
    if getattr(root_logger, "_todo_sync_logging_configured", False):
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            handler.setLevel(log_level)
        return

    log_dir = log_dir or Path("./data/logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        log_dir / _LOG_FILE_NAME,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    root_logger.addHandler(stream_handler)
    root_logger.addHandler(file_handler)
    root_logger._todo_sync_logging_configured = True
