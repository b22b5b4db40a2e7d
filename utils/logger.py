# utils/logger.py
import logging
import sys
from config.paths import LOG_PATH

# Package loggers that share the application handlers
APP_LOGGERS = ("schedule", "scheduler", "holiday_sources", "core", "api")


def _build_handlers() -> list[logging.Handler]:
    # Ensure directory exists
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

    # File handler
    file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Stream handler (stdout -> docker logs)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    return [file_handler, stream_handler]


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach the file and stdout handlers to every application logger once."""
    handlers = None
    for name in APP_LOGGERS:
        app_logger = logging.getLogger(name)
        app_logger.setLevel(level)
        # Prevent duplicate handlers if imported multiple times
        if app_logger.handlers:
            continue
        if handlers is None:
            handlers = _build_handlers()
        for handler in handlers:
            app_logger.addHandler(handler)
        app_logger.propagate = False
    return logging.getLogger("schedule")


logger = setup_logging()
