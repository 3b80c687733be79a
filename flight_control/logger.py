"""Logging setup for the flight control service: console plus rotating log file."""

import logging
import logging.handlers

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set on the handlers we install so a second call replaces instead of stacking them
_HANDLER_TAG = "_flight_control_handler"


def configure_logging(level: str = "INFO", log_file: str = "flight_control.log") -> None:
    """
    Configure console and rotating-file logging for the flight control core.

    Calling it again (e.g. on app reload) swaps the handlers installed by the
    previous call. Per-request uvicorn access lines are kept at WARNING so the
    takeoff / landing messages stay readable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10 * 1024 * 1024, backupCount=5
    )
    for handler in (console_handler, file_handler):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        root_logger.addHandler(handler)

    root_logger.setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
