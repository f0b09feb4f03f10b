"""
Logging Configuration
Sets up the 'skillmap' logger and routes Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional, Union

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Qt message severities -> logging levels
_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

qt_logger = logging.getLogger("skillmap.qt")


def resolve_level(level: Union[int, str]) -> int:
    """
    Accept a level number or a name such as "debug" / "INFO".

    Raises:
        ValueError: If the name is not a logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return value


def qt_message_handler(msg_type: QtMsgType, context, message: str) -> None:
    qt_logger.log(_QT_LEVELS.get(msg_type, logging.WARNING), message)


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'skillmap' namespace.

    Args:
        level: Logging level, as a number or a name (e.g. "DEBUG" shows omitted edges).
        log_file: Optional path to save logs to a file.
    """
    level = resolve_level(level)
    logger = logging.getLogger("skillmap")
    logger.setLevel(level)

    # Avoid duplicate handlers when the application is started twice in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    qInstallMessageHandler(qt_message_handler)
    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
