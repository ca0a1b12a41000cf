"""
Logging configuration for extgroup
Console logging goes to stderr so the report on stdout stays clean
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'       # Reset
    }

    def format(self, record):
        # Color a copy so other handlers keep the plain levelname
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"

        return super().format(record)


def setup_logger(name: str = None, level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Setup logger with a stderr console handler and an optional file handler"""

    if name is None:
        name = "extgroup"

    logger = logging.getLogger(name)
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)

    # Reconfiguring replaces the handlers installed by a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if log_file else numeric_level)
    logger.propagate = False

    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    if sys.stderr.isatty():
        console_formatter = ColoredFormatter(log_format, datefmt='%H:%M:%S')
    else:
        console_formatter = logging.Formatter(log_format, datefmt='%H:%M:%S')

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s() - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(log_file).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always DEBUG for file
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

            logger.debug(f"Logging to file: {log_path}")

        except OSError as e:
            logger.warning(f"Could not setup file logging: {e}")

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger instance"""
    if name is None:
        name = "extgroup"

    logger = logging.getLogger(name)
    if not logger.handlers and name == "extgroup":
        setup_logger(name)

    return logger


def set_debug_mode():
    """Enable debug output on the console"""
    logger = get_logger()
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(logging.DEBUG)


def log_config_info(logger: logging.Logger, config: Dict[str, Any], source: Optional[Path] = None):
    """Log the effective settings"""
    if source is not None:
        logger.info(f"Loaded configuration from {source}")
    else:
        logger.debug("No configuration file given, using defaults")

    logger.debug(f"Configuration: {config}")
