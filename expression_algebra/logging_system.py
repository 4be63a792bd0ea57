"""
Logging System for Expression Algebra

Centralized logging with verbosity levels. The library itself only emits
warnings (e.g. a constant fold that produced inf/nan) and debug messages
(rewrite rules firing, evaluation errors about to be raised).

Until ``configure_logging`` is called the ``expression_algebra`` logger has
only a ``NullHandler``: records propagate to whatever handlers the caller
set up and nothing is printed otherwise.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime

LOGGER_NAME = 'expression_algebra'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class LogLevel(Enum):
    """Enumeration of logging levels"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Warnings (non-finite constant folds)
    MODERATE = 2    # Expression reports from result_summary
    DETAILED = 3    # Same as MODERATE
    VERBOSE = 4     # All information including rewrite rule firings


class ExpressionLogger:
    """
    Centralized logger for expression algebra with context-aware formatting

    With ``install_handlers`` the ``expression_algebra`` logger is taken over:
    existing handlers are replaced by a stdout handler (and optionally a file
    handler) and propagation stops. Without it the logger's handlers and
    propagation are left as the caller configured them.
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 install_handlers: bool = True):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger(LOGGER_NAME)
        if not install_handlers:
            return

        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_algebra_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, title: str, results: Dict[str, Any]):
        """Log a key/value report, e.g. the properties of one expression"""
        if not self._should_log(LogLevel.MODERATE):
            return

        self.logger.info("=" * 60)
        self.logger.info(title)
        self.logger.info("=" * 60)

        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<30} {value:.6f}")
            else:
                self.logger.info(f"{key:.<30} {value}")


# Global logger instance
_global_logger: Optional[ExpressionLogger] = None


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance; a lazily created one installs no handlers"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger(install_handlers=False)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level without touching handlers"""
    get_logger().log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionLogger:
    """Configure the global logging system and install its stdout/file handlers"""
    global _global_logger
    _global_logger = ExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)
