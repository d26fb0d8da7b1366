"""
Logging System for the Expression Calculator

Centralized logger with verbosity levels. Results go to stdout, so the
console handler writes to stderr to keep the two streams apart.
"""

import logging
import sys
from typing import Optional
from enum import Enum
import time
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the calculator"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Batch summaries and warnings
    MODERATE = 2    # Per-expression progress
    DETAILED = 3    # Tree shapes after construction
    VERBOSE = 4     # Every stack reduction

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        try:
            return cls[name.upper()]
        except KeyError:
            valid = ', '.join(level.name.lower() for level in cls)
            raise ValueError(f"Unknown log level {name!r} (expected one of: {valid})")


class ExpressionLogger:
    """
    Centralized logger for the calculator with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.start_time = time.time()

        self.logger = logging.getLogger('expression_calculator')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_calculator_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def is_enabled(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - failed expressions and aborted batches"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self.is_enabled(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self.is_enabled(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self.is_enabled(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def batch_summary(self, processed: int, failed: int):
        if self.log_level == LogLevel.SILENT:
            return
        elapsed = time.time() - self.start_time
        self.logger.info(f"Processed {processed} expression(s), {failed} failed ({elapsed:.3f}s)")

    def close(self):
        """Flush and detach every handler"""
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)


# Global logger instance
_global_logger: Optional[ExpressionLogger] = None


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionLogger:
    """Configure the global logging system"""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = ExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_enabled(level: LogLevel) -> bool:
    """True when messages at ``level`` would be emitted"""
    return get_logger().is_enabled(level)


def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
