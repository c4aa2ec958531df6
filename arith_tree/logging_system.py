"""
Logging System for Expression Trees

This module provides a centralized logging system with different verbosity levels
so that tree construction and traversal stay quiet unless asked otherwise.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the expression tree package"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Only warnings and critical info
    MODERATE = 2    # Key milestones
    DETAILED = 3    # Per-operation information
    VERBOSE = 4     # All information including debug details


class ArithTreeLogger:
    """
    Centralized logger for expression tree operations with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('arith_tree')
        self.logger.setLevel(logging.DEBUG)
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove any existing handlers
        self.logger.propagate = False

        self.formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        self.console_handler: Optional[logging.StreamHandler] = None
        if self.log_level != LogLevel.SILENT:
            self._attach_console()

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"arith_tree_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(self.formatter)
            self.logger.addHandler(file_handler)

    def _attach_console(self):
        self.console_handler = logging.StreamHandler(sys.stderr)
        self.console_handler.setFormatter(self.formatter)
        self.logger.addHandler(self.console_handler)

    def set_level(self, log_level: LogLevel):
        """Change verbosity, attaching or dropping the console handler around SILENT"""
        self.log_level = log_level
        if log_level == LogLevel.SILENT:
            if self.console_handler is not None:
                self.logger.removeHandler(self.console_handler)
                self.console_handler = None
        elif self.console_handler is None:
            self._attach_console()

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[ArithTreeLogger] = None


def get_logger() -> ArithTreeLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ArithTreeLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ArithTreeLogger(log_level=level)
    else:
        _global_logger.set_level(level)


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ArithTreeLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ArithTreeLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
