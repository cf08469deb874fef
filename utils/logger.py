# utils/logger.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Logging utility for judgment runs with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for judgment runs."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TribunalLogger:
    """Centralized logger for judgment runs with structured turn output."""

    def __init__(self, name: str = "tribunal", level: LogLevel = LogLevel.INFO):
        """Initialize the Tribunal logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TribunalFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> int:
        return self.logger.level

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (per-turn detail)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for judgment events
    def run_start(self, arbiter_name: str, subject_name: str):
        """Log the start of a run."""
        self.debug(f"=== Judging {subject_name} with {arbiter_name} ===")

    def turn(self, calls: int, stimulus: object, reactions: list):
        """Log one completed turn."""
        shown = ", ".join(str(r) for r in reactions) or "(silent)"
        self.debug(f"  turn {calls}: {stimulus} → {shown}")

    def verdict_reached(self, verdict: object, calls: int):
        """Log the terminal verdict of a run."""
        self.debug(f"  verdict after {calls} call(s): {verdict}")

    def call_limit_reached(self, limit: int, pending: object):
        """Log a run cut short by the call limit."""
        self.warning(f"⚠️  Call limit {limit} reached with {pending} pending")

    def arbiter_failure(self, arbiter_name: str, error: BaseException):
        """Log an internal arbiter error."""
        self.error(f"💥 {arbiter_name} failed internally: {error}")

    def final_verdict(self, verdict: object, calls: int):
        """Log the final verdict of a run."""
        self.info(f"\n>>> FINAL VERDICT: {verdict} ({calls} call(s)) <<<")


class TribunalFormatter(logging.Formatter):
    """Custom formatter for Tribunal logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TribunalLogger] = None


def get_logger(name: str = "tribunal") -> TribunalLogger:
    """Get or create the global Tribunal logger instance.

    Args:
        name: Logger name (default: "tribunal")

    Returns:
        TribunalLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TribunalLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
