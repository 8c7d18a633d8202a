# utils/logger.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Logging utility for formula processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Optional, Tuple


RESULT_LEVEL = 25
logging.addLevelName(RESULT_LEVEL, "RESULT")


class LogLevel(Enum):
    """Log levels for formula processing.

    RESULT sits between INFO and WARNING: command output stays visible at the
    default level while progress messages need INFO.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    RESULT = RESULT_LEVEL
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ClausifyLogger:
    """Centralized logger for the CNF pipeline with structured output."""

    def __init__(self, name: str = "clausify", level: LogLevel = LogLevel.INFO):
        """Initialize the Clausify logger.

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
        console_handler.setFormatter(ClausifyFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def result(self, message: str, **kwargs):
        """Log command output (shown unless the level is WARNING or above)."""
        self.logger.log(RESULT_LEVEL, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for pipeline events
    def pass_applied(self, name: str, before: int, after: int):
        """Log a completed rewrite pass with node counts."""
        self.debug(f"  {name}: {before} nodes -> {after} nodes")

    def clauses_extracted(self, count: int, num_vars: int):
        """Log clause extraction result."""
        self.debug(f"Extracted {count} clause(s) over {num_vars} variable(s)")

    def validity_result(self, valid: bool):
        """Log the outcome of the complementary-literal check."""
        if valid:
            self.debug("✅ Every clause contains a complementary pair")
        else:
            self.debug("❓ Some clause has no complementary pair")

    def dimacs_loaded(self, path: str, num_vars: int, num_clauses: int):
        """Log a DIMACS file being read."""
        self.info(
            f"DIMACS formula loaded: {num_vars} variables, {num_clauses} clauses"
        )
        self.debug(f"  source: {path}")

    def dimacs_saved(self, path: str):
        """Log a DIMACS file being written."""
        self.info(f"DIMACS formula saved to {path}")

    def variable_mapping(self, items: Iterable[Tuple[str, int]]):
        """Log the symbol -> integer mapping."""
        self.result("Variable Mapping:")
        for symbol, identifier in items:
            self.result(f"  {symbol}   ->   {identifier}")


class ClausifyFormatter(logging.Formatter):
    """Custom formatter for Clausify logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ClausifyLogger] = None


def get_logger(name: str = "clausify") -> ClausifyLogger:
    """Get or create the global Clausify logger instance.

    Args:
        name: Logger name (default: "clausify")

    Returns:
        ClausifyLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ClausifyLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


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
