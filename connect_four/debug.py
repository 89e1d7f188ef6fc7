"""
debug.py - Debug and logging facilities for the Connect Four game

This module wraps the standard logging package behind a small manager with
named levels, per-component filtering, optional file output and simple
performance markers. Every module logs through the shared ``debug`` instance.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, List, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# logging has no TRACE level, register one below DEBUG
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE,
}

LOGGER_NAME = "connect_four"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Routes component-tagged messages to the ``connect_four`` logger."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._enabled_components: Set[str] = set()  # empty means all
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(LEVEL_MAP[self._level])

        # Console output goes to stderr so it never mixes with the game board
        if not any(getattr(h, "_connect_four_console", False) for h in logger.handlers):
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            console_handler._connect_four_console = True
            logger.addHandler(console_handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[List[str]] = None) -> None:
        """
        Configure the debug manager settings.

        Args:
            level: Debug level to set
            enabled: Whether logging is enabled at all
            log_file: Path to a log file ("" removes file logging)
            components: Components to log for (empty list for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = None
            if log_file:
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)
                self._log_file = log_file

        if components is not None:
            self._enabled_components = set(components)

    def _should_log(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        if not self._enabled or level.value > self._level.value:
            return False

        if component and self._enabled_components and component not in self._enabled_components:
            return False

        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        """Log ``message`` at ``level``, tagged with ``component`` if given."""
        if level == DebugLevel.NONE or not self._should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str) -> None:
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a timer started with start_timer and log the elapsed time.

        Returns:
            Elapsed seconds, or None if the marker was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a command-line string; returns False if unknown."""
        try:
            level = DebugLevel[level_str.strip().upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


debug = DebugManager()
