"""Logging helpers for the fleet billing engine.

Loggers are assembled with a small fluent builder and exposed through
singleton wrappers so every layer shares the same handlers.
"""

from datetime import date
import logging
from pathlib import Path
from typing import Callable

from src.utils.utils import get_project_root


FormatterFactory = Callable[[], logging.Formatter]
FileHandlerFactory = Callable[[Path, logging.Formatter], logging.Handler]
ConsoleHandlerFactory = Callable[[logging.Formatter], logging.Handler]


class LoggerBuilder:
    """Fluent builder for file and console loggers."""

    def __init__(self) -> None:
        self._name = "fleet_billing"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = True
        self._level = logging.INFO
        self._formatter_factory: FormatterFactory = self._default_formatter
        self._file_handler_factory: FileHandlerFactory = (
            self._default_file_handler
        )
        self._console_handler_factory: ConsoleHandlerFactory = (
            self._default_console_handler
        )

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(self, factory: FormatterFactory) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory: FileHandlerFactory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(
        self,
        factory: ConsoleHandlerFactory,
    ) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Create the configured logger, reusing it when already built.

        Returns:
            logging.Logger: Logger writing to the project logs directory.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return date.today().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper around a built logging.Logger."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, name: str = "fleet_billing") -> None:
        if self._initialized:
            return
        self.logger = (
            LoggerBuilder()
            .name(name)
            .subdir(self._subdir)
            .prefix(self._prefix)
            .build()
        )
        self._initialized = True

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        self.logger.critical(message)


class AppLogger(Logger):
    """Application logger used by use cases and adapters."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"


class UsageLogger(Logger):
    """Logger recording report and CLI usage."""

    _instance = None
    _subdir = "usage"
    _prefix = "usage_logs"


def get_app_logger() -> AppLogger:
    """Return the shared application logger."""
    return AppLogger("fleet_billing.app")


def get_usage_logger() -> UsageLogger:
    """Return the shared usage logger."""
    return UsageLogger("fleet_billing.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
