"""
Unified logging system for PollChat application.

Provides consistent logging for the client and the server with:
- Standardized log formats
- Console and file-based output
- Size-based log rotation
- Environment-specific configurations

The interactive client draws on the whole terminal, so its configuration
writes to files only. That file is where transport failures end up.

Usage:
    from PollChat.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Client started")

Configuration:
    from PollChat.core.logging import configure_logging, LogConfig

    config = LogConfig(level="DEBUG", log_dir="./logs", console_output=False)
    configure_logging(config)
"""

import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union


@dataclass
class LogConfig:
    """
    Configuration for the logging system.

    Attributes:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        console_output: Whether to output to console
        file_output: Whether to output to file
        max_bytes: Maximum size of log file before rotation (bytes)
        backup_count: Number of backup files to keep
        format_string: Custom format string for log messages
        date_format: Custom date format string
        component_levels: Dict mapping component names to log levels
    """
    level: str = "INFO"
    log_dir: str = "./logs"
    console_output: bool = True
    file_output: bool = True
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    format_string: Optional[str] = None
    date_format: str = "%Y-%m-%d %H:%M:%S"
    component_levels: Dict[str, str] = field(default_factory=dict)


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds color to console output.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def __init__(self, fmt: str, datefmt: str = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors or record.levelname not in self.COLORS:
            return super().format(record)

        # Other handlers share the record, put the plain level name back after
        original = record.levelname
        record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def get_default_format() -> str:
    """Get the default log format string."""
    return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_detailed_format() -> str:
    """Get a detailed log format string with more context."""
    return (
        "%(asctime)s - %(name)s - %(levelname)s - "
        "[%(filename)s:%(lineno)d - %(funcName)s] - %(message)s"
    )


def _level(name: Union[str, int]) -> int:
    if isinstance(name, int):
        return name
    value = logging.getLevelName(name.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {name}")
    return value


class LoggingManager:
    """
    Centralized logging manager for the application.

    Handles configuration, setup, and management of loggers across
    all components.
    """

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._handlers: List[logging.Handler] = []
        self._error_handler: Optional[logging.Handler] = None
        self._initialized = True

    def configure(self, config: LogConfig) -> None:
        """
        Configure the logging system.

        Args:
            config: Logging configuration
        """
        level = _level(config.level)

        if config.file_output:
            Path(config.log_dir).mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Drop handlers installed by an earlier configure() call
        for handler in self._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self._handlers = []
        self._error_handler = None

        if config.console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            fmt = config.format_string or get_default_format()
            console_handler.setFormatter(ColoredFormatter(fmt, config.date_format))

            root_logger.addHandler(console_handler)
            self._handlers.append(console_handler)

        if config.file_output:
            fmt = config.format_string or get_detailed_format()
            formatter = logging.Formatter(fmt, config.date_format)

            file_handler = logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, "pollchat.log"),
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            self._handlers.append(file_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, "pollchat_errors.log"),
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(formatter)
            root_logger.addHandler(error_handler)
            self._handlers.append(error_handler)
            self._error_handler = error_handler

        for component, component_level in config.component_levels.items():
            logging.getLogger(component).setLevel(_level(component_level))

        logging.getLogger(__name__).debug("Logging system configured with level: %s", config.level)

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger instance.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)

    def set_level(self, level: Union[str, int]) -> None:
        """
        Set the global log level.

        Args:
            level: Log level (string or logging constant)
        """
        level = _level(level)
        logging.getLogger().setLevel(level)

        for handler in self._handlers:
            # The error file keeps its ERROR floor
            if handler is not self._error_handler:
                handler.setLevel(level)


# Global logging manager instance
_logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return _logging_manager.get_logger(name)


def configure_logging(config: LogConfig) -> None:
    """
    Configure the logging system.

    Args:
        config: Logging configuration
    """
    _logging_manager.configure(config)


def get_logging_manager() -> LoggingManager:
    """Get the global logging manager instance."""
    return _logging_manager


def create_development_config() -> LogConfig:
    """Logging configuration for development."""
    return LogConfig(
        level="DEBUG",
        log_dir="./logs/dev",
        console_output=True,
        file_output=True,
        max_bytes=5 * 1024 * 1024,  # 5MB
        backup_count=3,
        format_string=get_detailed_format(),
        component_levels={
            "aiohttp": "WARNING",
            "asyncio": "WARNING",
        }
    )


def create_production_config() -> LogConfig:
    """Logging configuration for production."""
    return LogConfig(
        level="INFO",
        log_dir="./logs/prod",
        console_output=True,
        file_output=True,
        max_bytes=50 * 1024 * 1024,  # 50MB
        backup_count=10,
        component_levels={
            "aiohttp": "ERROR",
            "asyncio": "ERROR",
        }
    )


def create_testing_config() -> LogConfig:
    """Logging configuration for the test suite."""
    return LogConfig(
        level="DEBUG",
        console_output=True,
        file_output=False,
        format_string="%(levelname)s - %(message)s",
    )


def create_client_config(level: str = "INFO") -> LogConfig:
    """
    Logging configuration for the interactive terminal client.

    Curses owns the screen for the whole session, so nothing may be written
    to the console. Records go to ./logs/client instead.
    """
    return LogConfig(
        level=level,
        log_dir="./logs/client",
        console_output=False,
        file_output=True,
        max_bytes=5 * 1024 * 1024,
        backup_count=3,
        component_levels={
            "aiohttp": "WARNING",
            "asyncio": "WARNING",
        }
    )


def auto_configure(env: Optional[str] = None) -> None:
    """
    Automatically configure logging based on environment.

    Args:
        env: Environment name (development, production, testing).
             If None, read from POLLCHAT_ENV.
    """
    if env is None:
        env = os.environ.get("POLLCHAT_ENV", "production").lower()

    factories = {
        "development": create_development_config,
        "dev": create_development_config,
        "production": create_production_config,
        "prod": create_production_config,
        "testing": create_testing_config,
        "test": create_testing_config,
    }

    factory = factories.get(env, create_production_config)
    configure_logging(factory())

    get_logger(__name__).debug("Logging auto-configured for environment: %s", env)


__all__ = [
    'LogConfig',
    'LoggingManager',
    'ColoredFormatter',
    'get_logger',
    'configure_logging',
    'get_logging_manager',
    'create_development_config',
    'create_production_config',
    'create_testing_config',
    'create_client_config',
    'auto_configure',
    'get_default_format',
    'get_detailed_format',
]
