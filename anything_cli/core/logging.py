"""
Centralized Logging Configuration.

All modules use this logging setup. Defaults come from the packaged
settings/logging.yaml; ANYTHING_CLI_LOG_* environment variables override
them per run.

Handlers write to stderr. Stdout belongs to the server's directives and
to raw response bodies, so nothing diagnostic may land there.

Structured fields in every JSON log record:
    timestamp   - ISO 8601 UTC timestamp
    level       - Log level (debug, info, warning, error, critical)
    logger      - Module path (e.g., anything_cli.protocol.executor)
    event       - Log message
    func_name   - Function that emitted the log
    lineno      - Line number in source file
    source      - Origin context, set explicitly (cli, http, protocol, shell, ...)

Usage:
    from anything_cli.core.logging import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
    logger.debug("Message", key="value")

    from anything_cli.core.logging import log_with_source
    log_with_source(logger, "shell", "debug", "Script finished", returncode=0)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from anything_cli.core.config import get_settings, load_validated
from anything_cli.core.config_schema import LoggingSchema

VALID_SOURCES = frozenset({
    "cli",
    "config",
    "http",
    "protocol",
    "shell",
    "git",
    "update",
})
"""
Recognized log source values, for documentation and validation.
Source is always set explicitly by the caller. Never guessed from logger names.
"""

_logging_config: dict[str, Any] | None = None


def _load_logging_config() -> dict[str, Any]:
    """
    Load logging configuration from settings/logging.yaml.

    Returns:
        Dictionary containing logging configuration

    Raises:
        FileNotFoundError: If logging.yaml does not exist
        ValueError: If logging.yaml does not match LoggingSchema
    """
    global _logging_config
    if _logging_config is None:
        _logging_config = load_validated(LoggingSchema, "logging.yaml").model_dump()
    return _logging_config


def _get_logging_config() -> dict[str, Any]:
    """Get the cached logging configuration."""
    return _load_logging_config()


def _resolve_log_path(configured_path: str) -> Path:
    """Resolve the log file path, expanding a leading ~."""
    return Path(configured_path).expanduser()


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure structured logging for the CLI.

    Precedence, highest first: explicit arguments, ANYTHING_CLI_* environment
    variables, settings/logging.yaml.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_type: Output format ('json' or 'console').
        enable_console: Whether to log to stderr.
        log_file: Path of a JSONL log file. Setting it enables file logging.
    """
    config = _get_logging_config()
    settings = get_settings()

    effective_level = level or settings.log_level or config["level"]
    effective_format = format_type or settings.log_format or config["format"]

    handlers_config = config["handlers"]
    console_config = handlers_config["console"]
    file_config = handlers_config["file"]

    effective_console_enabled = (
        enable_console if enable_console is not None
        else console_config["enabled"]
    )
    effective_log_file = log_file or settings.log_file
    effective_file_enabled = effective_log_file is not None or file_config["enabled"]
    if effective_log_file is None:
        effective_log_file = file_config["path"]

    log_level = getattr(logging, effective_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=shared_processors,
    )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if effective_format == "console":
        console_formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
            foreign_pre_chain=shared_processors,
        )
    else:
        console_formatter = json_formatter

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if effective_console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if effective_file_enabled:
        log_path = _resolve_log_path(effective_log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=file_config["max_bytes"],
            backupCount=file_config["backup_count"],
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
    logging.getLogger("httpcore").setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message with an explicit source.

    Args:
        logger: The logger instance
        source: Log source (cli, config, http, protocol, shell, git, update)
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **kwargs: Additional context fields

    Raises:
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "http", "debug", "API response", status_code=200)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
