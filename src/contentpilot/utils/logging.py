"""Centralized logging configuration for ContentPilot."""

import logging
import sys
from pathlib import Path

from ..config import LogLevel

ROOT_LOGGER_NAME = "contentpilot"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def llm_context(provider: str, model: str | None = None) -> dict[str, str]:
    """Build the ``extra`` mapping that tags a record with the serving backend."""
    context = {"provider": provider}
    if model:
        context["model"] = model
    return context


class LLMContextFormatter(logging.Formatter):
    """Append ``[provider/model]`` to records logged with :func:`llm_context`.

    Records without provider context format exactly like the base formatter,
    so the fallback trail in the log file can be grepped per backend.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        provider = getattr(record, "provider", None)
        if not provider:
            return line
        model = getattr(record, "model", None)
        tag = f"{provider}/{model}" if model else provider
        first, sep, rest = line.partition("\n")
        return f"{first} [{tag}]{sep}{rest}"


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Path | None = None,
    console_level: LogLevel = "WARNING",
) -> logging.Logger:
    """Configure application logging.

    Args:
        level: Root logging level
        log_file: Optional file path for logging; records there carry provider context
        console_level: Level for console output (default WARNING to keep CLI clean)

    Returns:
        Configured root logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level))

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    # stderr so generated content on stdout stays pipeable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(LLMContextFormatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the contentpilot namespace."""
    prefix = f"{ROOT_LOGGER_NAME}."
    full_name = name if name.startswith(prefix) else f"{prefix}{name}"

    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)

    return _loggers[full_name]
