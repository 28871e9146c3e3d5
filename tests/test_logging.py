"""Tests for logging setup."""

import asyncio
import logging
from pathlib import Path

import pytest

from contentpilot.utils.logging import (
    FILE_FORMAT,
    ROOT_LOGGER_NAME,
    LLMContextFormatter,
    get_logger,
    llm_context,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_root_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_console_only(self) -> None:
        logger = setup_logging(level="DEBUG", console_level="ERROR")
        assert logger.name == ROOT_LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.ERROR

    def test_repeated_setup_does_not_duplicate_handlers(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "contentpilot.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("llm.manager").info("served by fallback")
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()

        assert log_file.exists()
        assert "contentpilot.llm.manager - INFO - served by fallback" in log_file.read_text()


class TestGetLogger:
    def test_prefixed(self) -> None:
        assert get_logger("cli").name == "contentpilot.cli"

    def test_already_prefixed(self) -> None:
        assert get_logger("contentpilot.cli").name == "contentpilot.cli"

    def test_cached(self) -> None:
        assert get_logger("prompts") is get_logger("prompts")


def _record(message: str, **extra: str) -> logging.LogRecord:
    record = logging.LogRecord(
        "contentpilot.llm.base", logging.WARNING, __file__, 1, message, None, None
    )
    record.__dict__.update(extra)
    return record


class TestLLMContextFormatter:
    def test_provider_and_model(self) -> None:
        formatter = LLMContextFormatter("%(levelname)s - %(message)s")
        record = _record("m1 failed", **llm_context("Google Gemini", "gemini-2.5-pro"))
        assert formatter.format(record) == "WARNING - m1 failed [Google Gemini/gemini-2.5-pro]"

    def test_provider_only(self) -> None:
        formatter = LLMContextFormatter("%(message)s")
        assert formatter.format(_record("exhausted", **llm_context("Anthropic Claude"))) == (
            "exhausted [Anthropic Claude]"
        )

    def test_plain_record_unchanged(self) -> None:
        formatter = LLMContextFormatter(FILE_FORMAT)
        record = _record("no context")
        assert formatter.format(record) == logging.Formatter(FILE_FORMAT).format(record)

    def test_tag_stays_on_first_line(self) -> None:
        formatter = LLMContextFormatter("%(message)s")
        record = _record("Raw response:\nTITLE: x", **llm_context("G", "m1"))
        assert formatter.format(record) == "Raw response: [G/m1]\nTITLE: x"

    def test_llm_context_omits_missing_model(self) -> None:
        assert llm_context("G") == {"provider": "G"}
        assert llm_context("G", "m1") == {"provider": "G", "model": "m1"}


class TestFallbackTrailInLogFile:
    def test_model_fallback_tagged(self, tmp_path: Path, make_provider) -> None:
        log_file = tmp_path / "contentpilot.log"
        setup_logging(level="DEBUG", log_file=log_file, console_level="ERROR")
        provider = make_provider("G", {"m1": RuntimeError("overloaded"), "m2": "ok"})

        asyncio.run(provider.generate_content("prompt"))
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert any("m1 failed (overloaded)" in line and line.endswith("[G/m1]") for line in lines)
        assert any("generated content with m2" in line and line.endswith("[G/m2]") for line in lines)
