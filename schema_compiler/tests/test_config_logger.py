from __future__ import annotations

import logging
from pathlib import Path

import pydantic
import pytest

from schema_compiler.config import SchemaCompilerConfig
from schema_compiler.logger import ColoredFormatter, get_logger


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep a developer's .env out of the settings under test.
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "HTTP_TIMEOUT", "HTTP_VERIFY_SSL", "ALLOW_REMOTE_SOURCES", "FIXTURES_DIR"):
        monkeypatch.delenv(f"SCHEMA_COMPILER_{name}", raising=False)


def test_config_defaults() -> None:
    settings = SchemaCompilerConfig()

    assert settings.log_level == "INFO"
    assert settings.http_timeout == 10.0
    assert settings.http_verify_ssl is True
    assert settings.allow_remote_sources is True
    assert settings.fixtures_dir == "./fixtures"


def test_config_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEMA_COMPILER_LOG_LEVEL", "debug")
    monkeypatch.setenv("SCHEMA_COMPILER_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("SCHEMA_COMPILER_ALLOW_REMOTE_SOURCES", "false")

    settings = SchemaCompilerConfig()

    assert settings.log_level == "DEBUG"
    assert settings.http_timeout == 2.5
    assert settings.allow_remote_sources is False


def test_config_reads_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("SCHEMA_COMPILER_FIXTURES_DIR=/srv/fixtures\n", encoding="utf-8")

    assert SchemaCompilerConfig().fixtures_dir == "/srv/fixtures"


@pytest.mark.parametrize(("name", "value"), [("LOG_LEVEL", "verbose"), ("HTTP_TIMEOUT", "0")])
def test_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(f"SCHEMA_COMPILER_{name}", value)

    with pytest.raises(pydantic.ValidationError):
        SchemaCompilerConfig()


def test_get_logger_is_cached_and_isolated() -> None:
    logger = get_logger("schema_compiler.tests.cached", level=logging.WARNING)

    assert get_logger("schema_compiler.tests.cached") is logger
    assert logger.level == logging.WARNING
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, ColoredFormatter)


def test_colored_formatter_leaves_record_untouched() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s | %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

    line = formatter.format(record)

    assert "\033[31m" in line
    assert line.endswith("| boom")
    assert record.levelname == "ERROR"
