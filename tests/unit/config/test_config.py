"""Tests for settings loading and logging setup."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from bat.config import Config, LoggingConfig, configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for var in (
        "BAT_CONFIG_FILE",
        "BAT_LOG_FILE",
        "BAT_ARCHIVE__TAR_BINARY",
        "BAT_ARCHIVE__TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(var, raising=False)
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()

        assert config.archive.tar_binary == "tar"
        assert config.archive.timeout_seconds == 60
        assert config.logging.level == "INFO"

    def test_reads_yaml_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("archive:\n  tar_binary: gtar\n  timeout_seconds: 10\n")
        monkeypatch.setenv("BAT_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.archive.tar_binary == "gtar"
        assert config.archive.timeout_seconds == 10

    def test_env_overrides_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("archive:\n  timeout_seconds: 10\n")
        monkeypatch.setenv("BAT_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("BAT_ARCHIVE__TIMEOUT_SECONDS", "5")

        assert Config().archive.timeout_seconds == 5

    def test_missing_yaml_file_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("BAT_CONFIG_FILE", str(tmp_path / "absent.yaml"))

        assert Config().archive.tar_binary == "tar"


class TestConfigureLogging:
    def test_logs_to_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, restore_root_logger: None
    ) -> None:
        log_file = tmp_path / "logs" / "bat.log"
        monkeypatch.setenv("BAT_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig(level="DEBUG"))
        logging.getLogger("bat.test").info("resolved stemcell")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "resolved stemcell" in log_file.read_text()

    def test_replaces_existing_handlers(self, restore_root_logger: None) -> None:
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig(level="WARNING"))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_leaves_other_loggers_alone(self, restore_root_logger: None) -> None:
        """Only the root logger is configured; named loggers keep inheriting from it."""
        configure_logging(LoggingConfig(level="DEBUG"))

        assert logging.getLogger("botocore").level == logging.NOTSET
        assert logging.getLogger("urllib3").level == logging.NOTSET
