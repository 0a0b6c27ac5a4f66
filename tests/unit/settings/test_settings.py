"""
Unit tests for agent_run_items.config.settings

Covers: RunItemSettings defaults, from_env, configure_logging
"""

import logging

import pytest

from agent_run_items.config.settings import PACKAGE_LOGGER, RunItemSettings, configure_logging


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("RUN_ITEMS_STRICT_DESERIALIZATION", "RUN_ITEMS_LOG_LEVEL"):
        # load_dotenv writes to os.environ; setenv first so teardown removes it
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


class TestRunItemSettings:
    def test_defaults(self):
        settings = RunItemSettings()
        assert settings.strict_deserialization is False
        assert settings.log_level == "WARNING"

    def test_from_env_defaults(self, clean_env, tmp_path):
        settings = RunItemSettings.from_env(str(tmp_path / "missing.env"))
        assert settings.strict_deserialization is False
        assert settings.log_level == "WARNING"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on"])
    def test_from_env_strict_true(self, clean_env, tmp_path, value):
        clean_env.setenv("RUN_ITEMS_STRICT_DESERIALIZATION", value)
        assert RunItemSettings.from_env(str(tmp_path / "missing.env")).strict_deserialization is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_from_env_strict_false(self, clean_env, tmp_path, value):
        clean_env.setenv("RUN_ITEMS_STRICT_DESERIALIZATION", value)
        assert RunItemSettings.from_env(str(tmp_path / "missing.env")).strict_deserialization is False

    def test_from_env_log_level(self, clean_env, tmp_path):
        clean_env.setenv("RUN_ITEMS_LOG_LEVEL", "debug")
        assert RunItemSettings.from_env(str(tmp_path / "missing.env")).log_level == "DEBUG"

    def test_from_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("RUN_ITEMS_STRICT_DESERIALIZATION=true\nRUN_ITEMS_LOG_LEVEL=info\n")
        settings = RunItemSettings.from_env(str(env_file))
        assert settings.strict_deserialization is True
        assert settings.log_level == "INFO"


class TestConfigureLogging:
    def test_sets_level(self, restore_package_logger):
        package_logger = configure_logging(RunItemSettings(log_level="DEBUG"))
        assert package_logger is restore_package_logger
        assert package_logger.level == logging.DEBUG

    def test_unknown_level_falls_back(self, restore_package_logger):
        package_logger = configure_logging(RunItemSettings(log_level="CHATTY"))
        assert package_logger.level == logging.WARNING
