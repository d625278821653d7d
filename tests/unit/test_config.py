"""Tests unitarios de clipstore.config."""

from pathlib import Path

import pytest

from clipstore.config import DEFAULT_LOG_LEVEL, DEFAULT_STORE_FILE, Config, load_config


@pytest.mark.unit
class TestLoadConfig:
    def test_defaults(self) -> None:
        assert load_config() == Config(store_file=DEFAULT_STORE_FILE, log_level=DEFAULT_LOG_LEVEL)

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIPBOARD_FILE", "/tmp/other.json")
        monkeypatch.setenv("CLIPBOARD_LOG_LEVEL", "debug")
        cfg = load_config()
        assert cfg.store_file == "/tmp/other.json"
        assert cfg.log_level == "DEBUG"

    def test_dotenv_file_in_working_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("CLIPBOARD_FILE=from_dotenv.json\n", encoding="utf-8")
        assert load_config().store_file == "from_dotenv.json"

    def test_explicit_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("CLIPBOARD_LOG_LEVEL=info\n", encoding="utf-8")
        assert load_config(env_file).log_level == "INFO"

    def test_environment_wins_over_dotenv(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".env").write_text("CLIPBOARD_FILE=from_dotenv.json\n", encoding="utf-8")
        monkeypatch.setenv("CLIPBOARD_FILE", "from_env.json")
        assert load_config().store_file == "from_env.json"

    def test_dotenv_in_parent_directory_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".env").write_text("CLIPBOARD_FILE=from_parent.json\n", encoding="utf-8")
        child = tmp_path / "child"
        child.mkdir()
        monkeypatch.chdir(child)
        assert load_config().store_file == DEFAULT_STORE_FILE
