"""Tests for settings loading."""

import pytest

from cucu_engine.config import Settings, load_settings

VARIABLES = ("CUCU_SEED", "CUCU_LEGACY_SNAPSHOT_RULES", "CUCU_LOG_LEVEL", "CUCU_GAME_LOG_DIR")


def clear_env(monkeypatch):
    # setenv first so the variables are restored to "unset" after the test,
    # even if a .env file sets them
    for name in VARIABLES:
        monkeypatch.setenv(name, "x")
        monkeypatch.delenv(name)


class TestLoadSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        settings = load_settings(tmp_path / "missing.env")
        assert settings == Settings()

    def test_reads_environment(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("CUCU_SEED", "17")
        monkeypatch.setenv("CUCU_LEGACY_SNAPSHOT_RULES", "yes")
        monkeypatch.setenv("CUCU_LOG_LEVEL", "debug")
        monkeypatch.setenv("CUCU_GAME_LOG_DIR", "/tmp/cucu")

        settings = load_settings(tmp_path / "missing.env")

        assert settings.seed == 17
        assert settings.legacy_snapshot_rules is True
        assert settings.log_level == "DEBUG"
        assert settings.game_log_dir == "/tmp/cucu"

    def test_reads_env_file(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        env_file = tmp_path / ".env"
        env_file.write_text("CUCU_SEED=5\nCUCU_LEGACY_SNAPSHOT_RULES=false\n")

        settings = load_settings(env_file)

        assert settings.seed == 5
        assert settings.legacy_snapshot_rules is False

    def test_environment_wins_over_env_file(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("CUCU_SEED", "1")
        env_file = tmp_path / ".env"
        env_file.write_text("CUCU_SEED=5\n")

        assert load_settings(env_file).seed == 1

    def test_invalid_seed(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("CUCU_SEED", "abc")
        with pytest.raises(ValueError, match="CUCU_SEED"):
            load_settings(tmp_path / "missing.env")

    def test_invalid_bool(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("CUCU_LEGACY_SNAPSHOT_RULES", "maybe")
        with pytest.raises(ValueError, match="CUCU_LEGACY_SNAPSHOT_RULES"):
            load_settings(tmp_path / "missing.env")
