"""Tests for configuration loading."""

from pathlib import Path

from src.config import AppConfig


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.environment == "development"
        assert config.server.port == 8000
        assert config.database.sqlite_path.name == "greetings.db"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "app.yml"
        path.write_text(
            "environment: production\n"
            "database:\n"
            f"  sqlite_path: {tmp_path / 'prod.db'}\n"
            "server:\n"
            "  port: 9000\n"
            "  log_level: warning\n"
        )

        config = AppConfig.from_yaml(path)

        assert config.environment == "production"
        assert config.database.sqlite_path == tmp_path / "prod.db"
        assert config.server.port == 9000
        assert config.server.log_level == "warning"

    def test_from_missing_yaml_uses_defaults(self, tmp_path):
        config = AppConfig.from_yaml(tmp_path / "absent.yml")
        assert config.server.host == "0.0.0.0"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GREETER_ENVIRONMENT", "staging")
        monkeypatch.setenv("GREETER_DB_SQLITE_PATH", "/tmp/other.db")
        monkeypatch.setenv("GREETER_SERVER_PORT", "8123")

        config = AppConfig()

        assert config.environment == "staging"
        assert config.database.sqlite_path == Path("/tmp/other.db")
        assert config.server.port == 8123
