"""Unit tests for application settings configuration."""

from pathlib import Path

from assignment_service.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_database_options_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://app:secret@db:5432/assignments")
    monkeypatch.setenv("PORT", "5005")
    monkeypatch.setenv("DB_STATEMENT_TIMEOUT", "2.5")

    settings = Settings()

    assert settings.database_url == "postgresql://app:secret@db:5432/assignments"
    assert settings.port == 5005
    assert settings.db_statement_timeout == 2.5
