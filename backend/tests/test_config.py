"""
Tests for configuration loading.
"""

import pytest

from hello_llm.core.config import AppConfig, ProviderSettings, load_config

CREDENTIAL_VARS = ["GOOGLE_API_KEY", "OPENAI_API_KEY", "GROQ_API_KEY", "LLM_PROVIDER"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestProviderSettings:
    """Tests for ProviderSettings environment handling."""

    def test_reads_environment(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "g-key")
        clean_env.setenv("LLM_PROVIDER", "Gemini")

        settings = ProviderSettings(_env_file=None)

        assert settings.credential("GOOGLE_API_KEY") == "g-key"
        assert settings.credential("GROQ_API_KEY") is None
        assert settings.forced_provider == "gemini"

    def test_unset_directive_is_empty(self, clean_env):
        settings = ProviderSettings(_env_file=None)
        assert settings.forced_provider == ""

    def test_directive_is_lowercased_not_stripped(self, clean_env):
        clean_env.setenv("LLM_PROVIDER", " Groq ")
        settings = ProviderSettings(_env_file=None)
        assert settings.forced_provider == " groq "

    def test_empty_credential_is_absent(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "")
        settings = ProviderSettings(_env_file=None)
        assert settings.credential("OPENAI_API_KEY") is None

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GROQ_API_KEY=q-from-file\n")

        settings = ProviderSettings(_env_file=str(env_file))

        assert settings.credential("GROQ_API_KEY") == "q-from-file"


class TestLoadConfig:
    """Tests for YAML application config."""

    def test_defaults_when_file_missing(self, tmp_path):
        config = load_config(str(tmp_path / "missing.yaml"))
        assert isinstance(config, AppConfig)
        assert config.http.timeout == 120.0
        assert config.server.port == 8090

    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  port: 9000\nhttp:\n  timeout: 15\n")

        config = load_config(str(path))

        assert config.server.port == 9000
        assert config.http.timeout == 15.0
        assert config.logging.backup_count == 5

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)).http.timeout == 120.0
