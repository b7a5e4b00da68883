"""
Core configuration module for the hello-llm service.
Loads application configuration from a YAML file and provider credentials
from environment variables.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8090
    debug: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    file: str = "app.log"
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size: int = 10  # MB
    backup_count: int = 5


class HttpConfig(BaseModel):
    """Outbound HTTP client configuration."""

    timeout: float = 120.0


class AppConfig(BaseModel):
    """Main application configuration.

    Provider credentials are not part of this file; see ProviderSettings.
    """

    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
    http: HttpConfig = HttpConfig()


class ProviderSettings(BaseSettings):
    """
    Provider credentials and the forced-provider directive.

    Read from the process environment (and a local .env file) when built with
    no arguments. Tests build it directly with explicit values.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    google_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    llm_provider: Optional[str] = None

    @property
    def forced_provider(self) -> str:
        """Lower-cased forced directive, empty string when unset."""
        return (self.llm_provider or "").lower()

    def credential(self, env_var: str) -> Optional[str]:
        """
        Return the credential stored under an environment variable name.

        Args:
            env_var: Variable name, e.g. "GOOGLE_API_KEY".

        Returns:
            The credential, or None when absent or empty.
        """
        value = getattr(self, env_var.lower(), None)
        return value or None


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file. If None, uses default location.

    Returns:
        AppConfig instance with loaded configuration.
    """
    if config_path is None:
        config_path = os.environ.get("HELLO_CONFIG")
        if config_path is None:
            config_path = get_project_root() / "config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
            return AppConfig(**config_data)

    return AppConfig()


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_provider_settings() -> ProviderSettings:
    """
    Read provider credentials and the forced directive.

    A fresh instance is built on every call; nothing is cached between
    invocations.
    """
    return ProviderSettings()


def get_log_path() -> Path:
    """
    Get the absolute path to the log file.

    Supports both container and local development modes:
    - Container: $LOGS_DIR/app.log
    - Local: project_root/logs/app.log
    """
    config = get_config()

    logs_dir_env = os.environ.get("LOGS_DIR")

    if logs_dir_env:
        log_dir = Path(logs_dir_env)
    else:
        log_dir = get_project_root() / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)

    # Use only the filename from config so logs never go outside logs/
    name = Path(config.logging.file).name or "app.log"
    return log_dir / name
