"""
Settings for the wahooks webhook integration layer.

Simple environment variable configuration. The decoding core never reads
settings; only the FastAPI router, controller and logging setup do.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                    version = pyproject_data.get("project", {}).get("version")
                    if version:
                        return version
            except (OSError, tomllib.TOMLDecodeError):
                continue

    return "0.1.0"


class Settings:
    """Application settings with environment-based configuration."""

    VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
    VALID_ENVIRONMENTS = ("DEV", "PROD")

    def __init__(self):
        self.version: str = _get_version_from_pyproject()

        # ================================================================
        # Environment & Logging
        # ================================================================
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # WhatsApp Webhook Configuration
        # ================================================================
        # Secret echoed by the provider during the verification handshake
        self.whatsapp_webhook_verify_token: str | None = os.getenv(
            "WHATSAPP_WEBHOOK_VERIFY_TOKEN"
        )
        self.webhook_path: str = os.getenv("WEBHOOK_PATH", "/webhook")

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        if self.log_level.upper() not in self.VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(self.VALID_LOG_LEVELS)}")
        self.log_level = self.log_level.upper()

        if self.environment.upper() not in self.VALID_ENVIRONMENTS:
            self.environment = "DEV"  # Default fallback
        self.environment = self.environment.upper()

        if not self.webhook_path.startswith("/"):
            self.webhook_path = f"/{self.webhook_path}"

    @property
    def has_verify_token(self) -> bool:
        return bool(self.whatsapp_webhook_verify_token)

    @property
    def is_development(self) -> bool:
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        return self.environment == "PROD"


# Global settings instance
settings = Settings()
