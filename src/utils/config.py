"""Configuration management for the document analysis service.

Loads and validates YAML configuration with sensible defaults for the
Document AI processor, the Gemini generation model, and the HTTP server.
Deployment secrets are read from environment variables on top of the file.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Environment variable -> (section, field)
_ENV_OVERRIDES: dict[str, tuple[str | None, str]] = {
    "PROJECT_ID": ("google", "project_id"),
    "PROCESSOR_ID": ("google", "processor_id"),
    "client_email": ("google", "client_email"),
    "private_key": ("google", "private_key"),
    "LOG_LEVEL": (None, "log_level"),
}


class GoogleCloudConfig(BaseModel):
    """Google Cloud project, Document AI processor, and service account."""

    project_id: str | None = None
    processor_id: str | None = None
    location: str = "us"
    client_email: str | None = None
    private_key: str | None = None

    @property
    def processor_name(self) -> str:
        """Fully qualified Document AI processor resource path."""
        return (
            f"projects/{self.project_id}/locations/{self.location}"
            f"/processors/{self.processor_id}"
        )

    @property
    def is_complete(self) -> bool:
        return all(
            (self.project_id, self.processor_id, self.client_email, self.private_key)
        )


class GenerationConfig(BaseModel):
    """Configuration for the Vertex AI generative model."""

    model_name: str = "gemini-2.5-flash-lite"
    location: str = "us-central1"
    temperature: float = 0.3
    max_output_tokens: int = 300
    fallback_text: str = "No response generated."
    parallel: bool = False


class ServerConfig(BaseModel):
    """Configuration for the uvicorn server."""

    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel):
    """Top-level application configuration."""

    google: GoogleCloudConfig = Field(default_factory=GoogleCloudConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    log_level: str = "INFO"


def _apply_env_overrides(raw: dict) -> dict:
    """Overlay deployment environment variables onto raw config data."""
    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        if section is None:
            raw[key] = value
        else:
            raw.setdefault(section, {})[key] = value
    return raw


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file and the environment.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    raw: dict = {}
    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found at %s, using defaults", path)

    return AppConfig(**_apply_env_overrides(raw))
