"""
Test-suite configuration module.

This module defines configuration classes for the environments the
suite can target (a local development app, the in-process markup stub,
and a live deployment). Configuration values are loaded from
environment variables with sensible defaults.

Credentials are never configured here; only the names of the
environment variables that carry them.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("E2E_BASE_URL", "http://localhost:3000")

    # Environment variables holding the login credentials
    EMAIL_ENV_VAR: str = "USER_EMAIL"
    PASSWORD_ENV_VAR: str = "PASSWORD"

    # Browser context defaults
    VIEWPORT: dict = {"width": 1280, "height": 720}
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("E2E_DEFAULT_TIMEOUT_MS", "10000"))

    SCREENSHOT_DIR: str = os.environ.get(
        "E2E_SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )


class DevelopmentConfig(Config):
    """Local development app configuration."""

    HEALTH_TIMEOUT_S: int = 5


class TestingConfig(Config):
    """Markup stub server configuration."""

    # Port 0 lets the OS pick a free port, so parallel workers don't collide
    STUB_HOST: str = os.environ.get("E2E_STUB_HOST", "127.0.0.1")
    STUB_PORT: int = int(os.environ.get("E2E_STUB_PORT", "0"))
    HEALTH_TIMEOUT_S: int = 10


class LiveConfig(Config):
    """Deployed application configuration."""

    HEALTH_TIMEOUT_S: int = 30


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "live": LiveConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, live).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "development")
    return config.get(env, config["default"])
