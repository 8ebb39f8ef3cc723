"""
Stub CEP Service — Configuration.

The ``faulty`` environment turns on fault injection for hyphenated
CEPs, which lets tests reproduce a target that only accepts one of the
two formats the load test sends.
"""

from __future__ import annotations

import os


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


class Config:
    """Base configuration for the stub CEP service."""

    # Return 500 for any CEP requested in hyphenated form.
    FAIL_HYPHENATED_CEP: bool = _env_flag("FAIL_HYPHENATED_CEP")

    # Value of the X-Served-From response header.
    SERVED_FROM: str = "Brasil CEP API"


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration; fault injection always off."""

    DEBUG: bool = True
    TESTING: bool = True
    FAIL_HYPHENATED_CEP: bool = False


class FaultyConfig(TestingConfig):
    """Testing configuration that rejects every hyphenated CEP with a 500."""

    FAIL_HYPHENATED_CEP: bool = True


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "faulty": FaultyConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, faulty, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
