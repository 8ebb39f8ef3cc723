"""
Load-test run configuration.

Defines configuration classes for the environments the CEP lookup load
test runs in.  Each class captures where the target service lives and
the run parameters Locust needs (virtual users, duration, pause, latency
threshold).  Values are loaded from environment variables with defaults
matching the docker-compose network the load test normally runs inside.

Key Concepts Demonstrated:
- Class-based configuration with inheritance for DRY defaults
- Environment-variable overrides for 12-factor deployability
- Separate testing configuration pointing at a non-routable host
"""

from __future__ import annotations

import os


class Config:
    """Base configuration with the default run parameters."""

    # Hostname of the CEP API on the compose network.
    CEP_API_HOST: str = os.environ.get("CEP_API_HOST", "brasilcep-api")
    CEP_API_PORT: int = int(os.environ.get("CEP_API_PORT", "8080"))

    # Sustained concurrency and wall-clock length of the run.
    USERS: int = int(os.environ.get("LOAD_USERS", "100"))
    RUN_TIME_SECONDS: int = int(os.environ.get("LOAD_RUN_TIME", "30"))

    # Fixed delay after every request.  Not overridable: it is part of
    # the scenario, not of the environment.
    PAUSE_SECONDS: float = 0.1

    @classmethod
    def base_url(cls) -> str:
        """Return ``http://{host}:{port}`` for the configured CEP API."""
        return f"http://{cls.CEP_API_HOST}:{cls.CEP_API_PORT}"


class ComposeConfig(Config):
    """Run from a container attached to the same network as the API."""


class LocalConfig(Config):
    """Run from a workstation against an API published on localhost."""

    CEP_API_HOST: str = os.environ.get("CEP_API_HOST", "localhost")


class TestingConfig(Config):
    """Test-suite configuration."""

    # Non-routable hostname ensures tests never leak real HTTP requests.
    CEP_API_HOST: str = os.environ.get("TEST_CEP_API_HOST", "cep-api.test")
    CEP_API_PORT: int = int(os.environ.get("TEST_CEP_API_PORT", "8080"))


# Configuration mapping for easy access
config = {
    "compose": ComposeConfig,
    "local": LocalConfig,
    "testing": TestingConfig,
    "default": ComposeConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (compose, local, testing).
             If None, uses LOADTEST_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("LOADTEST_ENV", "compose")
    return config.get(env, config["default"])
