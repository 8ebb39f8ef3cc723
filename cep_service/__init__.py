"""
Stub CEP Service — Application Factory.

A small stand-in for the BrasilCEP lookup API.  It answers
``GET /cep/<cep>`` from an in-memory address table so the load-test
scenario can be exercised without the real service, and it can inject
faults on demand to reproduce partial-failure runs.

Key Concepts Demonstrated:
- Application Factory pattern (create_app) for flexible configuration
- Blueprint registration for modular route organisation
- Environment-aware configuration loading via get_config
"""

from __future__ import annotations

import logging

from flask import Flask

from cep_service.config import get_config


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Construct and configure the stub CEP Flask application.

    Args:
        config_name: Optional environment key ("development", "testing",
            "faulty").  When *None*, the FLASK_ENV environment variable
            is consulted, defaulting to "development".

    Returns:
        A Flask application with the CEP blueprint registered.
    """
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating stub CEP app with config: %s", config_class.__name__)

    from cep_service.routes import cep_bp

    app.register_blueprint(cep_bp)
    return app
