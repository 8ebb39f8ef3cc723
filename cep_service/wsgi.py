"""WSGI entry point for the stub CEP service."""

import os

from cep_service import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
