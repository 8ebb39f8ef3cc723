"""
Stub CEP Service — Routes.

Endpoints:
    GET /cep/<cep>     - Look up an address by CEP (hyphen optional)
    GET /healthcheck   - Liveness check

Both ``01310100`` and ``01310-100`` resolve to the same address; the
hyphen is stripped before lookup.  When ``FAIL_HYPHENATED_CEP`` is set,
any hyphenated request is answered with a 500 instead.
"""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify

from cep_service.addresses import find_address, normalize_cep

logger = logging.getLogger(__name__)

cep_bp = Blueprint("cep", __name__)


@cep_bp.after_request
def add_served_from_header(response: Response) -> Response:
    """Tag every response with the service identity header."""
    response.headers["X-Served-From"] = current_app.config["SERVED_FROM"]
    return response


@cep_bp.route("/healthcheck", methods=["GET"])
def health() -> tuple[Response, int]:
    """Return service health status for liveness checks."""
    return jsonify({"status": "ok", "service": "cep"}), 200


@cep_bp.route("/cep/<cep>", methods=["GET"])
def find_cep(cep: str) -> tuple[Response, int]:
    """
    Resolve a CEP to its address.

    Returns:
        200 with the address JSON, 400 when nothing is left after
        stripping hyphens, 404 when the CEP is unknown, or 500 when fault
        injection rejects the request.
    """
    if "-" in cep and current_app.config["FAIL_HYPHENATED_CEP"]:
        logger.warning("Injected failure for hyphenated CEP %s", cep)
        return jsonify({"error": "Erro ao buscar CEP"}), 500

    normalized = normalize_cep(cep)
    if not normalized:
        return jsonify({"error": "CEP não fornecido"}), 400

    address = find_address(normalized)
    if address is None:
        return jsonify({"error": "CEP não encontrado"}), 404

    return jsonify(address), 200


@cep_bp.app_errorhandler(404)
def not_found(_: Exception) -> tuple[Response, int]:
    """Return a JSON 404 for unknown routes."""
    return jsonify({"error": "Resource not found"}), 404


@cep_bp.app_errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Log the exception and return a JSON 500 Internal Server Error."""
    logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500
