"""In-memory address table served by the stub CEP service."""

from __future__ import annotations

from typing import Any

# Keyed by the normalized, digits-only CEP.
ADDRESSES: dict[str, dict[str, Any]] = {
    "01310100": {
        "cep": "01310100",
        "logradouro": "Avenida Paulista",
        "complemento": "de 612 a 1510 - lado par",
        "bairro": "Bela Vista",
        "cidade": "São Paulo",
        "uf": "SP",
        "codigo_ibge": "3550308",
    },
    "01001000": {
        "cep": "01001000",
        "logradouro": "Praça da Sé",
        "complemento": "lado ímpar",
        "bairro": "Sé",
        "cidade": "São Paulo",
        "uf": "SP",
        "codigo_ibge": "3550308",
    },
}


def normalize_cep(raw: str) -> str:
    """
    Strip hyphens from a CEP as received in the request path.

    ``"01310-100"`` and ``"01310100"`` both normalize to ``"01310100"``.
    No other validation happens here: anything that is not a stored key
    simply fails the lookup.
    """
    return raw.replace("-", "")


def find_address(cep: str) -> dict[str, Any] | None:
    """Return a copy of the address stored for a normalized CEP, if any."""
    address = ADDRESSES.get(cep)
    if address is None:
        return None
    return dict(address)
