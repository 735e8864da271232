"""FastAPI dependency injection: issuer, verifier, transport binding."""

from __future__ import annotations

from fastapi import Request

from .issuer import TokenIssuer
from .transport import TransportBinding
from .verifier import TokenVerifier


def get_issuer(request: Request) -> TokenIssuer:
    return request.app.state.issuer


def get_verifier(request: Request) -> TokenVerifier:
    return request.app.state.verifier


def get_binding(request: Request) -> TransportBinding:
    """The binding chosen at startup; never negotiated per request."""
    return request.app.state.binding
