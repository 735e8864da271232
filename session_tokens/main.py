"""FastAPI session token service.

Issues short-lived opaque session tokens and verifies (id, token) pairs
against a TTL key-value store, over either path-param or cookie transport.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .cors import CorsHeadersMiddleware
from .errors import BadRequest
from .issuer import TokenIssuer, new_session_id
from .routes import new, verify
from .store import DynamoDBStore, InMemoryStore, SessionStore
from .transport import build_binding, error_response
from .verifier import TokenVerifier

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    s: Settings = app.state.settings
    logger.info(
        "Session service: transport=%s ttl=%ss store=%s",
        s.session_transport,
        s.expiration_ttl,
        type(app.state.issuer.store).__name__,
    )
    yield


def build_store(s: Settings) -> SessionStore:
    """Choose the store backend from config."""
    if s.session_store == "dynamodb":
        return DynamoDBStore(
            table_name=s.dynamodb_table,
            endpoint_url=s.dynamodb_endpoint,
            region_name=s.aws_region,
        )
    return InMemoryStore()


async def _http_error(request: Request, exc: StarletteHTTPException):
    # Unknown paths (404) and wrong methods (405) alike.
    if exc.status_code in (404, 405):
        return error_response(BadRequest())
    return JSONResponse({"err": str(exc.detail)}, status_code=exc.status_code)


def create_app(
    *,
    store: SessionStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Custom session store (default: chosen by SESSION_STORE).
        settings: Settings instance (default: loaded from the environment).
    """
    s = settings or get_settings()
    app = FastAPI(title="Session Tokens", lifespan=lifespan, openapi_url=None)

    backend = store if store is not None else build_store(s)
    binding = build_binding(s)
    app.state.settings = s
    app.state.binding = binding
    app.state.issuer = TokenIssuer(
        backend,
        s.session_key,
        s.expiration_ttl,
        id_factory=partial(new_session_id, s.session_id_length),
    )
    app.state.verifier = TokenVerifier(backend)

    app.add_middleware(CorsHeadersMiddleware, policy=s.cors_policy)
    app.add_exception_handler(StarletteHTTPException, _http_error)

    # Routes
    app.include_router(new.router, prefix=s.route_prefix)
    app.include_router(verify.build_router(binding), prefix=s.route_prefix)

    return app
