"""Transport bindings: how (id, token) cross the HTTP boundary.

Two interchangeable encodings, chosen once from configuration:

- ``PathParamBinding``: ``/new`` returns ``[id, token]`` as JSON, and
  ``/verify/{session_id}/{session_token}`` carries the claim in the URL.
- ``CookieBinding``: ``/new`` sets ``session_id`` / ``session_token``
  cookies, and ``/verify`` reads them back. A failed verification expires
  both cookies on the client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .config import Settings
from .errors import InvalidId, InvalidToken, SessionTokenError
from .issuer import IssuedSession
from .verifier import VerificationOutcome

ID_COOKIE = "session_id"
TOKEN_COOKIE = "session_token"


def error_response(err: SessionTokenError) -> JSONResponse:
    return JSONResponse({"err": err.message}, status_code=err.status_code)


class TransportBinding(ABC):
    name: str
    verify_path: str

    @abstractmethod
    def extract_claim(self, request: Request) -> tuple[str | None, str | None]:
        """Return the claimed (session_id, token) carried by the request."""

    @abstractmethod
    def issued(self, session: IssuedSession) -> Response:
        ...

    @abstractmethod
    def verified(self, outcome: VerificationOutcome) -> Response:
        ...

    def issue_failed(self, err: SessionTokenError) -> Response:
        return error_response(err)

    def verify_failed(self, err: SessionTokenError) -> Response:
        return error_response(err)


class PathParamBinding(TransportBinding):
    name = "path"
    verify_path = "/verify/{session_id}/{session_token}"

    def extract_claim(self, request: Request) -> tuple[str | None, str | None]:
        return (
            request.path_params.get("session_id"),
            request.path_params.get("session_token"),
        )

    def issued(self, session: IssuedSession) -> Response:
        return JSONResponse([session.session_id, session.token], status_code=201)

    def verified(self, outcome: VerificationOutcome) -> Response:
        if outcome.is_valid:
            return PlainTextResponse("OK", status_code=200)
        # Tells the caller whether the id or the token was rejected.
        err = InvalidId() if outcome is VerificationOutcome.INVALID_ID else InvalidToken()
        return error_response(err)


class CookieBinding(TransportBinding):
    name = "cookie"
    verify_path = "/verify"

    def __init__(self, *, domain: str = "", max_age: int = 300) -> None:
        self.domain = domain
        self.max_age = max_age

    def extract_claim(self, request: Request) -> tuple[str | None, str | None]:
        return request.cookies.get(ID_COOKIE), request.cookies.get(TOKEN_COOKIE)

    def issued(self, session: IssuedSession) -> Response:
        response = JSONResponse(True, status_code=201)
        response.headers.append(
            "set-cookie", self._make_cookie(ID_COOKIE, session.session_id)
        )
        response.headers.append(
            "set-cookie", self._make_cookie(TOKEN_COOKIE, session.token)
        )
        return response

    def verified(self, outcome: VerificationOutcome) -> Response:
        if outcome.is_valid:
            return JSONResponse(True, status_code=200)
        # Id and token failures are not distinguished here.
        return self._clear(Response(status_code=401))

    def verify_failed(self, err: SessionTokenError) -> Response:
        return self._clear(error_response(err))

    def _clear(self, response: Response) -> Response:
        response.headers.append("set-cookie", self._make_cookie(ID_COOKIE, delete=True))
        response.headers.append(
            "set-cookie", self._make_cookie(TOKEN_COOKIE, delete=True)
        )
        return response

    def _make_cookie(self, name: str, value: str = "", *, delete: bool = False) -> str:
        parts = [
            f"{name}={'' if delete else value}",
            f"Max-Age={0 if delete else self.max_age}",
        ]
        if self.domain:
            parts.append(f"Domain={self.domain}")
        parts += ["Path=/", "Secure", "SameSite=Strict"]
        return "; ".join(parts)


def build_binding(s: Settings) -> TransportBinding:
    if s.session_transport == "cookie":
        return CookieBinding(domain=s.cookie_domain, max_age=s.expiration_ttl)
    return PathParamBinding()
