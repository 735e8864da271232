"""Session issuance: id generation, token derivation, persistence."""

from __future__ import annotations

import logging
import secrets
import string
import time
from dataclasses import dataclass
from typing import Callable

from .errors import StoreError, StoreWriteFailure
from .hashing import digest, token_material
from .store import SessionStore

logger = logging.getLogger(__name__)

ID_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_TTL = 300


@dataclass(frozen=True)
class IssuedSession:
    session_id: str
    token: str


def new_session_id(length: int = 16) -> str:
    """Random base36 session id from the OS CSPRNG."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def now_ms() -> int:
    return int(time.time() * 1000)


class TokenIssuer:
    """Creates sessions and persists ``id -> token`` with a TTL.

    An existing live record under the same id is overwritten; ids are not
    checked for collisions before writing.
    """

    def __init__(
        self,
        store: SessionStore,
        secret: str,
        ttl: int = DEFAULT_TTL,
        *,
        clock_ms: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = new_session_id,
    ) -> None:
        self.store = store
        self._secret = secret
        self.ttl = ttl or DEFAULT_TTL
        self._clock_ms = clock_ms
        self._id_factory = id_factory

    def derive_token(self, session_id: str, issued_at_ms: int) -> str:
        return digest(token_material(session_id, self._secret, issued_at_ms))

    async def issue(self) -> IssuedSession:
        """Generate, persist and return a new session.

        Raises:
            StoreWriteFailure: the store rejected the write. Nothing is
                returned and the derived token is discarded.
        """
        session_id = self._id_factory()
        token = self.derive_token(session_id, self._clock_ms())

        try:
            await self.store.put(session_id, token, self.ttl)
        except StoreError as e:
            raise StoreWriteFailure(e.message) from e
        except Exception as e:
            logger.error("Session store write failed: %s", e)
            raise StoreWriteFailure() from e

        return IssuedSession(session_id, token)
