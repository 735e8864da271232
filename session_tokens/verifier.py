"""Session verification: look up the stored token and classify the claim."""

from __future__ import annotations

import enum
import hmac
import logging

from .errors import InternalError, InvalidId, InvalidToken, StoreError
from .store import SessionStore

logger = logging.getLogger(__name__)


class VerificationOutcome(enum.Enum):
    VALID = "valid"
    INVALID_ID = "invalid_id"
    INVALID_TOKEN = "invalid_token"

    @property
    def is_valid(self) -> bool:
        return self is VerificationOutcome.VALID

    def raise_for_outcome(self) -> None:
        """Raise InvalidId / InvalidToken for a failed outcome."""
        if self is VerificationOutcome.INVALID_ID:
            raise InvalidId()
        if self is VerificationOutcome.INVALID_TOKEN:
            raise InvalidToken()


class TokenVerifier:
    """Read-only check of a claimed (id, token) pair against the store."""

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    async def verify(
        self, claimed_id: str | None, claimed_token: str | None
    ) -> VerificationOutcome:
        if not claimed_id:
            return VerificationOutcome.INVALID_ID

        try:
            stored = await self.store.get(claimed_id)
        except StoreError as e:
            raise InternalError(e.message) from e
        except Exception as e:
            logger.error("Session store read failed: %s", e)
            raise InternalError() from e

        if stored is None:
            return VerificationOutcome.INVALID_ID
        if not claimed_token or not hmac.compare_digest(
            stored.encode("utf-8"), claimed_token.encode("utf-8")
        ):
            return VerificationOutcome.INVALID_TOKEN
        return VerificationOutcome.VALID
