"""One-way digest used to derive session tokens."""

import hashlib

DIGEST_HEX_LENGTH = 64


def digest(data: bytes) -> str:
    """SHA-256 of ``data`` as 64 lowercase hex characters."""
    return hashlib.sha256(data).hexdigest()


def token_material(session_id: str, secret: str, issued_at_ms: int) -> bytes:
    return f"{session_id}-{secret}-{issued_at_ms}".encode("utf-8")
