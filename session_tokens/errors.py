"""Error taxonomy for session issuance and verification.

Every error is terminal for the request that raised it. Routes turn them
straight into a status code and a ``{"err": ...}`` body.
"""


class SessionTokenError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(SessionTokenError):
    status_code = 400
    default_message = "Bad Request"


class StoreError(SessionTokenError):
    """Raised by store backends. Carries a generic, client-safe message."""

    default_message = "Session store error"


class StoreWriteFailure(SessionTokenError):
    default_message = "Failed to store session"


class InvalidId(SessionTokenError):
    status_code = 401
    default_message = "Session ID invalid"


class InvalidToken(SessionTokenError):
    status_code = 401
    default_message = "Session token invalid"


class InternalError(SessionTokenError):
    pass
