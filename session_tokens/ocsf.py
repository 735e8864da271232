"""OCSF (Open Cybersecurity Schema Framework) event logging.

Emits one structured security event per session issuance or verification.
Events are logged to the ``ocsf`` logger as JSON. Consumers attach their own
handlers (CloudWatch JSON formatter, Firehose, structlog, etc.).

Events carry the session id but never the token or the server secret.

Usage in route handlers::

    from . import ocsf
    ocsf.session_event(
        activity_id=ocsf.AuthActivity.AUTHENTICATION_TICKET,
        activity_name="Authentication Ticket",
        status_id=ocsf.Status.SUCCESS,
        severity_id=ocsf.Severity.INFORMATIONAL,
        session_id="k3j9x0q1...",
        transport="cookie",
        message="Session issued",
    )
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

logger = logging.getLogger("ocsf")


class EventClass:
    AUTHENTICATION = 3001


class AuthActivity:
    AUTHENTICATION_TICKET = 3  # Session issued
    SERVICE_TICKET = 4  # Session verified


class Status:
    SUCCESS = 1
    FAILURE = 2


class Severity:
    INFORMATIONAL = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    CRITICAL = 5


_SEVERITY_NAMES = {
    Severity.INFORMATIONAL: "Informational",
    Severity.LOW: "Low",
    Severity.MEDIUM: "Medium",
    Severity.HIGH: "High",
    Severity.CRITICAL: "Critical",
}

_PRODUCT = {
    "name": "session-tokens",
    "version": "0.1.0",
    "vendor_name": "session-tokens",
}


# ── Core emit ──────────────────────────────────────────────────────────────


def emit(event: dict[str, Any]) -> None:
    """Log an OCSF event as JSON.  Never raises."""
    try:
        logger.info(json.dumps(event, default=str))
    except Exception:
        pass


# ── Event builders ─────────────────────────────────────────────────────────


def session_event(
    *,
    activity_id: int,
    activity_name: str,
    status_id: int,
    severity_id: int,
    session_id: str | None = None,
    transport: str = "",
    reason: str = "",
    message: str = "",
) -> None:
    """Emit an OCSF Authentication (3001) event for a session."""
    event: dict[str, Any] = {
        "class_uid": EventClass.AUTHENTICATION,
        "class_name": "Authentication",
        "activity_id": activity_id,
        "activity_name": activity_name,
        "severity_id": severity_id,
        "severity": _SEVERITY_NAMES.get(severity_id, "Unknown"),
        "status_id": status_id,
        "status": "Success" if status_id == Status.SUCCESS else "Failure",
        "time": int(time.time() * 1000),
        "metadata": {"product": _PRODUCT},
        "message": message,
    }
    if session_id:
        event["session"] = {"uid": session_id}
    if transport:
        event["metadata"]["transport"] = transport
    if reason:
        event["status_detail"] = reason
    emit(event)


def session_issued(session_id: str, transport: str) -> None:
    session_event(
        activity_id=AuthActivity.AUTHENTICATION_TICKET,
        activity_name="Authentication Ticket",
        status_id=Status.SUCCESS,
        severity_id=Severity.INFORMATIONAL,
        session_id=session_id,
        transport=transport,
        message="Session issued",
    )


def session_issue_failed(transport: str, reason: str) -> None:
    session_event(
        activity_id=AuthActivity.AUTHENTICATION_TICKET,
        activity_name="Authentication Ticket",
        status_id=Status.FAILURE,
        severity_id=Severity.HIGH,
        transport=transport,
        reason=reason,
        message="Session issuance failed: store write error",
    )


def session_verified(
    session_id: str, transport: str, *, valid: bool, reason: str = ""
) -> None:
    session_event(
        activity_id=AuthActivity.SERVICE_TICKET,
        activity_name="Service Ticket",
        status_id=Status.SUCCESS if valid else Status.FAILURE,
        severity_id=Severity.INFORMATIONAL if valid else Severity.MEDIUM,
        session_id=session_id,
        transport=transport,
        reason=reason,
        message="Session verified" if valid else "Session verification failed",
    )
