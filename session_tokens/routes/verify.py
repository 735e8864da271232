"""GET /verify — Check a claimed session against the store.

The path depends on the binding: ``/verify/{session_id}/{session_token}``
for path params, plain ``/verify`` for cookies.
"""

import logging

from fastapi import APIRouter, Depends, Request

from .. import ocsf
from ..dependencies import get_binding, get_verifier
from ..errors import InternalError
from ..transport import TransportBinding
from ..verifier import TokenVerifier

logger = logging.getLogger(__name__)


async def verify_session(
    request: Request,
    verifier: TokenVerifier = Depends(get_verifier),
    binding: TransportBinding = Depends(get_binding),
):
    session_id, token = binding.extract_claim(request)

    try:
        outcome = await verifier.verify(session_id, token)
    except InternalError as e:
        logger.error("Session verification error: %s", e.message)
        ocsf.session_verified(
            session_id or "", binding.name, valid=False, reason="internal_error"
        )
        return binding.verify_failed(e)

    ocsf.session_verified(
        session_id or "",
        binding.name,
        valid=outcome.is_valid,
        reason="" if outcome.is_valid else outcome.value,
    )
    return binding.verified(outcome)


def build_router(binding: TransportBinding) -> APIRouter:
    router = APIRouter()
    router.add_api_route(binding.verify_path, verify_session, methods=["GET"])
    return router
