"""GET /new — Issue a session."""

import logging

from fastapi import APIRouter, Depends

from .. import ocsf
from ..dependencies import get_binding, get_issuer
from ..errors import StoreWriteFailure
from ..issuer import TokenIssuer
from ..transport import TransportBinding

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/new")
async def new_session(
    issuer: TokenIssuer = Depends(get_issuer),
    binding: TransportBinding = Depends(get_binding),
):
    try:
        session = await issuer.issue()
    except StoreWriteFailure as e:
        logger.error("Session issuance failed: %s", e.message)
        ocsf.session_issue_failed(binding.name, e.message)
        return binding.issue_failed(e)

    ocsf.session_issued(session.session_id, binding.name)
    return binding.issued(session)
