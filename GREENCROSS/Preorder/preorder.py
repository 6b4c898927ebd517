# Preorder/preorder.py
import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from GREENCROSS.core.config import PREORDER_PATH, PREORDER_RATE_LIMIT
from GREENCROSS.core.rate_limit import limiter
from GREENCROSS.Preorder.mailer import MailRelayError, send_preorder_email
from GREENCROSS.Preorder.models import PreorderRequest, PreorderResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["preorder"])


def _failure() -> JSONResponse:
    return JSONResponse(status_code=400, content=PreorderResponse(ok=False).model_dump())


# ==============================
# PUBLIC: SUBMIT PREORDER
# ==============================
@router.post(PREORDER_PATH, response_model=PreorderResponse)
@limiter.limit(PREORDER_RATE_LIMIT)
async def submit_preorder(request: Request):
    """
    Validate a preorder and relay it to the business inbox as an email.
    Any validation or relay failure answers 400 {"ok": false}; nothing is stored.
    """
    try:
        payload = await request.json()
        req = PreorderRequest.model_validate(payload)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Preorder rejected: body is not JSON")
        return _failure()
    except ValidationError as e:
        logger.warning("Preorder rejected: %d validation errors", e.error_count())
        return _failure()

    try:
        await run_in_threadpool(send_preorder_email, req)
    except MailRelayError:
        logger.exception("Preorder relay failed for %s", req.customer.fullName)
        return _failure()

    return PreorderResponse(ok=True)
