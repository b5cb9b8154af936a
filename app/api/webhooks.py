from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response

from app.application.dto.webhook_event import TwilioMessageEventDTO
from app.application.use_cases.route_reply import RouteReplyUseCase
from app.infrastructure.twilio.twiml import empty_acknowledgement
from app.wiring.dependencies import get_route_reply_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/incoming-message")
async def incoming_message(
    request: Request,
    background_tasks: BackgroundTasks,
    use_case: RouteReplyUseCase = Depends(get_route_reply_use_case),
) -> Response:
    # Every path returns the acknowledgement.
    ack = Response(content=empty_acknowledgement(), media_type="text/xml")
    try:
        form = await request.form()
        event = TwilioMessageEventDTO.model_validate(dict(form))
    except Exception:
        logger.exception("Failed to parse webhook body")
        return ack

    callback = event.to_callback()
    if callback is None:
        logger.info("Webhook without sender or body; ignoring", extra={"sid": event.MessageSid})
        return ack

    logger.info("Incoming message", extra={"from_identity": callback.from_identity, "sid": callback.message_sid})
    background_tasks.add_task(use_case.handle, callback)
    return ack
