from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.schemas import BookRideRequestSchema, BookRideResponseSchema
from app.application.exceptions import DispatchError, ValidationError
from app.application.use_cases.book_ride import BookRideUseCase
from app.wiring.dependencies import get_book_ride_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/book-ride")
async def book_ride(
    req: BookRideRequestSchema,
    uc: BookRideUseCase = Depends(get_book_ride_use_case),
) -> JSONResponse:
    logger.info("Received booking request", extra={"customer": req.phone})
    try:
        result = await uc.execute(req.to_domain())
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except DispatchError as e:
        return _booking_response(500, BookRideResponseSchema(success=False, error=str(e)))

    logger.info(
        "Booking confirmed",
        extra={"customer": result.customer_identity, "driver": result.driver_identity},
    )
    return _booking_response(200, BookRideResponseSchema(success=True, message=result.message))


def _booking_response(status_code: int, body: BookRideResponseSchema) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))
