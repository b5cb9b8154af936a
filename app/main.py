import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.bookings import router as bookings_router
from app.api.webhooks import router as webhooks_router
from app.application.exceptions import ConfigError
from app.application.use_cases.book_ride import MISSING_FIELDS_MESSAGE
from app.core.config import require_settings, settings

LOG_CONTEXT_KEYS = (
    "customer",
    "driver",
    "from_identity",
    "to_identity",
    "sid",
    "reason",
    "error",
    "status",
    "error_code",
    "error_message",
    "text_length",
    "text",
)


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in LOG_CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        require_settings(settings)
    except ConfigError as e:
        logger.critical("Refusing to start", extra={"error": str(e)})
        raise SystemExit(1) from e
    logger.info("Ride relay ready", extra={"driver": settings.driver_identity})
    yield


app = FastAPI(title="TrustnDrive Ride Relay", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(bookings_router, tags=["bookings"])
app.include_router(webhooks_router, tags=["webhooks"])


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Booking clients only ever see the 400 {"error": ...} shape.
    if request.url.path == "/api/book-ride":
        logger.info("Booking rejected", extra={"reason": "unparseable_body"})
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_MESSAGE})
    return await request_validation_exception_handler(request, exc)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
