from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from app.application.exceptions import DispatchError, ValidationError
from app.application.ports.message_platform import MessagingPort
from app.application.ports.ride_store import ActiveRideStorePort
from app.application.use_cases.message_composer import MessageComposer
from app.domain.entities.booking import BookingRequest
from app.domain.entities.message import OutboundMessage
from app.domain.entities.ride import ActiveRide


REQUIRED_FIELDS = ("name", "phone", "pickup", "duration")
MISSING_FIELDS_MESSAGE = "All fields are required."


@dataclass(frozen=True)
class BookingResult:
    message: str
    customer_identity: str
    driver_identity: str


class BookRideUseCase:
    def __init__(
        self,
        platform: MessagingPort,
        store: ActiveRideStorePort,
        composer: MessageComposer,
        sender_identity: str,
        driver_identity: str,
        channel_prefix: str = "whatsapp:",
    ) -> None:
        self._platform = platform
        self._store = store
        self._composer = composer
        self._sender_identity = sender_identity
        self._driver_identity = driver_identity
        self._channel_prefix = channel_prefix
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: BookingRequest) -> BookingResult:
        """
        Validate the booking, record it as the active ride and notify both parties.

        The active ride is overwritten before delivery is confirmed, so it is
        updated even when a send later fails.
        """
        missing = [field for field in REQUIRED_FIELDS if _is_blank(getattr(request, field))]
        if missing:
            self._logger.info("Booking rejected", extra={"reason": f"missing={','.join(missing)}"})
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        messages = self._composer.compose_booking(request)
        customer_identity = f"{self._channel_prefix}{request.phone}"

        self._store.record(
            ActiveRide(customer_identity=customer_identity, driver_identity=self._driver_identity)
        )

        outbound = [
            OutboundMessage(self._sender_identity, customer_identity, messages.customer),
            OutboundMessage(self._sender_identity, self._driver_identity, messages.driver),
        ]
        results = await asyncio.gather(
            *(asyncio.to_thread(self._platform.send, message) for message in outbound),
            return_exceptions=True,
        )

        failed = False
        for message, result in zip(outbound, results):
            if isinstance(result, BaseException):
                failed = True
                self._logger.error(
                    "Failed to send booking message",
                    exc_info=result,
                    extra={"to_identity": message.to_identity, "error": str(result)},
                )
            else:
                self._logger.info(
                    "Booking message sent",
                    extra={"to_identity": message.to_identity, "sid": result},
                )

        if failed:
            raise DispatchError("Failed to send confirmation message.")

        return BookingResult(
            message="Booking confirmed! Check your WhatsApp.",
            customer_identity=customer_identity,
            driver_identity=self._driver_identity,
        )


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return not value
