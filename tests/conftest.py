from __future__ import annotations

import pytest

from app.application.ports.message_platform import MessagingPort
from app.application.use_cases.book_ride import BookRideUseCase
from app.application.use_cases.message_composer import MessageComposer
from app.application.use_cases.route_reply import RouteReplyUseCase
from app.domain.entities.message import OutboundMessage
from app.infrastructure.store.memory_store import SingleSlotActiveRideStore


SENDER = "whatsapp:+14155238886"
DRIVER = "whatsapp:+919000000001"
PAYEE = "trustndrive@okhdfcbank"


class RecordingPlatform(MessagingPort):
    """Records every message; raises for recipients listed in fail_for."""

    def __init__(self, fail_for: tuple[str, ...] = ()) -> None:
        self.sent: list[OutboundMessage] = []
        self.attempted: list[OutboundMessage] = []
        self._fail_for = fail_for

    def send(self, message: OutboundMessage) -> str | None:
        self.attempted.append(message)
        if message.to_identity in self._fail_for:
            raise RuntimeError(f"send to {message.to_identity} failed")
        self.sent.append(message)
        return f"SM{len(self.sent)}"


@pytest.fixture
def platform() -> RecordingPlatform:
    return RecordingPlatform()


@pytest.fixture
def store() -> SingleSlotActiveRideStore:
    return SingleSlotActiveRideStore()


@pytest.fixture
def composer() -> MessageComposer:
    return MessageComposer(business_name="TrustnDrive", payee_id=PAYEE)


@pytest.fixture
def make_book_ride(platform, store, composer):
    def _make(driver_identity: str = DRIVER, messaging: MessagingPort | None = None) -> BookRideUseCase:
        return BookRideUseCase(
            platform=messaging or platform,
            store=store,
            composer=composer,
            sender_identity=SENDER,
            driver_identity=driver_identity,
        )

    return _make


@pytest.fixture
def make_route_reply(platform, store):
    def _make(messaging: MessagingPort | None = None) -> RouteReplyUseCase:
        return RouteReplyUseCase(platform=messaging or platform, store=store, sender_identity=SENDER)

    return _make


@pytest.fixture
def failing_platform():
    def _make(*fail_for: str) -> RecordingPlatform:
        return RecordingPlatform(fail_for=fail_for)

    return _make
