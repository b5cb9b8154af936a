from functools import lru_cache
import logging

from app.core.config import settings
from app.application.ports.message_platform import MessagingPort
from app.application.ports.ride_store import ActiveRideStorePort
from app.application.use_cases.book_ride import BookRideUseCase
from app.application.use_cases.message_composer import MessageComposer
from app.application.use_cases.route_reply import RouteReplyUseCase
from app.infrastructure.store.memory_store import KeyedActiveRideStore, SingleSlotActiveRideStore
from app.infrastructure.twilio.mock_platform import MockMessagingPlatform
from app.infrastructure.twilio.twilio_client import TwilioClient
from app.infrastructure.twilio.twilio_platform import TwilioPlatform


_ride_store: ActiveRideStorePort | None = None


def get_ride_store() -> ActiveRideStorePort:
    global _ride_store
    if _ride_store is None:
        if settings.RIDE_STORE.lower() == "keyed":
            _ride_store = KeyedActiveRideStore()
        else:
            _ride_store = SingleSlotActiveRideStore()
    return _ride_store


@lru_cache
def get_messaging_platform() -> MessagingPort:
    logger = logging.getLogger(__name__)
    if settings.MESSAGING_PROVIDER.lower() == "mock":
        logger.info("Using MockMessagingPlatform (MESSAGING_PROVIDER=mock)")
        return MockMessagingPlatform()

    logger.info("Using TwilioPlatform")
    client = TwilioClient(
        account_sid=settings.TWILIO_ACCOUNT_SID or "",
        auth_token=settings.TWILIO_AUTH_TOKEN or "",
    )
    return TwilioPlatform(client=client)


def get_message_composer() -> MessageComposer:
    return MessageComposer(
        business_name=settings.BUSINESS_NAME,
        payee_id=settings.UPI_ID,
        payment_scheme=settings.PAYMENT_SCHEME,
        currency_code=settings.CURRENCY_CODE,
    )


def get_book_ride_use_case() -> BookRideUseCase:
    return BookRideUseCase(
        platform=get_messaging_platform(),
        store=get_ride_store(),
        composer=get_message_composer(),
        sender_identity=settings.sender_identity,
        driver_identity=settings.driver_identity,
        channel_prefix=settings.CHANNEL_PREFIX,
    )


def get_route_reply_use_case() -> RouteReplyUseCase:
    return RouteReplyUseCase(
        platform=get_messaging_platform(),
        store=get_ride_store(),
        sender_identity=settings.sender_identity,
    )
