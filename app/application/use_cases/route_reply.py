from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagingPort
from app.application.ports.ride_store import ActiveRideStorePort
from app.application.use_cases.message_composer import forwarded_reply
from app.domain.entities.message import InboundCallback, OutboundMessage


class RouteReplyUseCase:
    def __init__(
        self,
        platform: MessagingPort,
        store: ActiveRideStorePort,
        sender_identity: str,
    ) -> None:
        self._platform = platform
        self._store = store
        self._sender_identity = sender_identity
        self._logger = logging.getLogger(__name__)

    def handle(self, callback: InboundCallback) -> OutboundMessage | None:
        """Forward a driver's reply to the customer of their active ride.

        Returns the forwarded message, or None when nothing was delivered.
        Send failures are logged and never raised.
        """
        customer_identity = self._store.customer_for(callback.from_identity)
        if customer_identity is None:
            active = self._store.current()
            self._logger.info(
                "No active ride for sender; ignoring message",
                extra={
                    "from_identity": callback.from_identity,
                    "sid": callback.message_sid,
                    "reason": "no_active_ride" if active is None else "sender_not_active_driver",
                },
            )
            return None

        message = OutboundMessage(
            from_identity=self._sender_identity,
            to_identity=customer_identity,
            body=forwarded_reply(callback.body),
        )
        try:
            sid = self._platform.send(message)
        except Exception as e:
            self._logger.exception(
                "Failed to forward driver reply",
                extra={"customer": customer_identity, "error": str(e)},
            )
            return None

        self._logger.info(
            "Forwarded driver reply",
            extra={"driver": callback.from_identity, "customer": customer_identity, "sid": sid},
        )
        return message
