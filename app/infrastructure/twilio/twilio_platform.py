from __future__ import annotations

from app.application.ports.message_platform import MessagingPort
from app.domain.entities.message import OutboundMessage
from app.infrastructure.twilio.twilio_client import TwilioClient


class TwilioPlatform(MessagingPort):
    def __init__(self, client: TwilioClient) -> None:
        self._client = client

    def send(self, message: OutboundMessage) -> str | None:
        return self._client.send_text(
            from_identity=message.from_identity,
            to_identity=message.to_identity,
            text=message.body,
        )
