from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from app.domain.entities.message import InboundCallback


class TwilioMessageEventDTO(BaseModel):
    """Inbound-message webhook form posted by Twilio. Only the fields used here are declared."""

    model_config = ConfigDict(extra="ignore")

    From: str | None = None
    Body: str | None = None
    To: str | None = None
    MessageSid: str | None = None

    def to_callback(self) -> InboundCallback | None:
        if not self.From or self.Body is None:
            return None
        return InboundCallback(
            from_identity=self.From,
            body=self.Body,
            message_sid=self.MessageSid,
        )
