from __future__ import annotations

from twilio.twiml.messaging_response import MessagingResponse


def empty_acknowledgement() -> str:
    """Empty TwiML document; tells Twilio the callback was received and needs no reply."""
    return str(MessagingResponse())
