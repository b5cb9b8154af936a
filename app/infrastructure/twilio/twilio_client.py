from __future__ import annotations

import logging

from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client


class TwilioClient:
    def __init__(self, account_sid: str, auth_token: str) -> None:
        self._client = Client(account_sid, auth_token)
        self._logger = logging.getLogger(__name__)

    def send_text(self, from_identity: str, to_identity: str, text: str) -> str:
        try:
            message = self._client.messages.create(from_=from_identity, to=to_identity, body=text)
        except TwilioRestException as e:
            self._logger.error(
                "Twilio send failed",
                extra={
                    "status": e.status,
                    "error_code": e.code,
                    "error_message": e.msg,
                    "to_identity": to_identity,
                    "text_length": len(text),
                },
            )
            raise
        return message.sid
