from dataclasses import dataclass


@dataclass(frozen=True)
class OutboundMessage:
    from_identity: str
    to_identity: str
    body: str


@dataclass(frozen=True)
class InboundCallback:
    from_identity: str
    body: str
    message_sid: str | None = None
