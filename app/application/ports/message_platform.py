from abc import ABC, abstractmethod

from app.domain.entities.message import OutboundMessage


class MessagingPort(ABC):
    @abstractmethod
    def send(self, message: OutboundMessage) -> str | None:
        """Send a message. Returns the provider's message id when one is available."""
        raise NotImplementedError
