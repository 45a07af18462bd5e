"""Base mail provider interface."""

from abc import ABC, abstractmethod

from mailhelper.schemas.mail import DeliveryResult, MailMessage


class MailProvider(ABC):
    """
    Common interface for both delivery strategies.
    Each provider implements send_mail() using its own API/protocol.
    """

    @property
    @abstractmethod
    def provider_type(self) -> str:
        ...

    @abstractmethod
    async def send_mail(self, message: MailMessage) -> DeliveryResult:
        """Deliver the message and report what the transport accepted."""
        ...
