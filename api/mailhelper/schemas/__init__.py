from mailhelper.schemas.mail import (
    AddressInput,
    DeliveryResult,
    Envelope,
    MailAddress,
    MailMessage,
)

__all__ = [
    "AddressInput",
    "DeliveryResult",
    "Envelope",
    "MailAddress",
    "MailMessage",
]
