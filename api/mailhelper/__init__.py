"""Send outgoing mail through SMTP or the EmailJS REST API."""

__version__ = "0.1.0"

from mailhelper.errors import EtherealAccountError, MailError, MissingRecipientError
from mailhelper.mail import MailDispatcher, send_mail
from mailhelper.schemas.mail import DeliveryResult, MailAddress, MailMessage

__all__ = [
    "DeliveryResult",
    "EtherealAccountError",
    "MailAddress",
    "MailDispatcher",
    "MailError",
    "MailMessage",
    "MissingRecipientError",
    "send_mail",
]
