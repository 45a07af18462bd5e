"""Mail provider abstraction layer."""

from mailhelper.providers.base import MailProvider
from mailhelper.providers.emailjs import EmailJsProvider, normalise_address
from mailhelper.providers.smtp import SmtpProvider
from mailhelper.providers.resolver import resolve_mail_provider

__all__ = [
    "MailProvider",
    "EmailJsProvider",
    "SmtpProvider",
    "normalise_address",
    "resolve_mail_provider",
]
