"""Resolve the active mail provider from settings."""

import logging

from mailhelper.config import Settings
from mailhelper.providers.base import MailProvider
from mailhelper.providers.emailjs import EmailJsProvider
from mailhelper.providers.smtp import SmtpProvider

logger = logging.getLogger(__name__)

EMAILJS = "emailjs"


def resolve_mail_provider(settings: Settings) -> MailProvider:
    """
    Pick the provider named by MAIL_PROVIDER.

    Only "emailjs" selects the REST API; any other value, including an unset
    or unknown one, falls back to SMTP.
    """
    if settings.mail_provider == EMAILJS:
        return EmailJsProvider.from_settings(settings)

    if settings.mail_provider and settings.mail_provider != "smtp":
        logger.debug("Unknown mail provider %r, using SMTP", settings.mail_provider)
    return SmtpProvider.from_settings(settings)
