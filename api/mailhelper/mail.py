"""Mail dispatcher: route a message to the configured provider."""

import logging
from typing import Any, Mapping, Optional, Union

from mailhelper import config
from mailhelper.config import Settings
from mailhelper.providers.resolver import resolve_mail_provider
from mailhelper.schemas.mail import DeliveryResult, MailMessage

logger = logging.getLogger(__name__)


class MailDispatcher:
    """
    Send mail through whichever provider the settings select.

    The provider is resolved on every call, so each send opens its own
    connection or HTTP request and nothing is shared between calls.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def send_mail(
        self, message: Union[MailMessage, Mapping[str, Any]]
    ) -> DeliveryResult:
        if not isinstance(message, MailMessage):
            message = MailMessage.model_validate(message)

        provider = resolve_mail_provider(self.settings)
        try:
            return await provider.send_mail(message)
        except Exception:
            logger.error("Email send failed via %s", provider.provider_type, exc_info=True)
            raise


async def send_mail(
    message: Union[MailMessage, Mapping[str, Any]],
    settings: Optional[Settings] = None,
) -> DeliveryResult:
    """Send an email using SMTP or the EmailJS REST API depending on configuration."""
    return await MailDispatcher(settings or config.settings).send_mail(message)
