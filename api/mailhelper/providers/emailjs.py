"""EmailJS email provider (https://www.emailjs.com)."""

import logging
from typing import Any, Optional

import httpx

from mailhelper.errors import MissingRecipientError
from mailhelper.providers.base import MailProvider
from mailhelper.schemas.mail import (
    AddressInput,
    DeliveryResult,
    Envelope,
    MailAddress,
    MailMessage,
)

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


def normalise_address(value: AddressInput) -> str:
    """Flatten an address field into the comma-separated form EmailJS expects."""
    if not value:
        return ""

    if isinstance(value, str):
        return value

    if isinstance(value, list):
        addresses = [
            item if isinstance(item, str) else item.address
            for item in value
            if item is not None
        ]
        return ",".join(a for a in addresses if a)

    return value.address or ""


def split_addresses(value: str) -> list[str]:
    return [email.strip() for email in value.split(",") if email.strip()]


def _extract_message_id(resp: httpx.Response) -> Optional[str]:
    try:
        data = resp.json()
    except ValueError:
        # EmailJS answers with a plain "OK" body
        return None
    if isinstance(data, dict) and "id" in data:
        return str(data["id"])
    return None


class EmailJsProvider(MailProvider):
    """Send transactional email via the EmailJS REST API."""

    @property
    def provider_type(self) -> str:
        return "emailjs"

    def __init__(
        self,
        api_url: str,
        service_id: str,
        template_id: str,
        public_key: str,
        from_email: str,
        private_key: Optional[str] = None,
    ):
        self.api_url = api_url
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.from_email = from_email
        self.private_key = private_key

    @classmethod
    def from_settings(cls, settings) -> "EmailJsProvider":
        return cls(
            api_url=settings.emailjs_api_url,
            service_id=settings.emailjs_service_id,
            template_id=settings.emailjs_template_id,
            public_key=settings.emailjs_public_key,
            from_email=settings.smtp_from,
            private_key=settings.emailjs_private_key or None,
        )

    def build_payload(self, message: MailMessage) -> dict[str, Any]:
        """
        Build the JSON body for the EmailJS send endpoint.

        Raises MissingRecipientError when no recipient survives normalisation.
        """
        to = normalise_address(message.to)
        if not to:
            raise MissingRecipientError()

        from_addr = normalise_address(message.from_) or self.from_email
        reply_to = normalise_address(message.reply_to) or from_addr

        payload: dict[str, Any] = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": {
                "to_email": to,
                "from_email": from_addr,
                "reply_to": reply_to,
                "subject": message.subject or "",
                "message_html": message.html or "",
                "message_text": message.text or "",
            },
        }

        if self.private_key:
            payload["accessToken"] = self.private_key

        return payload

    async def send_mail(self, message: MailMessage) -> DeliveryResult:
        payload = self.build_payload(message)
        params = payload["template_params"]

        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
            resp = await client.post(
                self.api_url,
                headers={"Content-Type": "application/json"},
                json=payload,
            )
            resp.raise_for_status()

        accepted = split_addresses(params["to_email"])
        logger.info(
            "Email sent via EmailJS to=%s subject=%s", params["to_email"], params["subject"]
        )

        return DeliveryResult(
            accepted=accepted,
            rejected=[],
            envelope=Envelope(from_=params["from_email"], to=accepted),
            message_id=_extract_message_id(resp),
            response=resp.reason_phrase,
        )
