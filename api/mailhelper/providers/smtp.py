"""SMTP email provider (generic, works with any SMTP server)."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, getaddresses, make_msgid
from functools import partial
from typing import Optional

from mailhelper.providers.base import MailProvider
from mailhelper.providers.ethereal import (
    ETHEREAL_HOST,
    ETHEREAL_PORT,
    create_ethereal_account,
)
from mailhelper.schemas.mail import (
    AddressInput,
    DeliveryResult,
    Envelope,
    MailAddress,
    MailMessage,
)

logger = logging.getLogger(__name__)


def _entries(value: AddressInput) -> list:
    if not value:
        return []
    if isinstance(value, list):
        return [item for item in value if item]
    return [value]


def format_address_header(value: AddressInput) -> str:
    """Render an address field as a header value, keeping display names."""
    parts = []
    for item in _entries(value):
        if isinstance(item, MailAddress):
            if item.address:
                parts.append(formataddr((item.name or "", item.address)))
        else:
            parts.append(item)
    return ", ".join(parts)


def envelope_addresses(value: AddressInput) -> list[str]:
    """Bare addresses for the SMTP envelope, display names stripped."""
    addresses = []
    for item in _entries(value):
        if isinstance(item, MailAddress):
            candidates = [item.address or ""]
        else:
            candidates = [addr for _, addr in getaddresses([item])]
        addresses.extend(a.strip() for a in candidates if a and a.strip())
    return addresses


class SmtpProvider(MailProvider):
    """Send email via a standard SMTP server, one connection per message."""

    @property
    def provider_type(self) -> str:
        return "smtp"

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str],
        password: Optional[str],
        from_email: str,
        use_ethereal: bool = False,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.use_ethereal = use_ethereal

    @classmethod
    def from_settings(cls, settings) -> "SmtpProvider":
        """
        Build the provider from app settings.

        In CI mode the configured host and credentials are ignored; every send
        goes through a fresh Ethereal account instead.
        """
        if settings.ci:
            return cls(
                host=ETHEREAL_HOST,
                port=ETHEREAL_PORT,
                username=None,
                password=None,
                from_email=settings.smtp_from,
                use_ethereal=True,
            )

        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user or None,
            password=settings.smtp_pass or None,
            from_email=settings.smtp_from,
        )

    def build_message(self, message: MailMessage) -> EmailMessage:
        msg = EmailMessage()
        from_header = format_address_header(message.from_) or self.from_email
        msg["From"] = from_header
        to = format_address_header(message.to)
        if to:
            msg["To"] = to
        reply_to = format_address_header(message.reply_to)
        if reply_to:
            msg["Reply-To"] = reply_to
        msg["Subject"] = message.subject or ""

        sender = envelope_addresses(from_header)
        domain = sender[0].rpartition("@")[2] if sender else None
        msg["Message-ID"] = make_msgid(domain=domain or None)

        if message.text is not None:
            msg.set_content(message.text)
            if message.html is not None:
                msg.add_alternative(message.html, subtype="html")
        elif message.html is not None:
            msg.set_content(message.html, subtype="html")
        else:
            msg.set_content("")

        return msg

    def _send_sync(
        self,
        message: MailMessage,
        username: Optional[str],
        password: Optional[str],
    ) -> DeliveryResult:
        """Synchronous SMTP send."""
        msg = self.build_message(message)
        from_addrs = envelope_addresses(msg["From"])
        envelope_from = from_addrs[0] if from_addrs else ""
        envelope_to = envelope_addresses(message.to)

        with smtplib.SMTP(self.host, self.port) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls()
                server.ehlo()
            if username and password:
                server.login(username, password)
            else:
                logger.debug("No SMTP credentials, sending unauthenticated via %s", self.host)
            refused = server.send_message(msg, from_addr=envelope_from, to_addrs=envelope_to)

        if refused:
            logger.warning("SMTP server refused recipients: %s", ", ".join(refused))
        logger.info("Email sent via SMTP to=%s subject=%s", msg["To"], msg["Subject"])

        return DeliveryResult(
            accepted=[addr for addr in envelope_to if addr not in refused],
            rejected=list(refused),
            envelope=Envelope(from_=envelope_from, to=envelope_to),
            message_id=msg["Message-ID"],
        )

    async def send_mail(self, message: MailMessage) -> DeliveryResult:
        """Send email asynchronously by running sync SMTP in executor."""
        username, password = self.username, self.password
        if self.use_ethereal:
            account = await create_ethereal_account()
            username, password = account.user, account.password

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            partial(self._send_sync, message, username, password),
        )
