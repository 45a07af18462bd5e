"""Disposable Ethereal SMTP accounts for CI runs (https://ethereal.email)."""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from mailhelper import __version__
from mailhelper.errors import EtherealAccountError

logger = logging.getLogger(__name__)

ACCOUNT_API_URL = "https://api.nodemailer.com/user"
ETHEREAL_HOST = "smtp.ethereal.email"
ETHEREAL_PORT = 587


@dataclass
class EtherealAccount:
    """Throwaway SMTP credentials; mail sent with them is captured, never delivered."""
    user: str
    password: str
    web_url: Optional[str] = None


async def create_ethereal_account(
    client: Optional[httpx.AsyncClient] = None,
) -> EtherealAccount:
    """Ask the Ethereal API for a fresh test account."""
    body = {"requestor": "mailhelper", "version": __version__}

    if client is None:
        async with httpx.AsyncClient(timeout=15) as own_client:
            resp = await own_client.post(ACCOUNT_API_URL, json=body)
    else:
        resp = await client.post(ACCOUNT_API_URL, json=body)
    resp.raise_for_status()

    data = resp.json()
    if data.get("status") != "success":
        raise EtherealAccountError(
            f"Ethereal account request failed: {data.get('error') or data.get('status')}"
        )

    logger.info("Created Ethereal test account %s", data["user"])
    return EtherealAccount(
        user=data["user"],
        password=data["pass"],
        web_url=data.get("web"),
    )
