from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from mailhelper.config import Settings

BASE_SETTINGS = {
    "mail_provider": "smtp",
    "ci": False,
    "smtp_host": "mail.example.com",
    "smtp_port": 25,
    "smtp_user": "u",
    "smtp_pass": "p",
    "smtp_from": "noreply@example.com",
    "emailjs_api_url": "https://api.emailjs.test/api/v1.0/email/send",
    "emailjs_service_id": "service_1",
    "emailjs_template_id": "template_1",
    "emailjs_public_key": "public_1",
    "emailjs_private_key": "",
}


@pytest.fixture
def make_settings():
    """Build Settings from explicit values so the test environment cannot leak in."""

    def _make(**overrides) -> Settings:
        values = dict(BASE_SETTINGS)
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient; yields (client_class, client_instance, response)."""
    response = MagicMock()
    response.status_code = 200
    response.reason_phrase = "OK"
    response.json.side_effect = ValueError("not json")

    with patch("httpx.AsyncClient") as client_class:
        client = AsyncMock()
        client.post = AsyncMock(return_value=response)
        client_class.return_value.__aenter__.return_value = client
        yield client_class, client, response


@pytest.fixture
def mock_smtp():
    """Patch smtplib.SMTP in the SMTP provider; yields (smtp_class, server)."""
    with patch("mailhelper.providers.smtp.smtplib.SMTP") as smtp_class:
        server = smtp_class.return_value.__enter__.return_value
        server.has_extn.return_value = False
        server.send_message.return_value = {}
        yield smtp_class, server
