"""Errors raised by mailhelper itself.

Transport failures from smtplib and httpx are never wrapped; they reach the
caller as-is.
"""


class MailError(Exception):
    """Base class for mailhelper errors."""


class MissingRecipientError(MailError, ValueError):
    """The message has no usable recipient address."""

    def __init__(self, message: str = "EMAILJS_MISSING_RECIPIENT"):
        super().__init__(message)


class EtherealAccountError(MailError, RuntimeError):
    """The Ethereal API did not hand out a test account."""
