"""Pydantic schemas for outgoing mail and delivery results."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class MailAddress(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None


AddressEntry = Union[str, MailAddress, None]
AddressInput = Union[str, MailAddress, list[AddressEntry], None]


class MailMessage(BaseModel):
    """A provider-agnostic "send mail" request.

    Address fields take a plain string, a ``{name, address}`` pair, or a list
    mixing both. Use either the field names or the ``from``/``replyTo``
    aliases when building from a dict.
    """

    from_: AddressInput = Field(None, alias="from")
    to: AddressInput = None
    reply_to: AddressInput = Field(None, alias="replyTo")
    subject: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class Envelope(BaseModel):
    from_: str = Field("", alias="from")
    to: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class DeliveryResult(BaseModel):
    """Uniform outcome returned by every provider."""

    accepted: list[str] = Field(default_factory=list)
    rejected: list[str] = Field(default_factory=list)
    envelope: Envelope = Field(default_factory=Envelope)
    message_id: Optional[str] = Field(None, alias="messageId")
    response: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)
