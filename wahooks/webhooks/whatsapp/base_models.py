"""
Base models for WhatsApp Business Platform webhooks.

This module contains the shared model configuration and the small Pydantic
models reused across message types: metadata, contact information, message
context, ad referrals and error details.

Every model is frozen, ignores unknown keys and leaves absent keys unset, so a
payload from a newer API version still decodes.
"""

from typing import Annotated

from pydantic import (
    AfterValidator,
    AliasChoices,
    AliasGenerator,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)
from pydantic.alias_generators import to_camel


def _wire_aliases(field_name: str) -> AliasChoices:
    """Accept the provider's snake_case key and its lowerCamelCase spelling."""
    return AliasChoices(field_name, to_camel(field_name))


def _validate_unix_timestamp(v: str) -> str:
    """Unix timestamps arrive as strings of decimal digits."""
    if not (v.isascii() and v.isdigit()):
        raise ValueError("Timestamp must be a string of decimal digits")
    return v


UnixTimestamp = Annotated[str, AfterValidator(_validate_unix_timestamp)]


def _require_encodable(value):
    """Reject strings holding lone surrogates, which cannot be re-encoded as UTF-8."""
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError("String contains an unpaired surrogate") from e
    elif isinstance(value, list):
        for item in value:
            _require_encodable(item)
    return value


class WebhookModel(BaseModel):
    """Common configuration for every webhook model."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        alias_generator=AliasGenerator(validation_alias=_wire_aliases),
    )

    @field_validator("*")
    @classmethod
    def _encodable_strings(cls, v):
        return _require_encodable(v)

    def to_dict(self) -> dict:
        """Re-encode to provider wire names, keeping only the keys that were present."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_json(self) -> str:
        """Re-encode to a JSON string, keeping only the keys that were present."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)


class Metadata(WebhookModel):
    """
    Business phone number metadata.

    Identifies the business number that received or sent the message.
    """

    display_phone_number: str | None = Field(
        None, description="Business display phone number (formatted for display)"
    )
    phone_number_id: str | None = Field(
        None, description="Business phone number ID (WhatsApp internal identifier)"
    )


class Profile(WebhookModel):
    """User profile information attached to a contact."""

    name: str | None = Field(None, description="WhatsApp user's display name")


class Contact(WebhookModel):
    """Sender identity delivered alongside incoming messages."""

    wa_id: str | None = Field(None, description="WhatsApp user ID (phone number)")
    profile: Profile | None = Field(None, description="User profile information")

    @property
    def display_name(self) -> str | None:
        return self.profile.name if self.profile else None


class ReferredProduct(WebhookModel):
    """Product catalog reference for message business button context."""

    catalog_id: str | None = Field(None, description="Product catalog ID")
    product_retailer_id: str | None = Field(None, description="Product retailer ID")


class MessageContext(WebhookModel):
    """
    Context information for WhatsApp messages.

    Used for replies, forwards, and message business button interactions.
    """

    # For replies and message business buttons
    from_: str | None = Field(
        None, alias="from", description="Original message sender (for replies)"
    )
    id: str | None = Field(
        None, description="ID of the original message being replied to or referenced"
    )

    # For forwarded messages
    forwarded: bool | None = Field(None, description="True if forwarded 5 times or less")
    frequently_forwarded: bool | None = Field(
        None, description="True if forwarded more than 5 times"
    )

    referred_product: ReferredProduct | None = Field(
        None, description="Product information for message business button"
    )

    @property
    def is_forward(self) -> bool:
        return bool(self.forwarded or self.frequently_forwarded)

    @property
    def is_reply(self) -> bool:
        return self.id is not None and not self.is_forward


class AdReferral(WebhookModel):
    """
    Click-to-WhatsApp ad referral information.

    Present when a user sends a message via a Click-to-WhatsApp ad.
    """

    source_url: str | None = Field(None, description="Click-to-WhatsApp ad URL")
    source_id: str | None = Field(None, description="Click-to-WhatsApp ad ID")
    source_type: str | None = Field(None, description="Source type, e.g. 'ad' or 'post'")
    body: str | None = Field(None, description="Ad primary text")
    headline: str | None = Field(None, description="Ad headline")
    media_type: str | None = Field(None, description="Ad media type")
    image_url: str | None = Field(None, description="Ad image URL (image ads)")
    video_url: str | None = Field(None, description="Ad video URL (video ads)")
    thumbnail_url: str | None = Field(None, description="Ad video thumbnail URL")
    ctwa_clid: str | None = Field(None, description="Click-to-WhatsApp ad click ID")


class ErrorData(WebhookModel):
    """Error details for failed messages."""

    details: str | None = Field(None, description="Detailed error description")


class MessageError(WebhookModel):
    """Error information for failed messages, statuses and webhook values."""

    code: int | None = Field(None, description="Error code")
    title: str | None = Field(None, description="Error title")
    message: str | None = Field(None, description="Error message")
    error_data: ErrorData | None = Field(None, description="Additional error details")
    href: str | None = Field(None, description="Link to error documentation")

    @property
    def details(self) -> str | None:
        return self.error_data.details if self.error_data else None
