"""
WhatsApp message status schema.

This module contains Pydantic models for delivery receipts, read receipts and
failure notifications of messages sent by the business.
"""

from pydantic import Field

from wahooks.core.types import MessageStatus
from wahooks.webhooks.whatsapp.base_models import MessageError, UnixTimestamp, WebhookModel


class ConversationOrigin(WebhookModel):
    """Conversation origin information for pricing."""

    type: str | None = Field(None, description="Conversation category")


class Conversation(WebhookModel):
    """Conversation information for message status."""

    id: str | None = Field(None, description="Conversation ID")
    expiration_timestamp: UnixTimestamp | None = Field(
        None, description="Unix timestamp when the conversation expires"
    )
    origin: ConversationOrigin | None = Field(None, description="Conversation origin")


class Pricing(WebhookModel):
    """Pricing information for message status."""

    billable: bool | None = Field(None, description="Whether the message is billable")
    pricing_model: str | None = Field(None, description="'CBP' or 'PMP'")
    type: str | None = Field(None, description="Pricing type")
    category: str | None = Field(None, description="Pricing category")


class StatusUpdate(WebhookModel):
    """
    Status update for a message sent by the business.

    ``status`` stays a plain string so that statuses added by the provider
    later still decode; ``delivery_status`` is the typed view.
    """

    # Core status fields
    id: str | None = Field(None, description="WhatsApp message ID this status refers to")
    status: str | None = Field(
        None, description="Delivery status: sent, delivered, read or failed"
    )
    timestamp: UnixTimestamp | None = Field(
        None, description="Unix timestamp (seconds) of the status event"
    )
    recipient_id: str | None = Field(None, description="Recipient WhatsApp ID")

    # Optional fields
    biz_opaque_callback_data: str | None = Field(
        None, description="Business opaque data (only if set when sending)"
    )
    conversation: Conversation | None = Field(
        None, description="Conversation information"
    )
    pricing: Pricing | None = Field(None, description="Pricing information")
    errors: list[MessageError] | None = Field(
        None, description="Error details (status 'failed')"
    )

    @property
    def delivery_status(self) -> MessageStatus | None:
        """Typed status; ``None`` when absent or not a known status."""
        if self.status is None:
            return None
        try:
            return MessageStatus(self.status)
        except ValueError:
            return None

    @property
    def unix_timestamp(self) -> int | None:
        """The timestamp parsed as integer seconds."""
        return int(self.timestamp) if self.timestamp is not None else None

    @property
    def is_failed(self) -> bool:
        return self.status == MessageStatus.FAILED.value

    @property
    def is_successful(self) -> bool:
        """Check if the message was sent, delivered or read."""
        return self.status in (
            MessageStatus.SENT.value,
            MessageStatus.DELIVERED.value,
            MessageStatus.READ.value,
        )

    @property
    def primary_error(self) -> MessageError | None:
        # The provider typically sends one error per status
        return self.errors[0] if self.errors else None
