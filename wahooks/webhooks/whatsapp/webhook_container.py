"""
Main webhook container models for WhatsApp Business Platform.

This module contains the top-level webhook structure (payload, entry, change,
value) that wraps message and status updates.
"""

from collections.abc import Iterator

from pydantic import Field

from wahooks.core.types import WHATSAPP_BUSINESS_ACCOUNT
from wahooks.webhooks.whatsapp.base_models import (
    Contact,
    MessageError,
    Metadata,
    WebhookModel,
)
from wahooks.webhooks.whatsapp.message import Message
from wahooks.webhooks.whatsapp.status_models import StatusUpdate


class Value(WebhookModel):
    """
    The core value object containing webhook payload data.

    In practice at most one of ``messages`` and ``statuses`` is populated, but
    nothing here enforces it; callers treat unknown or absent variants as no-op.
    """

    messaging_product: str | None = Field(
        None, description="Always 'whatsapp' for WhatsApp Business webhooks"
    )
    metadata: Metadata | None = Field(None, description="Business phone number metadata")
    contacts: list[Contact] | None = Field(
        None, description="Sender information (present for incoming messages)"
    )
    messages: list[Message] | None = Field(None, description="Incoming messages")
    statuses: list[StatusUpdate] | None = Field(
        None, description="Status updates for outgoing messages"
    )
    errors: list[MessageError] | None = Field(
        None, description="System, app, or account level errors"
    )

    @property
    def has_messages(self) -> bool:
        return bool(self.messages)

    @property
    def has_statuses(self) -> bool:
        return bool(self.statuses)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def phone_number_id(self) -> str | None:
        return self.metadata.phone_number_id if self.metadata else None

    def find_contact(self, wa_id: str | None) -> Contact | None:
        """Contact entry for a sender, matched on WhatsApp ID."""
        if wa_id is None:
            return None
        for contact in self.contacts or []:
            if contact.wa_id == wa_id:
                return contact
        return None


class Change(WebhookModel):
    """Change object describing which field of the account changed."""

    field: str | None = Field(None, description="Changed field, e.g. 'messages'")
    value: Value | None = Field(None, description="The webhook payload data")


class Entry(WebhookModel):
    """One business account's batch of changes."""

    id: str | None = Field(None, description="WhatsApp Business Account ID")
    changes: list[Change] | None = Field(None, description="Changes, in delivery order")


class WebhookPayload(WebhookModel):
    """
    Top-level WhatsApp Business Platform webhook model.

    This is the root model for all WhatsApp webhook payloads. Payloads whose
    ``object`` is not ``whatsapp_business_account`` decode, but are outside
    this model's responsibility; check ``is_whatsapp_business_account`` before
    looking at ``entry``.
    """

    object: str | None = Field(
        None, description="Always 'whatsapp_business_account' for WhatsApp webhooks"
    )
    entry: list[Entry] | None = Field(None, description="Entries, in delivery order")

    @property
    def is_whatsapp_business_account(self) -> bool:
        return self.object == WHATSAPP_BUSINESS_ACCOUNT

    def iter_changes(self) -> Iterator[tuple[Entry, Change]]:
        """Yield every (entry, change) pair in delivery order."""
        for entry in self.entry or []:
            for change in entry.changes or []:
                yield entry, change

    def iter_values(self) -> Iterator[Value]:
        for _, change in self.iter_changes():
            if change.value is not None:
                yield change.value

    @property
    def messages(self) -> list[Message]:
        """All messages across entries and changes, in delivery order."""
        messages = []
        for value in self.iter_values():
            messages.extend(value.messages or [])
        return messages

    @property
    def statuses(self) -> list[StatusUpdate]:
        """All status updates across entries and changes, in delivery order."""
        statuses = []
        for value in self.iter_values():
            statuses.extend(value.statuses or [])
        return statuses

    @property
    def is_incoming_message(self) -> bool:
        return any(value.has_messages for value in self.iter_values())

    @property
    def is_status_update(self) -> bool:
        return any(value.has_statuses for value in self.iter_values())

    def get_business_account_id(self) -> str | None:
        """WhatsApp Business Account ID from the first entry."""
        return self.entry[0].id if self.entry else None
