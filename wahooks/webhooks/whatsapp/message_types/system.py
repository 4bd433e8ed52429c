"""
WhatsApp system message content.

System messages notify the business of account level events such as a
customer changing their phone number.
"""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class SystemContent(WebhookModel):
    """System message content."""

    body: str | None = Field(None, description="Text describing the event")
    type: str | None = Field(None, description="Event type, e.g. 'user_changed_number'")
    wa_id: str | None = Field(None, description="New WhatsApp ID (number changes)")
    new_wa_id: str | None = Field(None, description="New WhatsApp ID (legacy key)")
    customer: str | None = Field(None, description="Customer the event refers to")

    @property
    def changed_to(self) -> str | None:
        """New WhatsApp ID for number change events."""
        return self.wa_id or self.new_wa_id
