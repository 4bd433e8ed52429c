"""WhatsApp text message content."""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class TextContent(WebhookModel):
    """Text message content."""

    body: str | None = Field(None, description="The text content of the message")
