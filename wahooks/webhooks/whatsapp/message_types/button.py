"""WhatsApp quick-reply button message content (template buttons)."""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class ButtonContent(WebhookModel):
    payload: str | None = Field(None, description="Developer defined button payload")
    text: str | None = Field(None, description="Button label text")
