"""WhatsApp reaction message content."""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class ReactionContent(WebhookModel):
    """
    Reaction to a previous message.

    An absent ``emoji`` means the user removed their reaction.
    """

    message_id: str | None = Field(None, description="ID of the message reacted to")
    emoji: str | None = Field(None, description="Reaction emoji")

    @property
    def is_removal(self) -> bool:
        return not self.emoji
