"""
WhatsApp interactive message content.

Interactive messages are the user's reply to a reply-button or list message
sent by the business, or a WhatsApp Flow completion.
"""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class ButtonReply(WebhookModel):
    """Reply to a reply-button message."""

    id: str | None = Field(None, description="Button ID set when sending the button")
    title: str | None = Field(None, description="Button label displayed to the user")


class ListReply(WebhookModel):
    """Reply to a list message."""

    id: str | None = Field(None, description="Row ID set when sending the list")
    title: str | None = Field(None, description="Row title displayed to the user")
    description: str | None = Field(None, description="Row description")


class FlowReply(WebhookModel):
    """Completion of a WhatsApp Flow."""

    name: str | None = Field(None, description="Flow name, usually 'flow'")
    body: str | None = Field(None, description="Body text shown in the chat")
    response_json: str | None = Field(
        None, description="Flow response as a JSON encoded string"
    )


class InteractiveContent(WebhookModel):
    """Interactive reply container; ``type`` names the populated reply."""

    type: str | None = Field(
        None, description="'button_reply', 'list_reply' or 'nfm_reply'"
    )
    button_reply: ButtonReply | None = Field(None, description="Reply-button selection")
    list_reply: ListReply | None = Field(None, description="List row selection")
    nfm_reply: FlowReply | None = Field(None, description="Flow completion")

    @property
    def selection_id(self) -> str | None:
        """ID of the selected button or list row, whichever is populated."""
        if self.button_reply is not None:
            return self.button_reply.id
        if self.list_reply is not None:
            return self.list_reply.id
        return None
