"""
WhatsApp inbound message schema.

A single ``Message`` model covers every message kind: ``type`` names the kind
and the sub-object of the same name carries its content. Kinds this package
does not know decode fine and simply have no content accessor.
"""

from typing import Any

from pydantic import Field

from wahooks.core.types import MessageType
from wahooks.webhooks.whatsapp.base_models import (
    AdReferral,
    MessageContext,
    MessageError,
    UnixTimestamp,
    WebhookModel,
)
from wahooks.webhooks.whatsapp.media import MediaReference
from wahooks.webhooks.whatsapp.message_types import (
    ButtonContent,
    InteractiveContent,
    LocationContent,
    OrderContent,
    ReactionContent,
    SharedContact,
    SystemContent,
    TextContent,
)

# Message types whose content lives under a key of the same name
CONTENT_FIELDS = (
    "text",
    "image",
    "audio",
    "video",
    "document",
    "sticker",
    "location",
    "contacts",
    "interactive",
    "button",
    "reaction",
    "order",
    "system",
)

MEDIA_FIELDS = ("image", "audio", "video", "document", "sticker")


def _is_populated(content: Any) -> bool:
    # An empty list (e.g. "contacts": []) carries no content
    if isinstance(content, list):
        return bool(content)
    return content is not None


class Message(WebhookModel):
    """
    Inbound user message.

    ``type`` and the populated sub-object are expected to agree; when they do
    not, decoding still succeeds and ``is_consistent`` reports ``False`` so the
    caller can log the data-quality problem.
    """

    # Standard message fields
    id: str | None = Field(None, description="Unique WhatsApp message ID")
    from_: str | None = Field(
        None, alias="from", description="Sender phone number (WhatsApp ID)"
    )
    timestamp: UnixTimestamp | None = Field(
        None, description="Unix timestamp (seconds) as a decimal string"
    )
    type: str | None = Field(None, description="Message kind, e.g. 'text' or 'image'")

    # Content, one per kind
    text: TextContent | None = None
    image: MediaReference | None = None
    audio: MediaReference | None = None
    video: MediaReference | None = None
    document: MediaReference | None = None
    sticker: MediaReference | None = None
    location: LocationContent | None = None
    contacts: list[SharedContact] | None = None
    interactive: InteractiveContent | None = None
    button: ButtonContent | None = None
    reaction: ReactionContent | None = None
    order: OrderContent | None = None
    system: SystemContent | None = None

    # Optional envelope fields
    context: MessageContext | None = Field(
        None, description="Context for replies, forwards, or product enquiries"
    )
    referral: AdReferral | None = Field(
        None, description="Click-to-WhatsApp ad referral information"
    )
    errors: list[MessageError] | None = Field(
        None, description="Why the message could not be rendered ('unsupported')"
    )

    @property
    def unix_timestamp(self) -> int | None:
        """The timestamp parsed as integer seconds."""
        return int(self.timestamp) if self.timestamp is not None else None

    @property
    def message_type(self) -> MessageType | None:
        """Typed view of ``type``; ``None`` for kinds this package does not know."""
        if self.type is None:
            return None
        try:
            return MessageType(self.type)
        except ValueError:
            return None

    @property
    def content(self) -> Any:
        """The sub-object named by ``type``, or ``None`` when it is absent."""
        if self.type not in CONTENT_FIELDS:
            return None
        return getattr(self, self.type)

    @property
    def has_content(self) -> bool:
        return _is_populated(self.content)

    @property
    def populated_content_fields(self) -> tuple[str, ...]:
        """Names of the content sub-objects present on this message."""
        return tuple(name for name in CONTENT_FIELDS if _is_populated(getattr(self, name)))

    @property
    def is_consistent(self) -> bool:
        """Whether ``type`` agrees with the populated content sub-objects."""
        expected = (self.type,) if self.type in CONTENT_FIELDS else ()
        return self.populated_content_fields == expected

    @property
    def media(self) -> MediaReference | None:
        """Media reference for media kinds, ``None`` otherwise."""
        if self.type not in MEDIA_FIELDS:
            return None
        return getattr(self, self.type)

    @property
    def text_body(self) -> str | None:
        return self.text.body if self.text else None

    @property
    def is_reply(self) -> bool:
        return self.context is not None and self.context.is_reply

    @property
    def is_forwarded(self) -> bool:
        return self.context is not None and self.context.is_forward
