"""
WhatsApp message content schemas.

One module per message type sub-object. Media kinds (image, audio, video,
document, sticker) share ``wahooks.webhooks.whatsapp.media.MediaReference``.
"""

from .button import ButtonContent
from .contact import (
    ContactAddress,
    ContactEmail,
    ContactName,
    ContactOrganization,
    ContactPhone,
    ContactUrl,
    SharedContact,
)
from .interactive import ButtonReply, FlowReply, InteractiveContent, ListReply
from .location import LocationContent
from .order import OrderContent, OrderProductItem
from .reaction import ReactionContent
from .system import SystemContent
from .text import TextContent

__all__ = [
    "ButtonContent",
    "ContactAddress",
    "ContactEmail",
    "ContactName",
    "ContactOrganization",
    "ContactPhone",
    "ContactUrl",
    "SharedContact",
    "ButtonReply",
    "FlowReply",
    "InteractiveContent",
    "ListReply",
    "LocationContent",
    "OrderContent",
    "OrderProductItem",
    "ReactionContent",
    "SystemContent",
    "TextContent",
]
