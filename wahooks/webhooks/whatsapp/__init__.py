"""
WhatsApp Webhook Schemas

Pydantic models for WhatsApp Business Platform webhook payloads, the
verification handshake and media lookups.

Usage:
    from wahooks.webhooks.whatsapp import WebhookPayload, Message, StatusUpdate
    from wahooks.webhooks.whatsapp.message_types import TextContent
"""

from .base_models import (
    AdReferral,
    Contact,
    ErrorData,
    MessageContext,
    MessageError,
    Metadata,
    Profile,
    ReferredProduct,
    UnixTimestamp,
    WebhookModel,
)
from .media import MediaInfo, MediaReference
from .message import Message
from .status_models import Conversation, ConversationOrigin, Pricing, StatusUpdate
from .verification import VerificationRequest
from .webhook_container import Change, Entry, Value, WebhookPayload

__all__ = [
    # Root and nesting levels
    "WebhookPayload",
    "Entry",
    "Change",
    "Value",
    # Messages and statuses
    "Message",
    "StatusUpdate",
    "Conversation",
    "ConversationOrigin",
    "Pricing",
    # Media
    "MediaReference",
    "MediaInfo",
    # Handshake
    "VerificationRequest",
    # Base models
    "WebhookModel",
    "UnixTimestamp",
    "Metadata",
    "Contact",
    "Profile",
    "MessageContext",
    "ReferredProduct",
    "AdReferral",
    "MessageError",
    "ErrorData",
]
