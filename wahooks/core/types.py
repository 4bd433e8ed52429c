"""
Shared enums for WhatsApp webhook payloads.

Wire values are kept as plain strings on the models so that unknown values
decode cleanly; these enums are the typed view callers can opt into.
"""

from enum import Enum

WHATSAPP_BUSINESS_ACCOUNT = "whatsapp_business_account"
SUBSCRIBE_MODE = "subscribe"
EVENT_RECEIVED = "EVENT_RECEIVED"


class MessageType(str, Enum):
    """Inbound message kinds documented by the Cloud API."""

    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    BUTTON = "button"
    REACTION = "reaction"
    ORDER = "order"
    SYSTEM = "system"
    UNSUPPORTED = "unsupported"  # Provider could not render the message


class MessageStatus(str, Enum):
    """Delivery states reported for outbound messages."""

    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"


class WebhookVariant(str, Enum):
    """Payload kinds a change value can carry."""

    MESSAGES = "messages"
    STATUSES = "statuses"
    ERRORS = "errors"


class DecodeErrorKind(str, Enum):
    """Failure taxonomy of the decoder."""

    MALFORMED = "Malformed"
    WRONG_SHAPE = "WrongShape"
    TYPE_MISMATCH = "TypeMismatch"
