"""
wahooks - typed WhatsApp Business Platform webhooks

Pydantic models and a pure decoder for WhatsApp webhook payloads and the
verification handshake, plus a FastAPI router honouring the provider's
delivery contract.

Usage:
    from wahooks.webhooks import decode_webhook_payload, classify_value
    from wahooks.api import create_webhook_router
"""

from .core.config.settings import settings
from .webhooks import (
    DecodeError,
    VariantReport,
    VerificationRequest,
    WebhookPayload,
    classify_value,
    decode_verification_request,
    decode_webhook_payload,
)

__version__ = settings.version

__all__ = [
    "WebhookPayload",
    "VerificationRequest",
    "VariantReport",
    "DecodeError",
    "decode_webhook_payload",
    "decode_verification_request",
    "classify_value",
]
