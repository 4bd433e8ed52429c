"""
Webhook schemas, decoder and variant dispatcher.

Usage:
    from wahooks.webhooks import decode_webhook_payload, classify_value

    payload = decode_webhook_payload(body)
    if payload.is_whatsapp_business_account:
        for entry, change in payload.iter_changes():
            report = classify_value(change.value)
            if report.has_messages:
                ...
"""

from .decoder import (
    decode_media_info,
    decode_verification_request,
    decode_webhook_dict,
    decode_webhook_payload,
)
from .dispatcher import (
    ClassifiedChange,
    VariantReport,
    classify_payload,
    classify_value,
    iter_changes,
)
from .errors import DecodeError, MalformedPayloadError, TypeMismatchError, WrongShapeError
from .whatsapp import (
    Change,
    Entry,
    MediaInfo,
    MediaReference,
    Message,
    StatusUpdate,
    Value,
    VerificationRequest,
    WebhookPayload,
)

__all__ = [
    # Decoder
    "decode_webhook_payload",
    "decode_webhook_dict",
    "decode_verification_request",
    "decode_media_info",
    # Dispatcher
    "VariantReport",
    "ClassifiedChange",
    "classify_value",
    "classify_payload",
    "iter_changes",
    # Errors
    "DecodeError",
    "MalformedPayloadError",
    "WrongShapeError",
    "TypeMismatchError",
    # Models
    "WebhookPayload",
    "Entry",
    "Change",
    "Value",
    "Message",
    "StatusUpdate",
    "MediaReference",
    "MediaInfo",
    "VerificationRequest",
]
