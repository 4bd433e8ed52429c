"""
Pure decoding of raw webhook input into typed models.

The decoder never fails because of unknown keys or absent keys; only input
that is not JSON (or nests too deeply to parse), JSON whose root is not an
object, or a value of the wrong type is rejected. It performs no I/O, holds no state and does not log:
failures are raised to the caller as ``DecodeError`` subclasses.
"""

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from wahooks.webhooks.errors import MalformedPayloadError, TypeMismatchError, WrongShapeError
from wahooks.webhooks.whatsapp.base_models import WebhookModel
from wahooks.webhooks.whatsapp.media import MediaInfo
from wahooks.webhooks.whatsapp.verification import VerificationRequest
from wahooks.webhooks.whatsapp.webhook_container import WebhookPayload

ModelT = TypeVar("ModelT", bound=WebhookModel)


def _load_json_object(raw: bytes | bytearray | str) -> dict[str, Any]:
    """Parse UTF-8 JSON and require an object at the root."""
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayloadError(f"Body is not valid UTF-8: {e}") from e

    if not raw.strip():
        raise MalformedPayloadError("Body is empty")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(f"Body is not valid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedPayloadError("Body is nested too deeply to decode") from e

    if not isinstance(data, dict):
        actual = type(data).__name__
        raise WrongShapeError(
            f"Expected a JSON object at the root, got {actual}", actual_type=actual
        )
    return data


def _type_mismatch(error: ValidationError) -> TypeMismatchError:
    """Translate the first pydantic error into a TypeMismatchError."""
    first = error.errors()[0]
    return TypeMismatchError(first["msg"], path=tuple(first["loc"]), value=first.get("input"))


def _validate(model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise _type_mismatch(e) from e


def decode_webhook_payload(raw: bytes | bytearray | str) -> WebhookPayload:
    """
    Decode a webhook POST body.

    Args:
        raw: Request body as UTF-8 bytes (or an already decoded string)

    Returns:
        WebhookPayload reflecting exactly the keys present in ``raw``

    Raises:
        MalformedPayloadError: Body is empty, not UTF-8 or not JSON
        WrongShapeError: Body is JSON but not an object
        TypeMismatchError: A value has the wrong type, e.g. a non-numeric timestamp
    """
    return _validate(WebhookPayload, _load_json_object(raw))


def decode_webhook_dict(data: Any) -> WebhookPayload:
    """Decode an already parsed JSON document (e.g. from ``request.json()``)."""
    if not isinstance(data, Mapping):
        actual = type(data).__name__
        raise WrongShapeError(
            f"Expected a JSON object at the root, got {actual}", actual_type=actual
        )
    return _validate(WebhookPayload, data)


def decode_verification_request(params: Mapping[str, str]) -> VerificationRequest:
    """
    Decode handshake query parameters.

    Args:
        params: Query parameter name to value, e.g. ``{"hub.mode": "subscribe"}``

    Raises:
        WrongShapeError: ``params`` is not a mapping
        TypeMismatchError: A ``hub.*`` value is not a string
    """
    if not isinstance(params, Mapping):
        actual = type(params).__name__
        raise WrongShapeError(
            f"Expected a mapping of query parameters, got {actual}", actual_type=actual
        )
    return _validate(VerificationRequest, dict(params))


def decode_media_info(raw: bytes | bytearray | str) -> MediaInfo:
    """Decode the Graph API response of a media lookup."""
    return _validate(MediaInfo, _load_json_object(raw))
