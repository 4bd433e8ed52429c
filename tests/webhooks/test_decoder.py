"""Tests for decoding raw webhook bodies, handshakes and media lookups."""

import json

import pytest

from tests.conftest import PHONE_NUMBER_ID, SENDER, build_payload, encode
from wahooks.core.types import DecodeErrorKind
from wahooks.webhooks import (
    DecodeError,
    MalformedPayloadError,
    TypeMismatchError,
    WrongShapeError,
    decode_media_info,
    decode_verification_request,
    decode_webhook_dict,
    decode_webhook_payload,
)


class TestDecodeWebhookPayload:
    def test_text_message(self, text_message_payload):
        payload = decode_webhook_payload(encode(text_message_payload))

        assert payload.is_whatsapp_business_account
        assert len(payload.entry) == 1
        change = payload.entry[0].changes[0]
        assert change.field == "messages"
        assert change.value.metadata.phone_number_id == PHONE_NUMBER_ID

        message = change.value.messages[0]
        assert message.from_ == SENDER
        assert message.type == "text"
        assert message.text.body == "Does it come in another color?"
        assert message.timestamp == "1749416383"
        assert message.unix_timestamp == 1749416383

    def test_accepts_str_input(self, text_message_payload):
        payload = decode_webhook_payload(json.dumps(text_message_payload))
        assert payload.messages[0].text_body == "Does it come in another color?"

    def test_status_update(self, status_payload):
        payload = decode_webhook_payload(encode(status_payload))

        status = payload.statuses[0]
        assert status.status == "delivered"
        assert status.recipient_id == SENDER
        assert status.unix_timestamp == 1750263773
        assert status.conversation.origin.type == "utility"
        assert status.pricing.billable is True

    def test_round_trip_preserves_present_fields(self, text_message_payload, status_payload):
        for original in (text_message_payload, status_payload):
            payload = decode_webhook_payload(encode(original))
            assert json.loads(payload.to_json()) == original

    def test_absent_fields_stay_unset(self, text_message):
        raw = build_payload({"messages": [text_message]})
        payload = decode_webhook_payload(encode(raw))

        value = payload.entry[0].changes[0].value
        assert value.messaging_product is None
        assert value.metadata is None
        assert value.statuses is None
        assert "metadata" not in value.model_fields_set
        assert "statuses" not in payload.to_dict()["entry"][0]["changes"][0]["value"]

    def test_empty_object_decodes(self):
        payload = decode_webhook_payload(b"{}")

        assert payload.object is None
        assert payload.entry is None
        assert payload.to_dict() == {}
        assert list(payload.iter_changes()) == []

    def test_unknown_fields_are_ignored(self, text_message_payload):
        text_message_payload["brand_new_top_level"] = {"anything": [1, 2, 3]}
        entry = text_message_payload["entry"][0]
        entry["time"] = 1749416390
        value = entry["changes"][0]["value"]
        value["messages"][0]["text"]["markup"] = "<b>bold</b>"
        value["messages"][0]["user_id"] = "US.13491208655302741918"

        payload = decode_webhook_payload(encode(text_message_payload))

        message = payload.messages[0]
        assert message.text.body == "Does it come in another color?"
        assert not hasattr(message, "user_id")
        assert "brand_new_top_level" not in payload.to_dict()

    def test_entry_order_is_preserved(self, metadata, text_message):
        raw = build_payload({"metadata": metadata, "messages": [text_message]})
        for index in range(1, 4):
            raw["entry"].append({"id": f"account-{index}", "changes": []})

        payload = decode_webhook_payload(encode(raw))

        assert [entry.id for entry in payload.entry][1:] == [
            "account-1",
            "account-2",
            "account-3",
        ]

    def test_camel_case_keys_are_accepted(self):
        raw = {
            "object": "whatsapp_business_account",
            "entry": [
                {
                    "id": "1",
                    "changes": [
                        {
                            "field": "messages",
                            "value": {
                                "messagingProduct": "whatsapp",
                                "metadata": {"phoneNumberId": "42"},
                                "statuses": [{"id": "wamid.X", "recipientId": "7"}],
                            },
                        }
                    ],
                }
            ],
        }

        payload = decode_webhook_payload(encode(raw))

        value = payload.entry[0].changes[0].value
        assert value.messaging_product == "whatsapp"
        assert value.metadata.phone_number_id == "42"
        assert value.statuses[0].recipient_id == "7"

    def test_media_message(self, metadata):
        raw = build_payload(
            {
                "metadata": metadata,
                "messages": [
                    {
                        "from": SENDER,
                        "id": "wamid.IMG",
                        "timestamp": "1749416383",
                        "type": "image",
                        "image": {
                            "caption": "Sunset",
                            "mime_type": "image/jpeg",
                            "sha256": "b1e3a1c1",
                            "id": "1003383421387256",
                        },
                    }
                ],
            }
        )

        message = decode_webhook_payload(encode(raw)).messages[0]

        assert message.media is message.image
        assert message.image.id == "1003383421387256"
        assert message.image.caption == "Sunset"
        assert message.image.is_resolvable


class TestDecodeErrors:
    @pytest.mark.parametrize(
        "raw",
        [b'{"object": "whatsapp_business_acc', b"not json", b"", b"   ", b"\xff\xfe{}"],
    )
    def test_malformed(self, raw):
        with pytest.raises(MalformedPayloadError) as exc_info:
            decode_webhook_payload(raw)
        assert exc_info.value.kind is DecodeErrorKind.MALFORMED

    @pytest.mark.parametrize("raw", [b"[]", b'"text"', b"42", b"null", b"true"])
    def test_wrong_shape(self, raw):
        with pytest.raises(WrongShapeError) as exc_info:
            decode_webhook_payload(raw)
        assert exc_info.value.kind is DecodeErrorKind.WRONG_SHAPE

    def test_wrong_shape_reports_actual_type(self):
        with pytest.raises(WrongShapeError) as exc_info:
            decode_webhook_payload(b"[1, 2]")
        assert exc_info.value.actual_type == "list"

    def test_non_numeric_timestamp(self, text_message_payload):
        text_message_payload["entry"][0]["changes"][0]["value"]["messages"][0][
            "timestamp"
        ] = "yesterday"

        with pytest.raises(TypeMismatchError) as exc_info:
            decode_webhook_payload(encode(text_message_payload))

        error = exc_info.value
        assert error.kind is DecodeErrorKind.TYPE_MISMATCH
        assert error.path == (
            "entry", 0, "changes", 0, "value", "messages", 0, "timestamp"
        )
        assert error.field == "entry.0.changes.0.value.messages.0.timestamp"
        assert error.value == "yesterday"

    def test_numeric_typed_timestamp_is_rejected(self, status_payload):
        status_payload["entry"][0]["changes"][0]["value"]["statuses"][0][
            "timestamp"
        ] = 1750263773

        with pytest.raises(TypeMismatchError) as exc_info:
            decode_webhook_payload(encode(status_payload))

        assert exc_info.value.path[-1] == "timestamp"
        assert exc_info.value.value == 1750263773

    def test_entry_not_a_list(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            decode_webhook_payload(b'{"object": "whatsapp_business_account", "entry": "x"}')

        assert exc_info.value.path == ("entry",)
        assert exc_info.value.value == "x"

    def test_deeply_nested_body_is_malformed(self):
        raw = b'{"object": "whatsapp_business_account", "x": ' + b"[" * 200000

        with pytest.raises(MalformedPayloadError) as exc_info:
            decode_webhook_payload(raw)

        assert exc_info.value.kind is DecodeErrorKind.MALFORMED

    def test_lone_surrogate_is_rejected(self):
        raw = b'{"object": "whatsapp_business_account", "entry": [{"id": "\\ud800"}]}'

        with pytest.raises(TypeMismatchError) as exc_info:
            decode_webhook_payload(raw)

        assert exc_info.value.path == ("entry", 0, "id")
        assert exc_info.value.value == "\ud800"

    def test_lone_surrogate_under_unknown_key_is_ignored(self):
        raw = b'{"object": "whatsapp_business_account", "note": "\\udc00"}'

        payload = decode_webhook_payload(raw)

        assert json.loads(payload.to_json()) == {"object": "whatsapp_business_account"}

    def test_nested_object_of_wrong_type(self, text_message_payload):
        text_message_payload["entry"][0]["changes"][0]["value"]["metadata"] = 5

        with pytest.raises(TypeMismatchError) as exc_info:
            decode_webhook_payload(encode(text_message_payload))

        assert exc_info.value.field == "entry.0.changes.0.value.metadata"

    def test_errors_share_a_base_class(self):
        for raw in (b"{", b"[]", b'{"entry": 1}'):
            with pytest.raises(DecodeError):
                decode_webhook_payload(raw)

    def test_to_dict_is_diagnostic(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            decode_webhook_payload(b'{"entry": 1}')

        data = exc_info.value.to_dict()
        assert data["kind"] == "TypeMismatch"
        assert data["field"] == "entry"
        assert data["value"] == 1


class TestDecodeWebhookDict:
    def test_parsed_json(self, text_message_payload):
        payload = decode_webhook_dict(text_message_payload)
        assert payload.messages[0].id.startswith("wamid.")

    def test_non_mapping(self):
        with pytest.raises(WrongShapeError):
            decode_webhook_dict(["entry"])


class TestDecodeVerificationRequest:
    def test_full_handshake(self):
        request = decode_verification_request(
            {"hub.mode": "subscribe", "hub.verify_token": "T1", "hub.challenge": "C1"}
        )

        assert request.mode == "subscribe"
        assert request.verify_token == "T1"
        assert request.challenge == "C1"
        assert request.is_complete

    def test_absent_and_empty_token_differ(self):
        absent = decode_verification_request({"hub.mode": "subscribe"})
        empty = decode_verification_request({"hub.mode": "subscribe", "hub.verify_token": ""})

        assert absent.verify_token is None
        assert empty.verify_token == ""
        assert not absent.is_complete

    def test_unrelated_params_are_ignored(self):
        request = decode_verification_request({"hub.challenge": "C1", "utm_source": "x"})
        assert request.challenge == "C1"
        assert request.mode is None

    def test_non_string_value(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            decode_verification_request({"hub.verify_token": 1234})
        assert "verify_token" in exc_info.value.field

    def test_not_a_mapping(self):
        with pytest.raises(WrongShapeError):
            decode_verification_request([("hub.mode", "subscribe")])

    def test_serializes_to_query_names(self):
        request = decode_verification_request({"hub.mode": "subscribe", "hub.challenge": "C1"})
        assert request.to_dict() == {"hub.mode": "subscribe", "hub.challenge": "C1"}


class TestDecodeMediaInfo:
    def test_lookup_response(self):
        info = decode_media_info(
            b'{"messaging_product": "whatsapp", "url": "https://lookaside.fbsbx.com/x",'
            b' "mime_type": "image/jpeg", "sha256": "abc", "file_size": 303833,'
            b' "id": "1003383421387256"}'
        )

        assert info.file_size == 303833
        assert info.url.startswith("https://")

    def test_malformed(self):
        with pytest.raises(MalformedPayloadError):
            decode_media_info(b"{")
