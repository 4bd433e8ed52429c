"""
Pytest configuration and common fixtures for wahooks tests.

Payload fixtures follow the shapes documented for the WhatsApp Cloud API
webhooks and are returned as fresh dicts so tests may modify them.
"""

import json

import pytest

from wahooks.core.config.settings import Settings
from wahooks.core.logging.context import clear_request_context

BUSINESS_ACCOUNT_ID = "102290129340398"
PHONE_NUMBER_ID = "106540352242922"
SENDER = "16505551234"


def build_payload(value: dict, field: str = "messages", obj: str = "whatsapp_business_account") -> dict:
    """Wrap a change value in the entry/changes envelope."""
    return {
        "object": obj,
        "entry": [
            {
                "id": BUSINESS_ACCOUNT_ID,
                "changes": [{"value": value, "field": field}],
            }
        ],
    }


def encode(payload: dict) -> bytes:
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def metadata() -> dict:
    return {"display_phone_number": "15550783881", "phone_number_id": PHONE_NUMBER_ID}


@pytest.fixture
def text_message() -> dict:
    return {
        "from": SENDER,
        "id": "wamid.HBgLMTY1MDM4Nzk0MzkVAgASGBQzQTRBNjU5OUFFRTAzODEwMTQ0RgA=",
        "timestamp": "1749416383",
        "type": "text",
        "text": {"body": "Does it come in another color?"},
    }


@pytest.fixture
def text_message_payload(metadata, text_message) -> dict:
    return build_payload(
        {
            "messaging_product": "whatsapp",
            "metadata": metadata,
            "contacts": [{"profile": {"name": "Sheena Nelson"}, "wa_id": SENDER}],
            "messages": [text_message],
        }
    )


@pytest.fixture
def status_payload(metadata) -> dict:
    return build_payload(
        {
            "messaging_product": "whatsapp",
            "metadata": metadata,
            "statuses": [
                {
                    "id": "wamid.HBgLMTY0NjcwNDM1OTUVAgARGBI1RjQyNUE3NEYxMzAzMzQ5MkEA",
                    "status": "delivered",
                    "timestamp": "1750263773",
                    "recipient_id": SENDER,
                    "conversation": {
                        "id": "6ceb9d929c1a3a4e9e3c0b7dc1c3e9a2",
                        "expiration_timestamp": "1750349100",
                        "origin": {"type": "utility"},
                    },
                    "pricing": {
                        "billable": True,
                        "pricing_model": "PMP",
                        "category": "utility",
                    },
                }
            ],
        }
    )


@pytest.fixture
def failed_status_payload(metadata) -> dict:
    return build_payload(
        {
            "messaging_product": "whatsapp",
            "metadata": metadata,
            "statuses": [
                {
                    "id": "wamid.HBgLMTY0NjcwNDM1OTUVAgARGBIyRkQxREJGRjE2NEQxMDQ2QUMA",
                    "status": "failed",
                    "timestamp": "1750263800",
                    "recipient_id": SENDER,
                    "errors": [
                        {
                            "code": 131049,
                            "title": "This message was not delivered to maintain healthy ecosystem engagement.",
                            "message": "This message was not delivered to maintain healthy ecosystem engagement.",
                            "error_data": {"details": "In order to maintain a healthy ecosystem engagement, the message failed to be delivered."},
                            "href": "https://developers.facebook.com/docs/whatsapp/cloud-api/support/error-codes/",
                        }
                    ],
                }
            ],
        }
    )


@pytest.fixture(autouse=True)
def reset_logging_context():
    """Keep contextvars from leaking between tests."""
    clear_request_context()
    yield
    clear_request_context()


@pytest.fixture
def env_settings(monkeypatch) -> Settings:
    """
    Settings rebuilt from test environment variables.

    The module level instance is created at import time, so the fresh one is
    swapped into every module that reads it.
    """
    monkeypatch.setenv("ENVIRONMENT", "PROD")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("WHATSAPP_WEBHOOK_VERIFY_TOKEN", "test_verify_token")
    monkeypatch.delenv("WEBHOOK_PATH", raising=False)

    test_settings = Settings()
    monkeypatch.setattr("wahooks.api.controllers.webhook_controller.settings", test_settings)
    monkeypatch.setattr("wahooks.api.routes.webhooks.settings", test_settings)
    return test_settings
