"""Event handling for decoded webhooks."""

from .event_handler import WebhookEventHandler

__all__ = ["WebhookEventHandler"]
