"""API controllers for wahooks."""

from .webhook_controller import WebhookController

__all__ = ["WebhookController"]
