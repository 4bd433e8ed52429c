"""FastAPI integration for WhatsApp webhooks."""

from .controllers import WebhookController
from .routes import create_webhook_router

__all__ = ["WebhookController", "create_webhook_router"]
