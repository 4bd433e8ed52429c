"""
WhatsApp webhook routes.

Mount the router returned by ``create_webhook_router`` on any FastAPI app;
the handshake (GET) and event delivery (POST) share one URL, as the provider
requires.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from wahooks.api.controllers import WebhookController
from wahooks.core.config.settings import settings
from wahooks.core.events import WebhookEventHandler


def create_webhook_router(
    event_handler: WebhookEventHandler | None = None,
    verify_token: str | None = None,
    prefix: str | None = None,
) -> APIRouter:
    """
    Create the webhook router.

    Args:
        event_handler: Handler receiving classified changes
        verify_token: Handshake secret; defaults to WHATSAPP_WEBHOOK_VERIFY_TOKEN
        prefix: URL path; defaults to WEBHOOK_PATH ("/webhook")

    Returns:
        APIRouter with GET and POST endpoints on ``prefix``
    """
    webhook_controller = WebhookController(
        event_handler=event_handler, verify_token=verify_token
    )

    router = APIRouter(
        prefix=prefix or settings.webhook_path,
        tags=["Webhooks"],
        responses={
            403: {"description": "Forbidden - Webhook verification failed"},
            404: {"description": "Not Found - Not a WhatsApp Business Account event"},
        },
    )

    @router.get("", response_class=PlainTextResponse)
    async def verify_webhook(request: Request):
        """Echo ``hub.challenge`` when ``hub.verify_token`` matches the secret."""
        return webhook_controller.verify_webhook(request.query_params)

    @router.post("", response_class=PlainTextResponse)
    async def receive_webhook(request: Request):
        """Acknowledge an event delivery and route its changes."""
        body = await request.body()
        return await webhook_controller.process_webhook(body)

    return router
