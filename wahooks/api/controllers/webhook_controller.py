"""
Webhook controller implementing the provider's caller contract.

Routes handle HTTP plumbing; the controller decodes, classifies and hands
changes to the event handler:

- Handshake: 200 with the challenge when verified, otherwise 403.
- Events: 200 ``EVENT_RECEIVED`` for every syntactically accepted delivery,
  including ones that fail to decode, so the provider does not redeliver;
  404 when the payload is not a WhatsApp Business Account event.
"""

from collections.abc import Mapping

from fastapi import HTTPException
from fastapi.responses import PlainTextResponse

from wahooks.core.config.settings import settings
from wahooks.core.events import WebhookEventHandler
from wahooks.core.logging.context import clear_request_context, set_request_context
from wahooks.core.logging.logger import get_logger
from wahooks.core.types import EVENT_RECEIVED
from wahooks.webhooks import (
    ClassifiedChange,
    DecodeError,
    classify_payload,
    decode_verification_request,
    decode_webhook_payload,
)


class WebhookController:
    """
    Handles webhook verification and event delivery.

    Holds no per-request state: the event handler and verify token are fixed
    at construction, every request decodes into its own model tree.
    """

    def __init__(
        self,
        event_handler: WebhookEventHandler | None = None,
        verify_token: str | None = None,
    ):
        """
        Args:
            event_handler: Receives classified changes; defaults to a no-op handler
            verify_token: Handshake secret; defaults to WHATSAPP_WEBHOOK_VERIFY_TOKEN
        """
        self.event_handler = event_handler or WebhookEventHandler()
        self.verify_token = (
            verify_token
            if verify_token is not None
            else settings.whatsapp_webhook_verify_token
        )
        self.logger = get_logger(__name__)

        if not self.verify_token:
            self.logger.warning(
                "No webhook verify token configured, handshakes will be rejected"
            )

    def verify_webhook(self, params: Mapping[str, str]) -> PlainTextResponse:
        """
        Answer the verification handshake.

        Args:
            params: Query parameters of the GET request

        Returns:
            PlainTextResponse echoing the challenge

        Raises:
            HTTPException: 403 when the handshake does not verify
        """
        try:
            request = decode_verification_request(params)
        except DecodeError as e:
            self.logger.warning(f"Rejected malformed handshake: {e}")
            raise HTTPException(status_code=403, detail="Verification failed") from e

        challenge = request.verify(self.verify_token)
        if challenge is None:
            self.logger.warning(
                f"Webhook verification failed (mode={request.mode!r}, "
                f"token {'present' if request.verify_token is not None else 'missing'})"
            )
            raise HTTPException(status_code=403, detail="Verification failed")

        self.logger.info("Webhook verification successful")
        return PlainTextResponse(content=challenge)

    async def process_webhook(self, body: bytes) -> PlainTextResponse:
        """
        Decode an event delivery and route its changes.

        Args:
            body: Raw request body

        Returns:
            PlainTextResponse with ``EVENT_RECEIVED``

        Raises:
            HTTPException: 404 when ``object`` is not a WhatsApp Business Account
        """
        try:
            payload = decode_webhook_payload(body)
        except DecodeError as e:
            # Acknowledge anyway: a non-2xx answer makes the provider redeliver
            self.logger.error(f"Failed to decode webhook payload: {e.to_dict()}")
            return PlainTextResponse(content=EVENT_RECEIVED)

        if not payload.is_whatsapp_business_account:
            self.logger.warning(f"Ignoring webhook for object {payload.object!r}")
            raise HTTPException(status_code=404, detail="Not a WhatsApp Business Account event")

        for classified in classify_payload(payload):
            await self._route_change(classified)

        return PlainTextResponse(content=EVENT_RECEIVED)

    async def _route_change(self, classified: ClassifiedChange) -> None:
        set_request_context(
            account_id=classified.entry.id, sender_id=self._sender_of(classified)
        )
        try:
            await self.event_handler.dispatch(classified)
        except Exception:
            # The delivery is still acknowledged; one bad change must not drop the rest
            self.logger.exception(
                f"Event handler failed for change '{classified.change.field}'"
            )
        finally:
            clear_request_context()

    @staticmethod
    def _sender_of(classified: ClassifiedChange) -> str | None:
        report = classified.report
        if report.messages:
            return report.messages[0].from_
        if report.statuses:
            return report.statuses[0].recipient_id
        return None
