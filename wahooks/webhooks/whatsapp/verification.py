"""
WhatsApp webhook verification handshake.

When a webhook is registered the provider sends a GET request with
``hub.mode``, ``hub.verify_token`` and ``hub.challenge`` query parameters.
The endpoint proves ownership by echoing the challenge when the token matches
the secret it holds.
"""

import hmac

from pydantic import AliasChoices, Field

from wahooks.core.types import SUBSCRIBE_MODE
from wahooks.webhooks.whatsapp.base_models import WebhookModel


class VerificationRequest(WebhookModel):
    """
    Handshake query parameters.

    Each parameter is optional at the type level; an absent parameter stays
    ``None`` and is distinct from an empty string.
    """

    mode: str | None = Field(
        None,
        validation_alias=AliasChoices("hub.mode", "mode"),
        serialization_alias="hub.mode",
        description="Expected to be 'subscribe'",
    )
    verify_token: str | None = Field(
        None,
        validation_alias=AliasChoices("hub.verify_token", "verify_token", "verifyToken"),
        serialization_alias="hub.verify_token",
        description="Secret configured by the integrator in the app dashboard",
    )
    challenge: str | None = Field(
        None,
        validation_alias=AliasChoices("hub.challenge", "challenge"),
        serialization_alias="hub.challenge",
        description="Opaque token to echo back",
    )

    @property
    def is_complete(self) -> bool:
        """All three parameters were supplied."""
        return (
            self.mode is not None
            and self.verify_token is not None
            and self.challenge is not None
        )

    @property
    def is_subscribe(self) -> bool:
        return self.mode == SUBSCRIBE_MODE

    def verify(self, secret: str | None) -> str | None:
        """
        Check the handshake against the caller's secret.

        Args:
            secret: Verify token held by the caller. ``None`` or an empty
                secret never verifies.

        Returns:
            The challenge to echo back, or ``None`` when verification fails
        """
        if not secret or not self.is_complete or not self.is_subscribe:
            return None
        if not hmac.compare_digest(self.verify_token.encode(), secret.encode()):
            return None
        return self.challenge
