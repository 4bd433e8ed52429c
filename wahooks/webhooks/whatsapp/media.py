"""
WhatsApp media schemas.

Media never travels inside a webhook: messages carry a ``MediaReference`` and
the bytes are fetched separately from the Graph API, whose lookup response is
modelled by ``MediaInfo``. Fetching is left to the caller.
"""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class MediaReference(WebhookModel):
    """
    Opaque handle to an image, audio, video, document or sticker.

    Shared by every media message type; type specific keys (``filename``,
    ``voice``, ``animated``) are simply unset for the other kinds.
    """

    id: str | None = Field(None, description="Media asset ID for the Graph API lookup")
    mime_type: str | None = Field(None, description="MIME type, e.g. 'image/jpeg'")
    sha256: str | None = Field(None, description="SHA256 hash of the media file")
    caption: str | None = Field(None, description="Caption text (image, video, document)")
    filename: str | None = Field(None, description="Original filename (documents)")
    voice: bool | None = Field(None, description="True for voice notes (audio)")
    animated: bool | None = Field(None, description="True for animated stickers")

    @property
    def is_resolvable(self) -> bool:
        """Whether the reference carries an ID that a media lookup could use."""
        return bool(self.id)


class MediaInfo(WebhookModel):
    """Graph API response for ``GET /<media-id>``."""

    messaging_product: str | None = Field(None, description="Always 'whatsapp'")
    id: str | None = Field(None, description="Media asset ID")
    url: str | None = Field(
        None, description="Temporary download URL (requires the access token)"
    )
    mime_type: str | None = Field(None, description="MIME type of the media")
    sha256: str | None = Field(None, description="SHA256 hash of the media file")
    file_size: int | None = Field(None, description="File size in bytes")

    def matches(self, reference: MediaReference) -> bool:
        """Check that this lookup result describes ``reference``."""
        if self.id is None or self.id != reference.id:
            return False
        if self.sha256 and reference.sha256:
            return self.sha256 == reference.sha256
        return True
