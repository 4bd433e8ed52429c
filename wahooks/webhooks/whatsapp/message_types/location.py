"""
WhatsApp location message content.

Covers shared current locations as well as named business locations.
"""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class LocationContent(WebhookModel):
    """Location message content."""

    latitude: float | None = Field(None, description="Latitude coordinate")
    longitude: float | None = Field(None, description="Longitude coordinate")
    name: str | None = Field(None, description="Name or title of the location")
    address: str | None = Field(None, description="Human-readable address")
    url: str | None = Field(None, description="URL with more information")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinates(self) -> tuple[float, float] | None:
        """(latitude, longitude) when both are present."""
        if not self.has_coordinates:
            return None
        return (self.latitude, self.longitude)
