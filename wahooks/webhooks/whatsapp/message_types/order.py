"""WhatsApp order message content (catalog checkouts)."""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class OrderProductItem(WebhookModel):
    product_retailer_id: str | None = Field(None, description="Product ID from the catalog")
    quantity: int | None = Field(None, description="Quantity ordered")
    item_price: float | None = Field(None, description="Individual product price")
    currency: str | None = Field(None, description="Currency code (e.g., 'USD')")


class OrderContent(WebhookModel):
    """Order message content."""

    catalog_id: str | None = Field(None, description="Product catalog ID")
    text: str | None = Field(None, description="Text accompanying the order")
    product_items: list[OrderProductItem] | None = Field(
        None, description="Ordered products"
    )

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity or 0 for item in self.product_items or [])
