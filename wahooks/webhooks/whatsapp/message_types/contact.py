"""
WhatsApp contacts message content.

A contacts message shares one or more vCard-like cards. Only ``name`` is
documented as always present, but every key is optional here.
"""

from pydantic import Field

from wahooks.webhooks.whatsapp.base_models import WebhookModel


class ContactAddress(WebhookModel):
    street: str | None = Field(None, description="Street address")
    city: str | None = Field(None, description="City name")
    state: str | None = Field(None, description="State or province")
    zip: str | None = Field(None, description="ZIP or postal code")
    country: str | None = Field(None, description="Country name")
    country_code: str | None = Field(None, description="Country code (e.g., 'US')")
    type: str | None = Field(None, description="Address type (e.g., 'HOME', 'WORK')")


class ContactEmail(WebhookModel):
    email: str | None = Field(None, description="Email address")
    type: str | None = Field(None, description="Email type (e.g., 'HOME', 'WORK')")


class ContactName(WebhookModel):
    formatted_name: str | None = Field(None, description="Full formatted name")
    first_name: str | None = Field(None, description="First name")
    last_name: str | None = Field(None, description="Last name")
    middle_name: str | None = Field(None, description="Middle name")
    suffix: str | None = Field(None, description="Name suffix (e.g., 'Jr.')")
    prefix: str | None = Field(None, description="Name prefix (e.g., 'Dr.')")


class ContactOrganization(WebhookModel):
    company: str | None = Field(None, description="Company name")
    department: str | None = Field(None, description="Department")
    title: str | None = Field(None, description="Job title")


class ContactPhone(WebhookModel):
    phone: str | None = Field(None, description="Phone number")
    wa_id: str | None = Field(None, description="WhatsApp ID, if the number is on WhatsApp")
    type: str | None = Field(None, description="Phone type (e.g., 'CELL', 'WORK')")


class ContactUrl(WebhookModel):
    url: str | None = Field(None, description="URL")
    type: str | None = Field(None, description="URL type (e.g., 'HOME', 'WORK')")


class SharedContact(WebhookModel):
    """A single contact card shared in a contacts message."""

    name: ContactName | None = Field(None, description="Contact name information")
    birthday: str | None = Field(None, description="Birthday in YYYY-MM-DD format")
    addresses: list[ContactAddress] | None = Field(None, description="Postal addresses")
    emails: list[ContactEmail] | None = Field(None, description="Email addresses")
    org: ContactOrganization | None = Field(None, description="Organization details")
    phones: list[ContactPhone] | None = Field(None, description="Phone numbers")
    urls: list[ContactUrl] | None = Field(None, description="Website URLs")

    @property
    def whatsapp_ids(self) -> list[str]:
        """WhatsApp IDs of the shared phone numbers that are on WhatsApp."""
        return [phone.wa_id for phone in self.phones or [] if phone.wa_id]
