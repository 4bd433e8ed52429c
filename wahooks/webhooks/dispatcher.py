"""
Variant classification for decoded webhook values.

Callers branch on a ``VariantReport`` instead of re-inspecting raw fields.
When a value carries both messages and statuses, both are reported and the
caller decides priority.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from wahooks.core.types import WebhookVariant
from wahooks.webhooks.whatsapp.base_models import MessageError
from wahooks.webhooks.whatsapp.message import Message
from wahooks.webhooks.whatsapp.status_models import StatusUpdate
from wahooks.webhooks.whatsapp.webhook_container import Change, Entry, Value, WebhookPayload


@dataclass(frozen=True)
class VariantReport:
    """Which known variants a value carries, with their items."""

    messages: tuple[Message, ...] = ()
    statuses: tuple[StatusUpdate, ...] = ()
    errors: tuple[MessageError, ...] = ()
    variants: frozenset[WebhookVariant] = field(default_factory=frozenset)

    @property
    def has_messages(self) -> bool:
        return WebhookVariant.MESSAGES in self.variants

    @property
    def has_statuses(self) -> bool:
        return WebhookVariant.STATUSES in self.variants

    @property
    def has_errors(self) -> bool:
        return WebhookVariant.ERRORS in self.variants

    @property
    def is_empty(self) -> bool:
        """No known variant is populated; the change is a no-op."""
        return not self.variants


@dataclass(frozen=True)
class ClassifiedChange:
    entry: Entry
    change: Change
    report: VariantReport


def classify_value(value: Value | None) -> VariantReport:
    """
    Report which of the known variants ``value`` carries.

    Args:
        value: Decoded change value; ``None`` is reported as empty

    Returns:
        VariantReport listing every populated variant
    """
    if value is None:
        return VariantReport()

    variants = set()
    if value.messages:
        variants.add(WebhookVariant.MESSAGES)
    if value.statuses:
        variants.add(WebhookVariant.STATUSES)
    if value.errors:
        variants.add(WebhookVariant.ERRORS)

    return VariantReport(
        messages=tuple(value.messages or ()),
        statuses=tuple(value.statuses or ()),
        errors=tuple(value.errors or ()),
        variants=frozenset(variants),
    )


def iter_changes(payload: WebhookPayload) -> Iterator[tuple[Entry, Change]]:
    """Yield (entry, change) pairs in delivery order."""
    return payload.iter_changes()


def classify_payload(payload: WebhookPayload) -> list[ClassifiedChange]:
    """Classify every change of a payload, preserving delivery order."""
    return [
        ClassifiedChange(entry=entry, change=change, report=classify_value(change.value))
        for entry, change in payload.iter_changes()
    ]
