"""
Base event handler for decoded webhook changes.

Integrators subclass WebhookEventHandler and override the ``process_*``
hooks. The webhook controller calls the ``handle_*`` methods once per item,
in delivery order.
"""

from typing import TYPE_CHECKING

from wahooks.core.logging.logger import get_logger

if TYPE_CHECKING:
    from wahooks.webhooks.dispatcher import ClassifiedChange
    from wahooks.webhooks.whatsapp import Message, MessageError, StatusUpdate


class WebhookEventHandler:
    """
    Routes classified webhook changes to overridable hooks.

    Every ``process_*`` hook defaults to a no-op, so an integrator only
    implements the variants they care about. Unknown variants go to
    ``process_unknown`` and are never treated as errors.
    """

    def __init__(self):
        # Logger named after the subclass module, not this base class
        self.logger = get_logger(self.__class__.__module__)

    async def handle_message(self, message: "Message", change: "ClassifiedChange") -> None:
        """Log data-quality problems, then hand the message to ``process_message``."""
        if not message.is_consistent:
            self.logger.warning(
                f"Message {message.id} has type '{message.type}' but carries "
                f"{list(message.populated_content_fields)}"
            )
        self.logger.debug(f"Incoming {message.type} message {message.id}")
        await self.process_message(message, change)

    async def process_message(self, message: "Message", change: "ClassifiedChange") -> None:
        """Process an incoming message. Override in subclasses."""
        pass

    async def handle_status(self, status: "StatusUpdate", change: "ClassifiedChange") -> None:
        if status.is_failed:
            error = status.primary_error
            self.logger.warning(
                f"Message {status.id} failed: "
                f"{error.code if error else '?'} {error.title if error else ''}".rstrip()
            )
        else:
            self.logger.debug(f"Message {status.id} is {status.status}")
        await self.process_status(status, change)

    async def process_status(self, status: "StatusUpdate", change: "ClassifiedChange") -> None:
        """Process a status update. Override in subclasses."""
        pass

    async def handle_error(self, error: "MessageError", change: "ClassifiedChange") -> None:
        self.logger.error(f"Webhook error {error.code}: {error.title} ({error.details})")
        await self.process_error(error, change)

    async def process_error(self, error: "MessageError", change: "ClassifiedChange") -> None:
        """Process a webhook-level error. Override in subclasses."""
        pass

    async def handle_unknown(self, change: "ClassifiedChange") -> None:
        self.logger.debug(
            f"No known variant in change for field '{change.change.field}', ignoring"
        )
        await self.process_unknown(change)

    async def process_unknown(self, change: "ClassifiedChange") -> None:
        """Process a change with no known variant. Override in subclasses."""
        pass

    async def dispatch(self, change: "ClassifiedChange") -> None:
        """Route every item of a classified change, messages first."""
        report = change.report
        if report.is_empty:
            await self.handle_unknown(change)
            return
        for message in report.messages:
            await self.handle_message(message, change)
        for status in report.statuses:
            await self.handle_status(status, change)
        for error in report.errors:
            await self.handle_error(error, change)
