"""
Request context for log messages, propagated with contextvars.

The webhook controller sets the business account and sender while it routes
a change; every ContextLogger call in the same task picks them up.
"""

from contextvars import ContextVar

_account_context: ContextVar[str | None] = ContextVar("account_id", default=None)
_sender_context: ContextVar[str | None] = ContextVar("sender_id", default=None)


def set_request_context(
    account_id: str | None = None,
    sender_id: str | None = None,
) -> None:
    """
    Set the logging context for the current async context.

    Args:
        account_id: WhatsApp Business Account ID from the webhook entry
        sender_id: WhatsApp ID of the message sender or status recipient
    """
    if account_id is not None:
        _account_context.set(account_id)
    if sender_id is not None:
        _sender_context.set(sender_id)


def get_current_account_context() -> str | None:
    return _account_context.get()


def get_current_sender_context() -> str | None:
    return _sender_context.get()


def clear_request_context() -> None:
    """Reset both context variables (used between changes and in tests)."""
    _account_context.set(None)
    _sender_context.set(None)


def get_context_info() -> dict[str, str | None]:
    """Current context, for debugging."""
    return {
        "account_id": get_current_account_context(),
        "sender_id": get_current_sender_context(),
    }
