"""
Rich-based logger with business account and sender context.

Provides context-aware logging for webhook processing: messages logged while
a change is being routed are prefixed with the account and sender IDs.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wahooks.core.config.settings import settings

from .context import get_current_account_context, get_current_sender_context


class CompactFormatter(logging.Formatter):
    """Formatter that shortens long module names for better readability."""

    def format(self, record):
        # wahooks.api.controllers.webhook_controller -> controllers.webhook_controller
        if record.name.startswith("wahooks."):
            parts = record.name.split(".")
            if len(parts) > 2:
                record.name = ".".join(parts[-2:])
        return super().format(record)


_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
    }
)
_console = Console(theme=_theme)


class ContextLogger:
    """
    Logger wrapper that adds account and sender context to messages.

    Context is added as a message prefix instead of a format string field, so
    any handler configuration works unchanged.
    """

    def __init__(
        self,
        logger: logging.Logger,
        account_id: str | None = None,
        sender_id: str | None = None,
    ):
        self.logger = logger
        self.account_id = account_id or "---"
        self.sender_id = sender_id or "---"

    def _format_message(self, message: str) -> str:
        """Add context prefix to message."""
        # Read context variables on every call so the prefix follows the request
        account = get_current_account_context() or self.account_id
        sender = get_current_sender_context() or self.sender_id

        prefix = ""
        if account and account != "---":
            prefix += f"[A:{account}]"
        if sender and sender != "---":
            prefix += f"[U:{sender}]"
        return f"{prefix} {message}" if prefix else message

    def debug(self, message: str, *args, **kwargs) -> None:
        self.logger.debug(self._format_message(message), *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(self._format_message(message), *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.logger.error(self._format_message(message), *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        self.logger.exception(self._format_message(message), *args, **kwargs)

    def bind(self, **kwargs) -> ContextLogger:
        """
        Create a new ContextLogger with additional or updated context.

        Example:
            account_logger = logger.bind(account_id="102290129340398")
        """
        return ContextLogger(
            self.logger,
            account_id=kwargs.get("account_id", self.account_id),
            sender_id=kwargs.get("sender_id", self.sender_id),
        )


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Initialize the root logger with Rich formatting.

    Parameters
    ----------
    level : str
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
    mode : str
        "DEV" creates daily log files + console; anything else → console only
    log_dir : str, optional
        Directory for log files (DEV mode only)
    console_fmt : str, optional
        Console format string
    file_fmt : str, optional
        File format string
    """
    lvl = level.upper()
    lvl = lvl if lvl in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"

    # RichHandler already shows level and time
    console_format = console_fmt or "[%(name)s] %(message)s"
    file_format = file_fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    rich_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    rich_handler.setFormatter(CompactFormatter(console_format))

    handlers: list[logging.Handler] = [rich_handler]

    if mode.upper() == "DEV" and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, f"wahooks_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(CompactFormatter(file_format))
        handlers.append(file_handler)

    logging.basicConfig(level=lvl, handlers=handlers, force=True)
    logging.getLogger("wahooks.setup").info(f"Logging initialized ({lvl}, {mode})")


def setup_app_logging() -> None:
    """
    Initialize logging from the environment settings.

    Call once during application startup, e.g. in a FastAPI lifespan.
    """
    setup_logging(
        level=settings.log_level,
        mode="DEV" if settings.is_development else "PROD",
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str) -> ContextLogger:
    """
    Get a logger that picks up account and sender from the request context.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextLogger instance
    """
    return ContextLogger(
        logging.getLogger(name),
        account_id=get_current_account_context(),
        sender_id=get_current_sender_context(),
    )
