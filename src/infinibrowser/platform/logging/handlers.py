"""Where: src/infinibrowser/platform/logging/handlers.py
What: Rich console handler rendering request lifecycle records.
Why: Keep request logs compact and scannable without changing call sites.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override
from urllib.parse import urlsplit

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class RequestRichHandler(RichHandler):
    """Rich handler that formats records tagged with a ``request_event`` extra."""

    _REQUEST_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "request.start": ("🌐", "cyan"),
        "request.success": ("✅", "green"),
        "request.not_ok": ("⚠️", "yellow"),
        "request.error": ("❌", "red"),
    }
    _LEVEL_STYLES: ClassVar[dict[int, str]] = {
        logging.DEBUG: "dim",
        logging.INFO: "white",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "bold red",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _short_url(url: str) -> str:
        """Drop scheme and host so only the endpoint path and query remain."""

        parts = urlsplit(url)
        if not parts.netloc:
            return url
        return f"{parts.path}?{parts.query}" if parts.query else parts.path or "/"

    def _render_request(self, record: logging.LogRecord, event: str) -> Text:
        icon, color = self._REQUEST_STYLES.get(event, ("•", "white"))
        text = Text()
        _ = text.append(f"{icon} ", style=color)

        method = getattr(record, "method", None)
        if method:
            _ = text.append(f"{method} ", style=f"bold {color}")

        url = getattr(record, "url", None)
        if url:
            _ = text.append(self._short_url(str(url)), style="white")

        status = getattr(record, "status", None)
        if status is not None:
            _ = text.append(f" [{status}]", style=color)

        error_code = getattr(record, "error_code", None)
        if error_code:
            _ = text.append(f" {error_code}", style=f"bold {color}")

        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            _ = text.append(f" ({duration_ms:.1f} ms)", style="dim")

        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "request_event", None)
        if isinstance(event, str):
            return self._render_request(record, event)
        style = self._LEVEL_STYLES.get(record.levelno, "white")
        return Text(message, style=style)


__all__ = ["RequestRichHandler"]
