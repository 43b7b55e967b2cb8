"""Rich console handler that renders structured processing events.

Where: platform/logging/handlers.py
What: Format bundle and file processing events with icons and compact paths.
Why: Keep console rendering separate from logger setup.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ProcessingRichHandler(RichHandler):
    """Rich handler that styles ``processing_event`` records."""

    _PROCESSING_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "processing.run.start": ("🚀", "cyan"),
        "processing.run.complete": ("🏁", "green"),
        "processing.bundle.start": ("📂", "cyan"),
        "processing.bundle.skip": ("↪️", "yellow"),
        "processing.bundle.complete": ("✅", "green"),
        "processing.bundle.error": ("❌", "red"),
        "processing.bundle.rename": ("📦", "magenta"),
        "processing.file.match": ("🎯", "green"),
        "processing.file.plan": ("🎧", "blue"),
        "processing.file.success": ("🎉", "green"),
        "processing.file.error": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` with at most the last few segments and colored separators."""

        parts = [part for part in PurePosixPath(path.replace("\\", "/")).parts if part != "/"]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT :]
        display = "/".join(parts) or "."
        if truncated:
            display = "…/" + display
        elif path.startswith("/"):
            display = "/" + display

        text = Text()
        for char in display:
            color = "magenta" if char in {"/", "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_processing_message(self, record: logging.LogRecord, message: str) -> Text | None:
        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PROCESSING_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("processing.bundle"):
            label = {
                "processing.bundle.start": "Processing",
                "processing.bundle.skip": "Skipped",
                "processing.bundle.complete": "Completed",
                "processing.bundle.error": "Bundle error",
                "processing.bundle.rename": "Rename",
            }.get(event, "Bundle")
            _ = body.append(f"{label} ")
            directory = getattr(record, "directory", None)
            if directory:
                _ = body.append_text(self._format_path(str(directory)))
            target = getattr(record, "target_path", None)
            if target:
                _ = body.append(" → ")
                _ = body.append_text(self._format_path(str(target)))
            details: list[str] = []
            for key in ("total_files", "failed", "reason", "error_message"):
                value = getattr(record, key, None)
                if value not in (None, ""):
                    details.append(f"{key}={value}")
            if getattr(record, "dry_run", False):
                details.append("dry-run")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        elif event.startswith("processing.file"):
            source = getattr(record, "source_path", None)
            if source:
                _ = body.append_text(self._format_path(str(source)))
            if event == "processing.file.error":
                error_message = getattr(record, "error_message", None)
                if error_message:
                    _ = body.append(f" ({error_message})")
            else:
                changes = getattr(record, "changes", None)
                if isinstance(changes, list):
                    for change in changes:
                        _ = body.append(f"\n  * {change}")
        else:
            _ = body.append(message)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for processing events."""

        processing_text = self._render_processing_message(record, message)
        if processing_text is not None:
            return processing_text
        return super().render_message(record, message)


__all__ = ["ProcessingRichHandler"]
