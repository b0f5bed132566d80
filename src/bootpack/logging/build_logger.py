"""Structured build logging for bootpack."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import click


class BuildLogger:
    """Terminal logger that mirrors every message into a JSONL event log.

    Messages go to the terminal through click. When ``log_file`` is set,
    each message is also appended as one JSON record so a build can be
    audited afterwards.
    """

    def __init__(
        self,
        log_file: Path | str | None = None,
        debug: bool = False,
        build_id: str | None = None,
    ):
        self.build_id = build_id or datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_") + uuid.uuid4().hex[:8]
        self.debug_enabled = debug
        self._log_file = Path(log_file) if log_file else None
        if self._log_file:
            self._log_file.parent.mkdir(parents=True, exist_ok=True)

    def log(self, level: str, message: str, data: dict[str, Any] | None = None) -> None:
        """Append a structured event to the log file, if one is configured."""
        if self._log_file is None:
            return
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "build_id": self.build_id,
            "level": level,
            "message": message,
            **(data or {}),
        }
        with open(self._log_file, "a") as f:
            f.write(json.dumps(record) + "\n")

    def title(self, name: str, version: str | None = None) -> None:
        """Print a section header."""
        text = f"{name} {version}" if version else name
        click.echo(click.style(text, bold=True))
        self.log("title", text)

    def info(self, message: str, **data: Any) -> None:
        click.echo(f"  {message}")
        self.log("info", message, data)

    def warning(self, message: str, **data: Any) -> None:
        click.echo(click.style(f"  WARNING: {message}", fg="yellow"), err=True)
        self.log("warning", message, data)

    def debug(self, message: str, **data: Any) -> None:
        if not self.debug_enabled:
            return
        click.echo(click.style(f"  {message}", dim=True), err=True)
        self.log("debug", message, data)
