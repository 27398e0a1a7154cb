"""Display sinks the calculator writes its panel text into.

The calculator only ever calls set_text(); it never reads back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from rich.align import Align
from rich.console import Console
from rich.panel import Panel

from calcpanel.settings import PanelSettings


class Display(Protocol):
    def set_text(self, text: str) -> None: ...


@dataclass
class RecordingDisplay:
    """Keeps every text written to it. Starts out showing "0"."""

    texts: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.texts[-1] if self.texts else "0"

    def set_text(self, text: str) -> None:
        self.texts.append(text)


def render_panel(text: str, settings: PanelSettings) -> Panel:
    """A right-aligned calculator screen showing text."""
    return Panel(
        Align.right(f"[bold]{text}[/bold]"),
        width=settings.width,
        border_style=settings.style,
    )


class ConsoleDisplay:
    """Draws the panel to a rich Console on every update."""

    def __init__(self, console: Console, settings: Optional[PanelSettings] = None) -> None:
        self.console = console
        self.settings = settings or PanelSettings()
        self.text = "0"

    def set_text(self, text: str) -> None:
        self.text = text
        self.console.print(render_panel(text, self.settings))
