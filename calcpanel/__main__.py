"""CLI for the calcpanel calculator.

Usage:
    python -m calcpanel buttons                    # Show available buttons
    python -m calcpanel press 1 + 4 x 3 =          # Replay clicks, show panel
    python -m calcpanel press 8 - 3 = 2 --trace    # Show every step
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calcpanel.buttons import BUTTON_LAYOUT, InvalidButtonError, accepted_tokens, parse_buttons
from calcpanel.display import ConsoleDisplay, RecordingDisplay, render_panel
from calcpanel.machine import Calculator
from calcpanel.settings import InvalidStyleError, load_settings

app = typer.Typer(
    name="calcpanel",
    help="Four-function button calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


@app.command("buttons")
def cmd_buttons() -> None:
    """Show every button on the panel."""
    table = Table(title="Calculator Buttons", show_header=True, header_style="bold")
    table.add_column("Button", style="green", min_width=12)
    table.add_column("Label", justify="center")
    table.add_column("Tokens", min_width=20)
    table.add_column("Action")

    for element_id, button in BUTTON_LAYOUT.items():
        table.add_row(
            element_id,
            button.label,
            " ".join(accepted_tokens(element_id)),
            button.kind.value,
        )

    console.print()
    console.print(table)
    console.print()


@app.command("press", context_settings={"ignore_unknown_options": True})
def cmd_press(
    tokens: List[str] = typer.Argument(help="Buttons to click in order (e.g. 1 + 4 x 3 =)"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the panel after every click"),
    width: Optional[int] = typer.Option(None, "--width", help="Panel width (overrides CALCPANEL_WIDTH)"),
    style: Optional[str] = typer.Option(None, "--style", help="Panel border style (overrides CALCPANEL_STYLE)"),
) -> None:
    """Replay a sequence of button clicks and show the final panel."""
    try:
        buttons = parse_buttons(tokens)
    except InvalidButtonError as e:
        console.print(f"[red]{escape(str(e))}[/red]. Run 'calcpanel buttons' for the list.")
        raise typer.Exit(1)

    try:
        settings = load_settings(width=width, style=style)
    except InvalidStyleError as e:
        console.print(f"[red]{escape(str(e))}[/red]. Use a rich style such as 'green' or 'bold blue'.")
        raise typer.Exit(1)

    # --trace draws the panel on every display update
    display = ConsoleDisplay(console, settings) if trace else RecordingDisplay()
    calc = Calculator(display)

    for i, (token, button) in enumerate(zip(tokens, buttons), start=1):
        calc.press(button)
        if trace:
            console.print(f"[dim]{i:>3}  {escape(token)}  {calc.state.mode.value}[/dim]")

    out.print(render_panel(calc.display_text, settings))


if __name__ == "__main__":
    app()
