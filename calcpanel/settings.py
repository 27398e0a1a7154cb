"""Panel settings read from the environment.

    CALCPANEL_WIDTH   panel width in characters (default 24)
    CALCPANEL_STYLE   rich border style for the panel (default "green")

CLI options override both. Unusable env values fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rich.errors import StyleSyntaxError
from rich.style import Style

DEFAULT_WIDTH = 24
DEFAULT_STYLE = "green"
# Narrower than this and the panel border eats the digits
MIN_WIDTH = 8


@dataclass(frozen=True)
class PanelSettings:
    """How the display panel is drawn."""

    width: int = DEFAULT_WIDTH
    style: str = DEFAULT_STYLE


def _parse_width(raw: Optional[str]) -> int:
    """Width from an env string. Non-numbers fall back to the default; small values are clamped."""
    if not raw:
        return DEFAULT_WIDTH
    try:
        width = int(raw)
    except ValueError:
        return DEFAULT_WIDTH
    return max(width, MIN_WIDTH)


class InvalidStyleError(ValueError):
    """A border style rich cannot parse."""


def is_valid_style(style: str) -> bool:
    """True if rich can parse style (e.g. "green", "bold blue", "#ff8800")."""
    try:
        Style.parse(style)
    except StyleSyntaxError:
        return False
    return True


def _parse_style(raw: Optional[str]) -> str:
    """Style from an env string; anything rich cannot parse falls back to the default."""
    if not raw or not is_valid_style(raw):
        return DEFAULT_STYLE
    return raw


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    width: Optional[int] = None,
    style: Optional[str] = None,
) -> PanelSettings:
    """Build PanelSettings from env vars, then apply explicit overrides.

    Args:
        env: Environment mapping. Defaults to os.environ.
        width: Override for CALCPANEL_WIDTH.
        style: Override for CALCPANEL_STYLE.

    Raises:
        InvalidStyleError: the style override is not a rich style.
    """
    env = os.environ if env is None else env
    if style and not is_valid_style(style):
        raise InvalidStyleError(f"Invalid panel style: {style!r}")
    return PanelSettings(
        width=max(width, MIN_WIDTH) if width is not None else _parse_width(env.get("CALCPANEL_WIDTH")),
        style=style or _parse_style(env.get("CALCPANEL_STYLE")),
    )
