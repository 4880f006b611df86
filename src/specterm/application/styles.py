"""Style specifications: "style;color;background" → ANSI via rich.

Accepted shapes:
    "color"
    "style;color"
    "style;color;background"

Any segment may be empty. A lone token naming a style ("d") is a style.

Style tokens: n (normal), b (bold), d (dim), i (italic), u (underline),
bl (blink), r (reverse), h (hidden). Colors are names ("red", "bright_red", "light_red", "default") or numbers:
SGR codes 30-37/90-97 (foreground) and 40-47/100-107 (background), or
256-palette indexes otherwise.
"""

from __future__ import annotations

from functools import lru_cache

from rich.color import Color, ColorParseError, ColorSystem
from rich.style import Style

from specterm.domain.exceptions import StyleSpecError

_STYLES: dict[str, str | None] = {
    "n": None,
    "b": "bold",
    "d": "dim",
    "i": "italic",
    "u": "underline",
    "bl": "blink",
    "r": "reverse",
    "h": "conceal",
}


def _sgr_to_ansi(code: int) -> int | None:
    """Map an SGR color code to a 16-color palette index."""
    for base in (30, 40):
        if base <= code <= base + 7:
            return code - base
    for base in (90, 100):
        if base <= code <= base + 7:
            return code - base + 8
    return None


def _parse_color(token: str, spec: str) -> Color:
    if token.isdigit():
        code = int(token)
        ansi = _sgr_to_ansi(code)
        if ansi is not None:
            return Color.from_ansi(ansi)
        if code <= 255:
            return Color.from_ansi(code)
        raise StyleSpecError(spec=spec, token=token)
    name = token.lower().replace("light_", "bright_")
    try:
        return Color.parse(name)
    except ColorParseError:
        raise StyleSpecError(spec=spec, token=token) from None


@lru_cache(maxsize=128)
def parse_style(spec: str | None) -> Style:
    """Parse a style specification into a rich Style.

    Args:
        spec: Style specification. None or "" = no styling.

    Returns:
        rich Style (empty for plain text)

    Raises:
        StyleSpecError: If a token is not recognized
    """
    if not spec:
        return Style()
    parts = spec.split(";")
    if len(parts) > 3:
        raise StyleSpecError(spec=spec, token=";".join(parts[3:]))
    if len(parts) == 1:
        # A lone token is a style when it names one ("d"), a color otherwise.
        parts = [parts[0], "", ""] if parts[0].strip() in _STYLES else ["", parts[0], ""]
    parts += [""] * (3 - len(parts))
    style_token, color_token, background_token = (p.strip() for p in parts)

    attributes: dict[str, bool] = {}
    if style_token:
        if style_token not in _STYLES:
            raise StyleSpecError(spec=spec, token=style_token)
        attribute = _STYLES[style_token]
        if attribute is not None:
            attributes[attribute] = True

    color = _parse_color(color_token, spec) if color_token else None
    bgcolor = _parse_color(background_token, spec) if background_token else None
    return Style(color=color, bgcolor=bgcolor, **attributes)


def colorize(text: str, spec: str | None) -> str:
    """Wrap text in the ANSI sequences for spec.

    Raises:
        StyleSpecError: If spec contains an unknown token
    """
    return parse_style(spec).render(text, color_system=ColorSystem.STANDARD)
