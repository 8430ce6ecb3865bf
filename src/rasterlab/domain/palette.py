"""Named colors used by the demo scene and the CLI."""

from rasterlab.domain.primitives import Color
from rasterlab.exceptions import ColorError

BACKGROUND = Color(26, 32, 44)
AXIS = Color(74, 85, 104)
GREEN = Color(0, 255, 0)
YELLOW = Color(255, 255, 0)
BLUE = Color(59, 130, 246)
RED = Color(239, 68, 68)
WHITE = Color(255, 255, 255)
GRAY = Color(156, 163, 175)
PANEL = Color(31, 41, 55)

NAMED_COLORS: dict[str, Color] = {
    "background": BACKGROUND,
    "axis": AXIS,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "red": RED,
    "white": WHITE,
    "gray": GRAY,
    "panel": PANEL,
}


def color_by_name(name: str) -> Color:
    """Look up a palette color by name.

    Hex strings (#rrggbb) are accepted as well.

    Raises:
        ColorError: If the name is not in the palette
    """
    if name.startswith("#"):
        return Color.from_hex(name)
    try:
        return NAMED_COLORS[name.lower()]
    except KeyError:
        valid = ", ".join(NAMED_COLORS)
        raise ColorError(f"Unknown color '{name}' (valid: {valid})") from None
