"""Static installer screens and the renderer that lays them out."""

from ..utils.layout_utils import center_line
from .completion_screen import COMPLETION
from .content import BLANK, Borders, LineSpec, Screen, ScreenContent, ScreenDef
from .language_screen import LANGUAGE_SELECTION
from .welcome_screen import WELCOME

SCREENS = {
    Screen.WELCOME: WELCOME,
    Screen.LANGUAGE_SELECTION: LANGUAGE_SELECTION,
    Screen.COMPLETION: COMPLETION,
}


def render(screen: Screen, width: int) -> ScreenContent:
    """Center every line of `screen` to `width` columns. Pure, no I/O."""
    definition = SCREENS[screen]
    lines = tuple(center_line(line.text, width, line.color, line.bold) for line in definition.lines)
    return ScreenContent(
        lines=lines,
        title=definition.title,
        icon=definition.icon,
        borders=definition.borders,
    )


def screen_title(content: ScreenContent) -> str:
    return " ".join(part for part in (content.icon, content.title) if part)


__all__ = [
    "BLANK",
    "Borders",
    "LineSpec",
    "SCREENS",
    "Screen",
    "ScreenContent",
    "ScreenDef",
    "render",
    "screen_title",
]
