from dataclasses import dataclass

from rich.style import Style
from rich.text import Text

HEADER_TEXT = "🚀 EndeavourOS Installer"
SPINNER_FRAMES = ("|", "/", "-", "\\")

# Rich color names
PLAIN = "default"
GRAY = "grey70"
MAGENTA = "magenta"
CYAN = "cyan"
LIGHT_GREEN = "bright_green"
LIGHT_CYAN = "bright_cyan"


@dataclass(frozen=True)
class StyledLine:
    """A single line of text shifted right by `padding` spaces."""
    text: str
    padding: int = 0
    color: str = PLAIN
    bold: bool = False

    @property
    def plain(self):
        return " " * self.padding + self.text

    def to_text(self) -> Text:
        return Text(self.plain, style=Style(color=self.color, bold=self.bold))


def text_length(text: str) -> int:
    """Length as UTF-8 bytes; multi-byte glyphs count more than one column."""
    return len(text.encode("utf-8"))


def center_line(text: str, width: int, color=PLAIN, bold=False) -> StyledLine:
    """Offset `text` so it sits in the middle of `width` columns.

    Only leading spaces are added; an odd remainder leaves the text one
    column left of true center. A width narrower than the text gives no
    padding at all.
    """
    padding = max(0, width - text_length(text)) // 2
    return StyledLine(text=text, padding=padding, color=color, bold=bold)


def spinner_glyph(phase):
    return SPINNER_FRAMES[phase % len(SPINNER_FRAMES)]


def header_line(width):
    return center_line(HEADER_TEXT, width, LIGHT_CYAN, bold=True)


def footer_line(phase, width):
    return center_line(spinner_glyph(phase), width, GRAY)
