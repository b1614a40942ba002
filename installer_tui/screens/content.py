from dataclasses import dataclass
from enum import Flag, IntEnum
from typing import Optional, Tuple

from ..utils.layout_utils import PLAIN, StyledLine


class Screen(IntEnum):
    WELCOME = 0
    LANGUAGE_SELECTION = 1
    COMPLETION = 2

    @classmethod
    def for_step(cls, step: int) -> "Screen":
        return cls(step % len(cls))


class Borders(Flag):
    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8
    ALL = TOP | BOTTOM | LEFT | RIGHT


@dataclass(frozen=True)
class LineSpec:
    """Declarative description of one content line, before centering."""
    text: str = ""
    color: str = PLAIN
    bold: bool = False


BLANK = LineSpec()


@dataclass(frozen=True)
class ScreenDef:
    title: str
    icon: str
    lines: Tuple[LineSpec, ...]
    borders: Borders = Borders.ALL


@dataclass(frozen=True)
class ScreenContent:
    lines: Tuple[StyledLine, ...]
    title: Optional[str] = None
    icon: Optional[str] = None
    borders: Borders = Borders.ALL
