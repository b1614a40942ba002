"""Render/poll loop driving the installer screens.

The loop is gated on input: each tick draws one frame, then waits for one
key with no timeout. The spinner only moves once a key has been processed,
so an idle terminal shows a frozen frame.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol

from .errors import InputReadError, RenderError
from .screens import Screen, ScreenContent, render
from .utils.layout_utils import StyledLine, footer_line, header_line
from .utils.state_utils import LoopState, advance_spinner, next_step

logger = logging.getLogger(__name__)

TICK_DELAY = 0.2  # seconds
ENTER_KEY = "enter"
QUIT_KEY = "q"


@dataclass(frozen=True)
class Frame:
    header: StyledLine
    content: ScreenContent
    footer: StyledLine


class LoopBackend(Protocol):
    @property
    def width(self) -> int: ...

    def draw(self, frame: Frame) -> None: ...

    async def read_key(self) -> str: ...


def apply_key(state: LoopState, key: str) -> bool:
    """Dispatch one key against `state`. Returns True when the loop should stop."""
    if key == QUIT_KEY:
        return True
    if key == ENTER_KEY:
        next_step(state)
        logger.debug("advanced to %s", Screen.for_step(state.step).name)
    return False


def compose_frame(state, width):
    # Header and footer span the full width, not the bordered panel's inner width.
    return Frame(
        header=header_line(width),
        content=render(Screen.for_step(state.step), width),
        footer=footer_line(state.spinner_phase, width),
    )


class LoopController:
    """Owns the LoopState and runs ticks against a backend until quit."""

    def __init__(
        self,
        backend: LoopBackend,
        state: Optional[LoopState] = None,
        tick_delay: float = TICK_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.backend = backend
        self.state = state if state is not None else LoopState()
        self.tick_delay = tick_delay
        self._sleep = sleep

    def render_frame(self):
        frame = compose_frame(self.state, self.backend.width)
        try:
            self.backend.draw(frame)
        except Exception as exc:
            raise RenderError(f"failed to draw frame: {exc}") from exc

    async def next_key(self):
        try:
            return await self.backend.read_key()
        except Exception as exc:
            raise InputReadError(f"failed to read key: {exc}") from exc

    async def tick(self) -> bool:
        """Run one iteration. Returns False once the quit key was seen."""
        self.render_frame()
        key = await self.next_key()
        if apply_key(self.state, key):
            logger.debug("quit requested at step %d", self.state.step)
            return False
        advance_spinner(self.state)
        await self._sleep(self.tick_delay)
        return True

    async def run(self):
        while await self.tick():
            pass
        return self.state
