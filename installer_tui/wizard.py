#!/usr/bin/env python3
import asyncio
import logging
import sys
from typing import Optional

from rich.text import Text
from textual import events, work
from textual.app import App, ComposeResult
from textual.widgets import Static

from .controller import TICK_DELAY, Frame, LoopController
from .errors import InstallerError, TerminalSetupError
from .screens import Borders, ScreenContent, screen_title

logger = logging.getLogger(__name__)

# CSS class on the content panel -> edge it turns on
EDGES = {
    "edge-top": Borders.TOP,
    "edge-bottom": Borders.BOTTOM,
    "edge-left": Borders.LEFT,
    "edge-right": Borders.RIGHT,
}


class WizardBackend:
    """Draws frames into the wizard's widgets and hands over one key per read."""

    def __init__(self, app):
        self.app = app
        self._pending: Optional[asyncio.Future] = None

    @property
    def width(self):
        return self.app.size.width

    @property
    def waiting(self):
        return self._pending is not None and not self._pending.done()

    def draw(self, frame: Frame):
        self.app.query_one("#header", Static).update(frame.header.to_text())
        self._draw_content(frame.content)
        self.app.query_one("#footer", Static).update(frame.footer.to_text())

    def _draw_content(self, content: ScreenContent):
        panel = self.app.query_one("#content", Static)
        for name, edge in EDGES.items():
            panel.set_class(edge in content.borders, name)
        panel.border_title = screen_title(content)
        panel.update(Text("\n").join(line.to_text() for line in content.lines))

    async def read_key(self) -> str:
        self._pending = asyncio.get_running_loop().create_future()
        try:
            return await self._pending
        finally:
            self._pending = None

    def feed(self, key: str) -> bool:
        """Deliver `key` to a waiting read. Returns False if nobody was waiting."""
        if not self.waiting:
            return False
        self._pending.set_result(key)
        return True


class InstallerWizard(App, inherit_bindings=False):
    """Installer mockup: header, screen panel and spinner footer.

    Only Enter and q mean anything, so Textual's own app bindings
    (ctrl+q, ctrl+c, the ctrl+p command palette) are switched off.
    """
    CSS = """
    #header {
        height: 10%;
        border-bottom: solid white;
    }
    #content {
        height: 75%;
    }
    #content.edge-top { border-top: solid $foreground; }
    #content.edge-bottom { border-bottom: solid $foreground; }
    #content.edge-left { border-left: solid $foreground; }
    #content.edge-right { border-right: solid $foreground; }
    #footer {
        height: 15%;
        border-top: solid white;
    }
    """
    TITLE = "EndeavourOS Installer"
    BINDINGS = []
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, tick_delay=TICK_DELAY):
        super().__init__()
        self.backend = WizardBackend(self)
        self.controller = LoopController(self.backend, tick_delay=tick_delay)
        self.error: Optional[InstallerError] = None

    @property
    def state(self):
        return self.controller.state

    def compose(self) -> ComposeResult:
        yield Static(id="header")
        yield Static(id="content")
        yield Static(id="footer")

    def on_mount(self):
        self.drive()

    @work(exclusive=True)
    async def drive(self):
        try:
            await self.controller.run()
        except InstallerError as exc:
            logger.error("loop aborted: %s", exc)
            self.error = exc
            self.exit(return_code=1)
            return
        self.exit(return_code=0)

    def on_key(self, event: events.Key):
        event.stop()
        # Keys pressed while the loop sleeps are dropped, not queued.
        if not self.backend.feed(event.key):
            logger.debug("dropped key %r", event.key)


def require_terminal(stdin=None, stdout=None):
    """Raise TerminalSetupError unless both streams are interactive terminals."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    for name, stream in (("stdin", stdin), ("stdout", stdout)):
        if stream is None or not stream.isatty():
            raise TerminalSetupError(f"{name} is not an interactive terminal")


def run_wizard(tick_delay=TICK_DELAY):
    """Run the wizard until quit and return the final loop state."""
    require_terminal()
    app = InstallerWizard(tick_delay=tick_delay)
    try:
        app.run()
    except OSError as exc:
        raise TerminalSetupError(f"could not set up terminal: {exc}") from exc
    if app.error is not None:
        raise app.error
    return app.state
