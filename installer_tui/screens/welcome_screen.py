from ..utils.layout_utils import GRAY, LIGHT_GREEN, MAGENTA
from .content import BLANK, LineSpec, ScreenDef

WELCOME = ScreenDef(
    title="Welcome",
    icon="🌟",
    lines=(
        LineSpec("Welcome to EndeavourOS!", MAGENTA, bold=True),
        BLANK,
        LineSpec("This installer will guide you through the installation process.", GRAY),
        BLANK,
        LineSpec("Press 'Enter' to proceed to the next step.", LIGHT_GREEN),
    ),
)
