from ..utils.layout_utils import GRAY, LIGHT_CYAN, LIGHT_GREEN
from .content import BLANK, LineSpec, ScreenDef

COMPLETION = ScreenDef(
    title="Completion",
    icon="✅",
    lines=(
        LineSpec("Installation Complete! 🎉", LIGHT_GREEN, bold=True),
        BLANK,
        LineSpec("You can now restart your system and enjoy EndeavourOS.", GRAY),
        BLANK,
        LineSpec("Press 'Q' to exit.", LIGHT_CYAN),
    ),
)
