from ..utils.layout_utils import CYAN, GRAY, LIGHT_GREEN
from .content import BLANK, LineSpec, ScreenDef

SELECTED_MARKER = "→ "
UNSELECTED_MARKER = "  "

# The first entry is always the marked one; arrow keys are not wired up.
LANGUAGES = ("English", "Français", "Español")


def _option(index: int, name: str) -> LineSpec:
    if index == 0:
        return LineSpec(SELECTED_MARKER + name, LIGHT_GREEN)
    return LineSpec(UNSELECTED_MARKER + name, GRAY)


LANGUAGE_SELECTION = ScreenDef(
    title="Language Selection",
    icon="🌐",
    lines=(
        LineSpec("Select your language:", CYAN, bold=True),
        BLANK,
        *(_option(i, name) for i, name in enumerate(LANGUAGES)),
        BLANK,
        LineSpec("Use arrow keys to navigate and 'Enter' to select.", GRAY),
    ),
)
