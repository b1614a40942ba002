class InstallerError(Exception):
    """Base class for every fatal installer-tui failure."""


class TerminalSetupError(InstallerError):
    """Raw mode or the alternate screen could not be entered."""


class RenderError(InstallerError):
    """The backend failed while drawing a frame."""


class InputReadError(InstallerError):
    """The backend failed while waiting for a key."""
