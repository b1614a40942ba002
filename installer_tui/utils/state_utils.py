from dataclasses import dataclass

STEP_COUNT = 3
SPINNER_PHASES = 4


@dataclass
class LoopState:
    """Mutable loop state; lives only as long as the process."""
    step: int = 0
    spinner_phase: int = 0


def next_step(state):
    state.step = (state.step + 1) % STEP_COUNT


def advance_spinner(state):
    state.spinner_phase = (state.spinner_phase + 1) % SPINNER_PHASES
