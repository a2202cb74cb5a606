"""Interaction controller.

Owns the session state and decides which transition an input triggers.
The Textual app only maps keys onto ``begin_generation``/``run_generation``
and ``quit``, then renders ``view()``.
"""

from ..errors import CommitMessageError
from ..generator import CommitMessageGenerator
from .config import HINT_TEXT
from .models import Failure, Generating, Idle, SessionState, Success, displayed_message


def render_view(state: SessionState) -> str:
    """Render the displayed message followed by the hint line."""
    return f"{displayed_message(state)}\n{HINT_TEXT}"


class InteractionController:
    """Single owner of the session state."""

    def __init__(self, generator: CommitMessageGenerator) -> None:
        self._generator = generator
        self._state: SessionState = Idle()
        self._terminated = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def terminated(self) -> bool:
        return self._terminated

    @property
    def is_generating(self) -> bool:
        return isinstance(self._state, Generating)

    def view(self) -> str:
        return render_view(self._state)

    def begin_generation(self) -> bool:
        """Enter the Generating state.

        Returns False (and leaves the state untouched) if a generation is
        already in flight or the session has terminated.
        """
        if self._terminated or self.is_generating:
            return False
        self._state = Generating()
        return True

    async def run_generation(self) -> SessionState:
        """Run the generator and replace the state with its outcome."""
        try:
            text = await self._generator.generate()
        except CommitMessageError as e:
            self._state = Failure(description=str(e), error_type=type(e).__name__)
        else:
            self._state = Success(text=text)
        return self._state

    async def generate(self) -> SessionState:
        """Handle a generate event end to end."""
        if not self.begin_generation():
            return self._state
        return await self.run_generation()

    def quit(self) -> None:
        """Handle a quit event."""
        self._terminated = True
