"""Terminal UI module for diffscribe.

Provides a Textual-based TUI around the commit message generator.

Module structure (each module hides a design decision):
- models.py: Session state variants and the display rule
- controller.py: State transitions (generate / quit) and the view
- widgets.py: Message panel, hint line and log panel
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- config.py: Keys, fixed texts and log levels
- app.py: Application orchestration (key bindings, worker)
"""

from .app import DiffscribeApp, run_textual_tui
from .config import LogLevel
from .controller import InteractionController, render_view
from .models import Failure, Generating, Idle, SessionState, Success, displayed_message
from .widgets import DebugPanel, HintBar, MessagePanel

__all__ = [
    "DebugPanel",
    "DiffscribeApp",
    "Failure",
    "Generating",
    "HintBar",
    "Idle",
    "InteractionController",
    "LogLevel",
    "MessagePanel",
    "SessionState",
    "Success",
    "displayed_message",
    "render_view",
    "run_textual_tui",
]
