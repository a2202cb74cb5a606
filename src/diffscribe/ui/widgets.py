"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Commit message rendering and state styling
- Log rendering, level filtering and scrolling
"""

from collections import deque
from datetime import datetime

from rich.markup import escape
from textual.widgets import RichLog, Static

from .config import (
    HINT_TEXT,
    LOG_MAX_LINES,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_PANEL_TITLE,
    LogLevel,
)
from .models import Failure, Generating, Idle, SessionState, Success, displayed_message


class MessagePanel(Static):
    """Shows the displayed message of the current session state."""

    BORDER_TITLE = MESSAGE_PANEL_TITLE

    STATE_LABELS = {
        Idle: "",
        Generating: "working",
        Success: "ready",
        Failure: "failed",
    }

    def __init__(self, **kwargs) -> None:
        # Generated text is shown verbatim, never parsed as markup
        super().__init__("", markup=False, **kwargs)
        self._text = ""

    @property
    def text(self) -> str:
        """The plain text currently shown."""
        return self._text

    def show_state(self, state: SessionState) -> None:
        """Render ``state`` and tag the panel with a matching CSS class."""
        self._text = displayed_message(state)
        self.set_class(isinstance(state, Generating), "-generating")
        self.set_class(isinstance(state, Failure), "-error")
        self.set_class(isinstance(state, Success), "-success")
        self.border_subtitle = self.STATE_LABELS[type(state)]
        self.update(self._text)


class HintBar(Static):
    """Static line listing the available actions."""

    def __init__(self, **kwargs) -> None:
        super().__init__(HINT_TEXT, markup=False, **kwargs)


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    DEFAULT_CSS = """
    DebugPanel {
        display: none;
    }
    """

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Git": "green",
        "LLM": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            max_lines=LOG_MAX_LINES,
            **kwargs
        )
        self._log_level = log_level
        self._entries: deque[str] = deque(maxlen=LOG_MAX_LINES)

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    @property
    def entries(self) -> list[str]:
        """Plain-text copies of the retained lines."""
        return list(self._entries)

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def write_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Git, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "…"

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_name = LogLevel.name(level)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self._entries.append(f"{timestamp} {level_name:<5} [{component}] {message}")
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.write_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.write_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.write_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.write_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
