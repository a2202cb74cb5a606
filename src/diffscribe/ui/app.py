"""Main Textual TUI application.

Maps key presses onto the interaction controller and renders its state.
"""

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..generator import CommitMessageGenerator
from .config import (
    APP_TITLE,
    GENERATE_KEY,
    NOTIFY_ERROR_TIMEOUT,
    NOTIFY_TIMEOUT,
    QUIT_KEYS,
    LogLevel,
)
from .controller import InteractionController
from .models import Failure, Success
from .styles import APP_CSS
from .themes import NORD_FROST
from .widgets import DebugPanel, HintBar, MessagePanel


class DiffscribeApp(App):
    """Textual TUI for generating commit messages from staged changes."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding(GENERATE_KEY, "generate", "Generate", show=False, priority=True),
        Binding(QUIT_KEYS, "quit", "Quit", show=False, priority=True),
        Binding("ctrl+y", "copy_message", "Copy Message"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        generator: CommitMessageGenerator,
        model_name: str | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._generator = generator
        self._controller = InteractionController(generator)
        self._model_name = model_name or self._get_model_name()
        self._log_level = log_level

    def _get_model_name(self) -> str:
        llm = self._generator.llm
        if hasattr(llm, "model"):
            return llm.model
        return "unknown"

    @property
    def controller(self) -> InteractionController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield MessagePanel(id="message")
            yield HintBar(id="hint")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(NORD_FROST)
        self.theme = NORD_FROST.name
        self.sub_title = self._model_name

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._generator.set_debug_callback(self._route_debug)
        self._render_state()

    async def on_unmount(self) -> None:
        """Release the provider's HTTP client."""
        self._generator.set_debug_callback(None)
        await self._generator.llm.close()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route generator log entries to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.write_entry(component, message, LogLevel.from_string(level))

    def _render_state(self) -> None:
        self.query_one("#message", MessagePanel).show_state(self._controller.state)

    def action_generate(self) -> None:
        """Start a generation unless one is already running."""
        if not self._controller.begin_generation():
            self.query_one("#debug-panel", DebugPanel).debug(
                "TUI", "Generation already running; ignoring key"
            )
            return
        self._render_state()
        self._run_generation()

    @work(exclusive=True)
    async def _run_generation(self) -> None:
        """Run the generator as a background async worker."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.info("TUI", "Generating commit message")

        state = await self._controller.run_generation()
        self._render_state()

        if isinstance(state, Success):
            log_panel.info("TUI", "Commit message generated")
            self.notify("Commit message generated", timeout=NOTIFY_TIMEOUT)
        elif isinstance(state, Failure):
            log_panel.error("TUI", f"{state.error_type}: {state.description}")
            self.notify(
                f"{state.error_type}: {state.description[:50]}",
                severity="error",
                timeout=NOTIFY_ERROR_TIMEOUT,
            )

    async def action_quit(self) -> None:
        """Terminate the session and exit cleanly."""
        self._controller.quit()
        self.exit()

    def action_copy_message(self) -> None:
        """Copy the generated commit message to the clipboard."""
        state = self._controller.state
        if isinstance(state, Success) and state.text:
            self.copy_to_clipboard(state.text)
            self.notify("Commit message copied", timeout=2)
        else:
            self.notify("No commit message to copy", severity="warning", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


def run_textual_tui(
    generator: CommitMessageGenerator,
    model_name: str | None = None,
    log_level: str | None = None,
) -> int:
    """Run the Textual TUI until the user quits.

    Args:
        generator: Commit message generator driven by the UI
        model_name: Model shown in the header (defaults to the provider's model)
        log_level: Log level for panel (debug/info/warning/error), None to hide

    Returns:
        The app's return code (0 after a normal quit)
    """
    app = DiffscribeApp(
        generator=generator,
        model_name=model_name,
        log_level=log_level,
    )
    app.run()
    return app.return_code or 0
