"""Command line entry point using Typer."""
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..llm import DEFAULT_MODEL
from ..ui import LogLevel, run_textual_tui
from .providers import get_generator

# Load environment variables (OPENAI_API_KEY may live in .env)
load_dotenv()

app = typer.Typer(
    name="diffscribe",
    help="Generate a git commit message for the staged changes with an LLM",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"diffscribe {__version__}")
        raise typer.Exit()


def _validate_log_level(value: str | None) -> str | None:
    if value is not None and value.lower() not in LogLevel.choices():
        raise typer.BadParameter(f"must be one of: {', '.join(LogLevel.choices())}")
    return value


@app.command()
def run(
    model: str = typer.Option(
        DEFAULT_MODEL,
        "--model",
        "-m",
        envvar="OPENAI_CHAT_MODEL",
        help="Chat model used to write the message"
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        min=0.1,
        help="Request timeout in seconds (default: no explicit timeout)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        callback=_validate_log_level,
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit"
    ),
):
    """Open the interactive UI: enter generates a message, ctrl+c quits."""
    generator = get_generator(model=model, timeout=timeout)

    try:
        return_code = run_textual_tui(generator, log_level=log_level)
    except Exception as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if return_code:
        err_console.print(f"[red]Error: terminal UI exited with code {return_code}[/red]")
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
