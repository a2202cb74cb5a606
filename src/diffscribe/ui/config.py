"""UI configuration constants.

Centralizes key bindings, fixed texts and log settings for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)

    @classmethod
    def choices(cls) -> list[str]:
        return list(cls._from_string)


# Keys
GENERATE_KEY = "enter"
QUIT_KEYS = "ctrl+c,escape"

# Fixed texts
APP_TITLE = "Diffscribe"
MESSAGE_PANEL_TITLE = "Commit message"
HINT_TEXT = "(press enter to generate, ctrl+c to quit)"
GENERATING_PLACEHOLDER = "Generating…"

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
LOG_MAX_LINES = 1000  # Lines kept by the log panel

# Notification timeouts (seconds)
NOTIFY_TIMEOUT = 3
NOTIFY_ERROR_TIMEOUT = 5
