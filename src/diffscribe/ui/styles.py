"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, variables, state classes.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Commit Message Panel
   ============================================ */
#message {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 1 2;
    overflow-y: auto;

    &.-generating {
        border: round $accent;
        color: $text-muted;
        text-style: italic;
    }

    &.-success {
        border: round $success 80%;
    }

    &.-error {
        border: round $error;
        color: $text-error;
    }
}

/* ============================================
   Hint Line
   ============================================ */
#hint {
    height: 1;
    padding: 0 2;
    color: $text-muted;
}

/* ============================================
   Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 14;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}
"""
