"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, footer)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Nord-inspired palette
NORD_FROST = Theme(
    name="nord-frost",
    primary="#88c0d0",      # Frost cyan - main accent
    secondary="#81a1c1",    # Frost blue
    accent="#ebcb8b",       # Aurora yellow - in-flight states
    foreground="#eceff4",   # Snow storm
    background="#242933",   # Below polar night
    success="#a3be8c",      # Aurora green
    warning="#d08770",      # Aurora orange
    error="#bf616a",        # Aurora red
    surface="#2e3440",      # Polar night
    panel="#3b4252",
    dark=True,
    variables={
        "border": "#4c566a",
        "border-blurred": "#434c5e",

        "scrollbar": "#434c5e",
        "scrollbar-hover": "#4c566a",
        "scrollbar-active": "#88c0d0",
        "scrollbar-background": "#2e3440",

        "footer-foreground": "#d8dee9",
        "footer-background": "#242933",
        "footer-key-foreground": "#ebcb8b",
        "footer-key-background": "#3b4252",
        "footer-description-foreground": "#d8dee9",

        "text-muted": "#7b88a1",
        "text-error": "#e07a84",
    },
)
