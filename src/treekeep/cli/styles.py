"""Centralized color and style management for the treekeep CLI.

Design Philosophy:
- Semantic color names (success, error, warning) rather than direct colors
- Rich console markup helpers for inline styling
- Every styled message goes to standard error; standard output is reserved
  for the placeholder listing so it can be piped
"""

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

# ============================================================================
# THEME CONFIGURATION
# ============================================================================


@dataclass
class ColorTheme:
    """Defines the color theme for the CLI."""

    # === FIXED STANDARD COLORS (UI Conventions) ===
    error: str = "#ff0000"
    warning: str = "#ffaa00"

    # === THEME COLORS ===
    primary: str = "#5F9EA0"
    success: str = "#7FB77E"
    accent: str = "#F0B8B8"
    command: str = "#9988A1"
    path: str = "#A2AE9D"
    info: str = "#9988A1"

    # === NEUTRAL COLORS ===
    text_secondary: str = "#888888"
    text_dim: str = "#666666"


def _build_rich_theme(theme: ColorTheme) -> Theme:
    """Build a Rich Theme from a ColorTheme."""
    return Theme(
        {
            # Status styles
            "success": f"bold {theme.success}",
            "error": f"bold {theme.error}",
            "warning": f"bold {theme.warning}",
            "info": f"bold {theme.info}",
            # Text styles
            "primary": f"bold {theme.primary}",
            "secondary": theme.text_secondary,
            "dim": theme.text_dim,
            # Component-specific styles
            "header": f"bold {theme.primary}",
            "label": "bold",
            "value": theme.success,
            "path": theme.path,
            "command": theme.command,
            "accent": theme.accent,
        }
    )


DEFAULT_THEME = ColorTheme()
treekeep_theme = _build_rich_theme(DEFAULT_THEME)

# ============================================================================
# CONSOLE INSTANCE
# ============================================================================

# Singleton console; stderr is looked up on every write, long paths are never wrapped
if sys.platform == "win32":
    console = Console(
        theme=treekeep_theme,
        stderr=True,
        soft_wrap=True,
        highlight=False,
        force_terminal=True,
        legacy_windows=False,
    )
else:
    console = Console(theme=treekeep_theme, stderr=True, soft_wrap=True, highlight=False)


# ============================================================================
# STYLE HELPERS
# ============================================================================


class Styles:
    """Style names defined in the Rich theme, for consistent markup."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    DIM = "dim"
    PRIMARY = "primary"
    HEADER = "header"
    LABEL = "label"
    VALUE = "value"
    PATH = "path"
    COMMAND = "command"
    ACCENT = "accent"


class Messages:
    """Pre-formatted message helpers for common patterns."""

    @staticmethod
    def success(text: str) -> str:
        """Format a success message with checkmark."""
        return f"[success]✓ {text}[/success]"

    @staticmethod
    def error(text: str) -> str:
        """Format an error message with X mark."""
        return f"[error]✗ {text}[/error]"

    @staticmethod
    def warning(text: str) -> str:
        """Format a warning message with warning symbol."""
        return f"[warning]⚠️  {text}[/warning]"

    @staticmethod
    def label_value(label: str, value: str) -> str:
        """Format a label-value pair."""
        return f"[label]{label}:[/label] [value]{value}[/value]"

    @staticmethod
    def path(text: str) -> str:
        """Format a file path."""
        return f"[path]{text}[/path]"
