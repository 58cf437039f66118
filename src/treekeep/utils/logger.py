"""
Component Logger

Provides colored logging for treekeep components with:
- One API for every component (synchronizer, scaffold, CLI)
- Rich terminal output with component-specific colors
- Output bound to standard error, so standard output carries only results
- Graceful fallbacks when configuration is unavailable

Usage:
    logger = get_logger("synchronizer")
    logger.key_info("Synchronizing models/resnet")
    logger.info("Created models/resnet/.gitkeep")
    logger.debug("Visiting models/resnet/checkpoints")
    logger.success("Tree synchronized")
    logger.warning("Skipping unreadable directory")
    logger.error("Cannot create marker")
    logger.timing("Synchronization took 0.02 seconds")

    # Custom loggers with explicit parameters
    logger = get_logger(name="custom_component", color="blue")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from treekeep.utils.config import get_config_value


class ComponentLogger:
    """
    Rich-formatted logger for treekeep components with color coding.

    Message Types:
    - key_info: Important operational information
    - info: Normal operational messages
    - debug: Detailed tracing information
    - warning: Warning messages
    - error: Error messages
    - success: Success messages
    - timing: Timing information
    """

    def __init__(self, base_logger: logging.Logger, component_name: str, color: str = "white"):
        """
        Initialize component logger.

        Args:
            base_logger: Underlying Python logger
            component_name: Name of the component (e.g., 'synchronizer', 'scaffold')
            color: Rich color name for this component
        """
        self.base_logger = base_logger
        self.component_name = component_name
        self.color = color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        """Format message with Rich markup and emoji prefix."""
        prefix = f"{emoji}{self.component_name.title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def key_info(self, message: str) -> None:
        """Important operational information."""
        style = f"bold {self.color}" if self.color != "white" else "bold white"
        self.base_logger.info(self._format_message(message, style))

    def info(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str) -> None:
        style = f"dim {self.color}" if self.color != "white" else "dim white"
        self.base_logger.debug(self._format_message(message, style, "🔍 "))

    def warning(self, message: str) -> None:
        self.base_logger.warning(self._format_message(message, "bold yellow", "⚠️  "))

    def error(self, message: str, exc_info: bool = False) -> None:
        """Error message.

        Args:
            message: Error message
            exc_info: Whether to include exception traceback
        """
        self.base_logger.error(self._format_message(message, "bold red", "❌ "), exc_info=exc_info)

    def success(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))

    def timing(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, "bold white", "🕒 "))

    # Compatibility methods - delegate to base logger
    def exception(self, message: str, *args, **kwargs) -> None:
        self.base_logger.exception(self._format_message(message, "bold red", "❌ "), *args, **kwargs)

    def log(self, level: int, message: str, *args, **kwargs) -> None:
        self.base_logger.log(level, message, *args, **kwargs)

    @property
    def level(self) -> int:
        return self.base_logger.level

    @property
    def name(self) -> str:
        return self.base_logger.name

    def setLevel(self, level: int) -> None:
        self.base_logger.setLevel(level)

    def isEnabledFor(self, level: int) -> bool:
        return self.base_logger.isEnabledFor(level)


def _setup_rich_logging(level: int = logging.INFO) -> None:
    """Configure Rich logging for the root logger (called once)."""
    root_logger = logging.getLogger()

    # Prevent duplicate handler registration
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    root_logger.setLevel(level)

    try:
        # Hide locals by default so tracebacks never dump file contents
        rich_tracebacks = get_config_value("logging.rich_tracebacks", True)
        show_traceback_locals = get_config_value("logging.show_traceback_locals", False)
        show_full_paths = get_config_value("logging.show_full_paths", False)
    except Exception:
        rich_tracebacks = True
        show_traceback_locals = False
        show_full_paths = False

    # stderr keeps log records out of the placeholder listing on stdout
    console = Console(stderr=True, width=120)

    handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        markup=True,
        show_path=show_full_paths,
        show_time=True,
        show_level=True,
        tracebacks_show_locals=show_traceback_locals,
    )

    root_logger.addHandler(handler)


def set_log_level(level: int | str) -> None:
    """Set the level of the root logger, configuring Rich logging if needed.

    Args:
        level: A logging level number or name (e.g. ``"DEBUG"``)

    Raises:
        ValueError: If a level name is unknown
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved

    _setup_rich_logging(level)
    logging.getLogger().setLevel(level)


def get_logger(
    component_name: str = None,
    level: int = logging.INFO,
    *,
    name: str = None,
    color: str = None,
) -> ComponentLogger:
    """
    Get a component logger.

    Primary API:
        component_name: Component name (e.g., 'synchronizer', 'scaffold')
        level: Logging level used when Rich logging is first configured

    Explicit API (for custom loggers or tests):
        name: Direct logger name (keyword-only)
        color: Direct color specification (keyword-only)

    Returns:
        ComponentLogger instance

    Examples:
        logger = get_logger("synchronizer")
        logger.info("Created marker")

        logger = get_logger(name="test_logger", color="blue")
    """
    _setup_rich_logging(level)

    if name is not None:
        # Direct logger creation bypasses configured colors
        return ComponentLogger(logging.getLogger(name), name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    base_logger = logging.getLogger(component_name)

    try:
        color = get_config_value(f"logging.logging_colors.{component_name}") or "white"
    except Exception:
        color = "white"

    return ComponentLogger(base_logger, component_name, color)
