"""
ft_logging Logger

Colorized console logger with three fixed severities and configurable
extraction of request context values.
"""

from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .colors import Severity, color_for
from .context import extract_context_info
from .formatter import format_line
from .output import get_output


@runtime_checkable
class Logger(Protocol):
    """
    Protocol for severity-tagged loggers.

    Every operation takes the caller's context lookup (may be None) and an
    opaque message, writes exactly one line, and never raises for a missing
    context or an unresolved key.
    """

    def info(self, context: Any, message: str) -> None:
        """Log an informational message in white."""
        ...

    def success(self, context: Any, message: str) -> None:
        """Log a success message in green."""
        ...

    def error(self, context: Any, message: str) -> None:
        """Log an error message in red."""
        ...


class ColorLogger:
    """
    Logger implementation writing colorized lines to the shared output sink.

    Attributes:
        context_keys: Ordered context keys to extract, or None when none were given
    """

    def __init__(self, context_keys: Optional[Sequence[str]] = None):
        """
        Initialize the logger and announce its configuration.

        Args:
            context_keys: Ordered context keys to extract and log
                (None or empty disables extraction)

        Raises:
            TypeError: If context_keys is a string or holds a non-string key
        """
        self.context_keys: Optional[Tuple[str, ...]] = _normalize_keys(context_keys)

        if not self.context_keys:
            get_output().write("[ft_logging] Initialized with no context extraction")
        else:
            get_output().write(
                f"[ft_logging] Initialized with context keys: [{', '.join(self.context_keys)}]"
            )

    def info(self, context: Any, message: str) -> None:
        """Log an informational message in white."""
        self.log_with_color(context, color_for(Severity.INFO), Severity.INFO.value, message)

    def success(self, context: Any, message: str) -> None:
        """Log a success message in green."""
        self.log_with_color(context, color_for(Severity.SUCCESS), Severity.SUCCESS.value, message)

    def error(self, context: Any, message: str) -> None:
        """Log an error message in red."""
        self.log_with_color(context, color_for(Severity.ERROR), Severity.ERROR.value, message)

    def log_with_color(self, context: Any, color: str, level: str, message: str) -> None:
        """
        Format a message with its context values and write it.

        Args:
            context: Context lookup for value extraction (may be None)
            color: ANSI color code for the level tag
            level: Level label (INFO, SUCCESS, ERROR)
            message: Message text, written verbatim
        """
        context_info = extract_context_info(self.context_keys, context)
        get_output().write(format_line(color, level, message, context_info))

    def __repr__(self) -> str:
        return f"ColorLogger(context_keys={self.context_keys!r})"


def _normalize_keys(context_keys: Optional[Sequence[str]]) -> Optional[Tuple[str, ...]]:
    if context_keys is None:
        return None
    if isinstance(context_keys, (str, bytes)):
        raise TypeError(
            f"context_keys must be a sequence of strings, not {type(context_keys).__name__}"
        )

    keys = tuple(context_keys)
    for key in keys:
        if not isinstance(key, str):
            raise TypeError(f"Context key must be a string, got {type(key).__name__}: {key!r}")
    return keys


def create_logger(context_keys: Optional[Sequence[str]] = None) -> Logger:
    """
    Create a logger with optional context keys to extract.

    Args:
        context_keys: Ordered context keys to extract and log
            (pass None or an empty list if not needed)

    Returns:
        Logger implementation

    Example:
        >>> logger = create_logger(["request_id", "user_id", "trace_id"])
        >>> logger.info({"request_id": "abc123"}, "Request accepted")
    """
    return ColorLogger(context_keys)
