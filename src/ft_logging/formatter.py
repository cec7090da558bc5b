"""
ft_logging Line Formatter

Builds the single text line written for each log call.
"""

from .colors import COLOR_RESET


def format_line(color: str, level: str, message: str, context_info: str = "") -> str:
    """
    Format a colorized log line.

    The reset code follows the level tag directly. The context section is
    appended only when ``context_info`` is non-empty, so a line never ends in
    ``{}`` or trailing whitespace.

    Args:
        color: ANSI color code for the level tag
        level: Level label (INFO, SUCCESS, ERROR)
        message: Message text, written verbatim
        context_info: Rendered context pairs (may be empty)

    Returns:
        The formatted line, without a trailing newline
    """
    context_part = f" {{{context_info}}}" if context_info else ""
    return f"{color}[{level}]{COLOR_RESET} {message}{context_part}"
