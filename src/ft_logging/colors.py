"""
ft_logging Color Table

Fixed mapping from log severity to the ANSI escape sequence used to paint
its level tag.
"""

from enum import Enum
from typing import Dict

from colorama import Fore, Style


class Severity(str, Enum):
    """The three severities a ColorLogger can emit."""

    INFO = "INFO"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


COLOR_RESET: str = Style.RESET_ALL

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.INFO: Fore.WHITE,
    Severity.SUCCESS: Fore.GREEN,
    Severity.ERROR: Fore.RED,
}


def color_for(severity: Severity) -> str:
    """Return the ANSI color code for a severity."""
    return SEVERITY_COLORS[Severity(severity)]
