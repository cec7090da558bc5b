"""
ft_logging - Colorized Console Logging

Provides simple, colorized logging with three severities (Info in white,
Success in green, Error in red) and optional extraction of request context
values into each line.
"""

from .colors import Severity, COLOR_RESET, SEVERITY_COLORS, color_for
from .context import RequestContext, extract_context_info, lookup_value
from .formatter import format_line
from .config import LoggingConfig
from .output import OutputSink, get_output, set_output, redirect_output
from .logger import Logger, ColorLogger, create_logger
from .middleware import LogContextMiddleware, get_log_context

__all__ = [
    'Severity',
    'COLOR_RESET',
    'SEVERITY_COLORS',
    'color_for',
    'RequestContext',
    'extract_context_info',
    'lookup_value',
    'format_line',
    'LoggingConfig',
    'OutputSink',
    'get_output',
    'set_output',
    'redirect_output',
    'Logger',
    'ColorLogger',
    'create_logger',
    'LogContextMiddleware',
    'get_log_context',
]
