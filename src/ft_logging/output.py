"""
ft_logging Output Sink

The single process-wide text stream every ColorLogger writes to. Lines are
delivered through a private structlog logger so the application's own
structlog configuration is never touched.
"""

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, TextIO

import structlog
from colorama import just_fix_windows_console

from .config import LoggingConfig

# Layout of the standard log prefix: 2024/01/31 13:45:00
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


class OutputSink:
    """
    Line-oriented writer around a text stream.

    Each call to ``write`` emits the complete line, newline included, in a
    single locked write on the stream, so each line reaches the stream in
    one piece.

    Attributes:
        stream: Target text stream
        timestamps: Whether lines are prefixed with the local time
    """

    def __init__(self, stream: Optional[TextIO] = None, timestamps: bool = True):
        """
        Initialize the sink.

        Args:
            stream: Target text stream (defaults to the configured stream)
            timestamps: Prefix each line with the local time
        """
        self.stream = stream if stream is not None else LoggingConfig.get_stream()
        self.timestamps = timestamps

        processors = []
        if timestamps:
            processors.append(
                structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, utc=False)
            )
        processors.append(self.render_line)

        self._logger = structlog.wrap_logger(
            structlog.WriteLogger(file=self.stream),
            processors=processors,
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    @staticmethod
    def render_line(logger, method_name: str, event_dict: Dict[str, Any]) -> str:
        """
        Render the final text line.

        Args:
            logger: Logger instance
            method_name: Log method name
            event_dict: Event dictionary holding the line and optional timestamp

        Returns:
            The line, prefixed with its timestamp when one was added
        """
        timestamp = event_dict.get('timestamp')
        line = event_dict['event']
        if timestamp:
            return f"{timestamp} {line}"
        return line

    def write(self, line: str) -> None:
        """Write one complete line to the stream."""
        self._logger.msg(line)


_sink: Optional[OutputSink] = None
_sink_lock = threading.Lock()


def get_output() -> OutputSink:
    """
    Get the process-wide output sink, creating it on first use.

    Returns:
        The current OutputSink
    """
    global _sink
    with _sink_lock:
        if _sink is None:
            just_fix_windows_console()
            _sink = OutputSink(timestamps=LoggingConfig.LOG_TIMESTAMPS)
        return _sink


def set_output(stream: TextIO, timestamps: Optional[bool] = None) -> Optional[OutputSink]:
    """
    Point the process-wide sink at a new stream.

    Args:
        stream: Target text stream
        timestamps: Prefix lines with the local time (defaults to configuration)

    Returns:
        The previously installed sink (None if none was created yet)
    """
    global _sink
    if timestamps is None:
        timestamps = LoggingConfig.LOG_TIMESTAMPS
    sink = OutputSink(stream, timestamps=timestamps)
    with _sink_lock:
        previous = _sink
        _sink = sink
    return previous


def _restore_output(sink: Optional[OutputSink]) -> None:
    global _sink
    with _sink_lock:
        _sink = sink


@contextmanager
def redirect_output(stream: TextIO, timestamps: bool = False) -> Iterator[TextIO]:
    """
    Temporarily send all log lines to another stream.

    The previous sink is restored when the block exits, including when it
    raises.

    Args:
        stream: Target text stream, typically an io.StringIO in tests
        timestamps: Prefix lines with the local time

    Yields:
        The stream lines are being written to

    Example:
        >>> buffer = io.StringIO()
        >>> with redirect_output(buffer):
        ...     logger.info(None, "captured")
    """
    previous = set_output(stream, timestamps=timestamps)
    try:
        yield stream
    finally:
        _restore_output(previous)
