"""
ft_logging Configuration

Reads output sink settings from environment variables.
"""

import os
import sys
from typing import TextIO


class LoggingConfig:
    """
    Configuration for the shared output sink from environment variables.

    Only the sink's decoration is configurable; the line format and the
    severity colors are fixed.
    """

    # Read environment variables at import time
    LOG_STREAM: str = os.getenv('FT_LOGGING_STREAM', 'stderr').lower()
    LOG_TIMESTAMPS: bool = os.getenv('FT_LOGGING_TIMESTAMPS', 'true').lower() == 'true'

    @classmethod
    def get_stream(cls) -> TextIO:
        """
        Resolve the configured stream name to a stream object.

        Returns:
            sys.stdout or sys.stderr (unknown names fall back to stderr)
        """
        streams = {
            'stdout': sys.stdout,
            'stderr': sys.stderr,
        }
        return streams.get(cls.LOG_STREAM, sys.stderr)
