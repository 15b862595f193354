"""Colored console handler for interactive sessions."""

import logging
import os
import sys
from typing import Optional

from ..formatters import HumanFormatter


def stream_supports_color(stream) -> bool:
    """True for a TTY unless NO_COLOR is set or TERM is ``dumb``."""
    isatty = getattr(stream, 'isatty', None)
    if isatty is None or not isatty():
        return False
    if os.environ.get('NO_COLOR'):
        return False
    return os.environ.get('TERM', '') != 'dumb'


class ConsoleHandler(logging.StreamHandler):
    """Human-formatted stream handler, stderr and INFO by default."""

    def __init__(self, stream=None, use_colors: Optional[bool] = None, show_context: bool = True):
        stream = stream if stream is not None else sys.stderr
        super().__init__(stream)

        if use_colors is None:
            use_colors = stream_supports_color(stream)
        self.setFormatter(HumanFormatter(use_colors=use_colors, show_context=show_context))
        self.setLevel(logging.INFO)
