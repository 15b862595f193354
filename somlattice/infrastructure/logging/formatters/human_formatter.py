"""Console formatter: one readable line per record, optional ANSI colors."""

import logging
from datetime import datetime
from typing import Dict, Optional

LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '',
    'WARNING': '\033[93m',
    'ERROR': '\033[91m',
    'CRITICAL': '\033[95m',
}
RESET = '\033[0m'
DIM = '\033[2m'
BOLD = '\033[1m'


class HumanFormatter(logging.Formatter):
    """Format records as ``time level [logger] [run | map | op] message``.

    Performance data is appended on an indented second line, tracebacks
    after that.
    """

    def __init__(self, use_colors: bool = True, show_context: bool = True,
                 max_name_length: int = 20):
        super().__init__()
        self.use_colors = use_colors
        self.show_context = show_context
        self.max_name_length = max_name_length

    def _colorize(self, text: str, code: Optional[str]) -> str:
        if not self.use_colors or not code:
            return text
        return f"{code}{text}{RESET}"

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        level_color = LEVEL_COLORS.get(record.levelname)

        parts = [
            self._colorize(timestamp, DIM),
            self._colorize(f"{record.levelname:8}", level_color),
            self._colorize(f"[{self._short_name(record.name)}]", DIM),
        ]
        if self.show_context:
            context_str = self._format_context(getattr(record, 'context', None))
            if context_str:
                parts.append(self._colorize(context_str, BOLD))
        parts.append(record.getMessage())
        lines = [' '.join(parts)]

        perf_str = self._format_performance(getattr(record, 'performance', None))
        if perf_str:
            lines.append(self._colorize(f"  Performance: {perf_str}", DIM))

        tb = getattr(record, 'traceback', None)
        if tb:
            lines.extend(self._colorize(f"  {line}", level_color) for line in tb.rstrip().splitlines())

        return '\n'.join(lines)

    @staticmethod
    def _format_context(context: Optional[Dict]) -> str:
        if not context:
            return ''
        parts = []
        if context.get('run_id'):
            parts.append(f"run:{str(context['run_id'])[:8]}")
        if context.get('map_id'):
            parts.append(f"map:{context['map_id']}")
        if context.get('operation'):
            parts.append(f"op:{context['operation']}")
        return f"[{' | '.join(parts)}]" if parts else ''

    def _short_name(self, name: str) -> str:
        """Keep the last dotted component of long logger names."""
        if len(name) <= self.max_name_length:
            return name
        last = name.rsplit('.', 1)[-1]
        if len(last) <= self.max_name_length - 3:
            return f"...{last}"
        return f"{name[:self.max_name_length - 3]}..."

    @staticmethod
    def _format_performance(perf: Optional[Dict]) -> str:
        if not perf:
            return ''
        parts = []
        if 'duration_seconds' in perf:
            parts.append(f"{perf['duration_seconds']:.3f}s")
        if 'items_processed' in perf:
            parts.append(f"{perf['items_processed']} items")
        if 'items_per_second' in perf:
            parts.append(f"{perf['items_per_second']:.1f} items/s")
        return ' | '.join(parts)
