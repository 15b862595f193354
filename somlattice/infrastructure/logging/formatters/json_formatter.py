"""JSON lines formatter for log files."""

import json
import logging
import traceback
from datetime import datetime

# Context keys promoted to top-level fields so that log files can be
# filtered per run and per map without parsing the nested context
_CORRELATION_KEYS = ('run_id', 'map_id')


class JsonFormatter(logging.Formatter):
    """One JSON object per record with correlation ids, context and timings."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
            'thread_name': record.threadName,
        }

        context = dict(getattr(record, 'context', None) or {})
        for key in _CORRELATION_KEYS:
            if key in context:
                entry[key] = context.pop(key)
        if context:
            entry['context'] = context

        perf = getattr(record, 'performance', None)
        if perf:
            entry['performance'] = perf

        tb = getattr(record, 'traceback', None)
        if not tb and record.exc_info:
            tb = ''.join(traceback.format_exception(*record.exc_info))
        if tb:
            entry['traceback'] = tb

        return json.dumps(entry, separators=(',', ':'), default=str)
