"""Utility modules for kimaiPy."""

from .date_utils import now_iso, parse_timestamp
from .format_utils import format_hm, elapsed, sanitize_server_url

__all__ = [
    'now_iso', 'parse_timestamp',
    'format_hm', 'elapsed', 'sanitize_server_url'
]
