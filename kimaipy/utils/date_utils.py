"""Date utility functions for kimaiPy."""
import re
from datetime import datetime
from typing import Optional

_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")

def now_iso(now: Optional[datetime] = None) -> str:
    """Get the current local time as an ISO 8601 string with UTC offset.
    
    Args:
        now: Time to format instead of the current time (optional)
        
    Returns:
        ISO datetime string, e.g. 2019-05-07T10:00:00+02:00
    """
    dt = now or datetime.now()
    return dt.astimezone().replace(microsecond=0).isoformat()

def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a timestamp as returned by the Kimai API.
    
    Kimai sends offsets without a colon (``+0200``); both forms are accepted.
    Naive timestamps are taken as local time.
    
    Args:
        value: ISO datetime string
        
    Returns:
        Timezone-aware datetime, or None if the value is empty or invalid
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip().replace("Z", "+00:00")
    text = _COMPACT_OFFSET.sub(r"\1:\2", text)
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt
