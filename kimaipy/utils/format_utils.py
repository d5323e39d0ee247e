"""Formatting utility functions for kimaiPy."""
import re
from datetime import datetime
from typing import Optional

from .date_utils import parse_timestamp

def format_hm(seconds: int) -> str:
    """Format seconds as HH:MM.
    
    Args:
        seconds: Number of seconds (can be negative)
        
    Returns:
        Formatted time string (with leading '-' if negative)
    """
    if seconds < 0:
        abs_seconds = abs(seconds)
        return f"-{abs_seconds // 3600:02}:{(abs_seconds % 3600) // 60:02}"
    return f"{seconds // 3600:02}:{(seconds % 3600) // 60:02}"

def elapsed(begin: str, end: Optional[str] = None, now: Optional[datetime] = None) -> str:
    """Get the time between begin and end (or now) as HH:MM.
    
    Hours are not wrapped at 24.
    
    Args:
        begin: ISO begin timestamp
        end: ISO end timestamp; when missing or invalid, the current time is used
        now: Reference time for running measurements (optional)
        
    Returns:
        Formatted duration (HH:MM)
    """
    begin_dt = parse_timestamp(begin)
    if begin_dt is None:
        return ""
    end_dt = parse_timestamp(end) or (now or datetime.now()).astimezone()
    return format_hm(int((end_dt - begin_dt).total_seconds()))

def sanitize_server_url(url: str) -> str:
    """Remove trailing slashes from a server URL.
    
    Args:
        url: Server URL as configured
        
    Returns:
        URL without trailing slashes
    """
    return re.sub(r"/+$", "", url.strip())
