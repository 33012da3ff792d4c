"""
Date token helpers.

todo.txt dates are exactly YYYY-MM-DD. strptime alone accepts unpadded
fields ("2019-4-7"), so the shape is checked first.
"""

import re
from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
_DATE_TOKEN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date_token(token: str) -> Optional[date]:
    """Return the date for a YYYY-MM-DD token, or None if it is not one."""
    if not _DATE_TOKEN.fullmatch(token):
        return None
    try:
        return datetime.strptime(token, DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: date) -> str:
    # isoformat() keeps the year zero-padded, strftime("%Y") does not on glibc
    return value.isoformat()
