from datetime import date
from typing import Optional


def format_date(value: Optional[date]) -> Optional[str]:
    """NAV date text (``yyyy-MM-dd``)"""
    return value.strftime("%Y-%m-%d") if value is not None else None


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse NAV date text, None when absent or not a date"""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
