"""Date range selection for the trip calendar.

Day picks arrive one at a time and in any order; the resulting range is
always normalized so that start <= end.
"""

from datetime import date, timedelta

from planner.models.wizard import DateRange

DISPLAY_FORMAT = "%d %b"


def select_day(current: DateRange, picked: date) -> DateRange:
    """Apply one calendar pick to the current range."""
    if current.start is None:
        return DateRange(start=picked)

    if current.end is None:
        if picked < current.start:
            return DateRange(start=picked, end=current.start)
        return DateRange(start=current.start, end=picked)

    # A completed range is discarded and a new one begins.
    return DateRange(start=picked)


def format_range(date_range: DateRange) -> str:
    if date_range.start is None:
        return ""
    if date_range.end is None:
        return date_range.start.strftime(DISPLAY_FORMAT)
    return f"{date_range.start.strftime(DISPLAY_FORMAT)} - {date_range.end.strftime(DISPLAY_FORMAT)}"


def days_in_range(date_range: DateRange) -> list[date]:
    """Every day covered by the range, inclusive, for calendar highlighting."""
    if date_range.start is None:
        return []
    if date_range.end is None:
        return [date_range.start]
    span = (date_range.end - date_range.start).days
    return [date_range.start + timedelta(days=offset) for offset in range(span + 1)]
