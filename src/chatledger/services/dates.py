"""Relative date resolution for reminders."""

from datetime import datetime, timedelta

# Checked in order; only the first phrase found shifts the date
RELATIVE_DATE_SHIFTS: tuple[tuple[str, timedelta], ...] = (
    ("tomorrow", timedelta(days=1)),
    ("next week", timedelta(days=7)),
)


def _shift_wall_clock(now: datetime, shift: timedelta) -> datetime:
    """Add ``shift`` keeping the local time of day across DST changes."""
    shifted = now + shift
    localize = getattr(now.tzinfo, "localize", None)
    if localize is None:
        # zoneinfo and naive datetimes already do wall-clock arithmetic
        return shifted
    # pytz zones pin the offset of ``now``; look it up again for the new day
    return localize(shifted.replace(tzinfo=None))


def resolve_reminder_date(text: str, now: datetime) -> datetime:
    """Resolve the due date of a reminder from lower-cased message text.

    Phrases other than those in RELATIVE_DATE_SHIFTS ("next month", weekdays,
    clock times) are not recognised and leave the date at ``now``.
    """
    for phrase, shift in RELATIVE_DATE_SHIFTS:
        if phrase in text:
            return _shift_wall_clock(now, shift)
    return now
