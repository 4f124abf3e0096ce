"""Formatting of message timestamps for display."""

from __future__ import annotations

from datetime import datetime, timedelta

_ONE_DAY = timedelta(days=1)


def _to_local(time: datetime) -> datetime:
    return time.astimezone()


def format_time_friendly(time: datetime, now: datetime | None = None) -> str:
    """Show ``MM/DD`` for times at least a day old, otherwise ``HH:MM``."""
    current = _to_local(now) if now is not None else datetime.now().astimezone()
    time_local = _to_local(time)
    if current - time_local >= _ONE_DAY:
        return time_local.strftime("%m/%d")
    return time_local.strftime("%H:%M")


def format_time_hhmm(time: datetime) -> str:
    """Show the local time of day as ``HH:MM``."""
    return _to_local(time).strftime("%H:%M")