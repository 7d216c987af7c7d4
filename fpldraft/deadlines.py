"""Gameweek deadlines derived from the event calendar."""

from datetime import datetime, timedelta
from typing import Iterable

from .constants import WAIVER_DEADLINE_OFFSET_HOURS
from .models import DeadlineInfo
from .schemas import BootstrapStatic, Event
from .utils import parse_timestamp


def current_event(bootstrap: BootstrapStatic) -> int:
    """Current gameweek from the catalog, or 1 before the season starts."""
    return bootstrap.events.current or 1


def resolve_deadlines(
    events: Iterable[Event],
    now: datetime,
    current: int = 1,
    waiver_offset_hours: int = WAIVER_DEADLINE_OFFSET_HOURS,
) -> DeadlineInfo:
    """
    Find the next gameweek whose deadline is still ahead.

    Events are scanned by ascending id; when every deadline has passed the
    last event is used. Waivers close ``waiver_offset_hours`` before the
    lineup deadline. The upstream API does not publish the waiver deadline,
    so it is derived.

    Args:
        events: Event calendar
        now: Aware wall-clock time
        current: Fallback gameweek for an empty calendar
        waiver_offset_hours: Hours between waiver and lineup deadlines

    Returns:
        DeadlineInfo (deadlines are None if the event has no deadline)
    """
    ordered = sorted(events, key=lambda e: e.id)
    if not ordered:
        return DeadlineInfo(next_event=current)

    next_event = None
    for event in ordered:
        deadline = parse_timestamp(event.deadline_time)
        if deadline is not None and deadline > now:
            next_event = event
            break
    if next_event is None:
        next_event = ordered[-1]

    lineup_deadline = parse_timestamp(next_event.deadline_time)
    if lineup_deadline is None:
        return DeadlineInfo(next_event=next_event.id)

    return DeadlineInfo(
        next_event=next_event.id,
        waiver_deadline=lineup_deadline - timedelta(hours=waiver_offset_hours),
        lineup_deadline=lineup_deadline,
    )


def transactions_display_event(current: int, deadline_info: DeadlineInfo, now: datetime) -> int:
    """
    Gameweek whose transactions should be shown.

    Once the upcoming gameweek's waiver window has closed its moves are
    settled, so they replace the current gameweek's.
    """
    if (
        deadline_info.waiver_deadline is not None
        and deadline_info.next_event > current
        and now > deadline_info.waiver_deadline
    ):
        return deadline_info.next_event
    return current
