"""Unit tests for gameweek deadlines."""

from datetime import datetime, timedelta, timezone

from fpldraft.deadlines import current_event, resolve_deadlines, transactions_display_event
from fpldraft.models import DeadlineInfo
from fpldraft.schemas import BootstrapStatic, Event


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def make_events(*deadlines):
    return [
        Event(id=i, deadline_time=deadline)
        for i, deadline in enumerate(deadlines, 1)
    ]


class TestCurrentEvent:
    """Tests for current_event."""

    def test_current_from_catalog(self, bootstrap):
        """Test the catalog's current gameweek pointer is used."""
        assert current_event(bootstrap) == 3

    def test_before_season(self):
        """Test a missing pointer falls back to gameweek 1."""
        assert current_event(BootstrapStatic()) == 1


class TestResolveDeadlines:
    """Tests for resolve_deadlines."""

    def test_first_future_deadline(self):
        """Test the first event with a deadline after now is chosen."""
        events = make_events('2025-08-15T17:30:00Z', '2025-08-22T17:30:00Z', '2025-08-29T17:30:00Z')
        info = resolve_deadlines(events, utc(2025, 8, 20), current=1)
        assert info.next_event == 2
        assert info.lineup_deadline == utc(2025, 8, 22, 17, 30)

    def test_waiver_offset(self):
        """Test waivers close 24 hours before the lineup deadline by default."""
        events = make_events('2025-08-15T17:30:00Z', '2025-08-22T17:30:00Z')
        info = resolve_deadlines(events, utc(2025, 8, 20))
        assert info.lineup_deadline - info.waiver_deadline == timedelta(hours=24)
        assert info.waiver_deadline == utc(2025, 8, 21, 17, 30)

    def test_custom_waiver_offset(self):
        """Test a configured waiver offset."""
        events = make_events('2025-08-22T17:30:00Z')
        info = resolve_deadlines(events, utc(2025, 8, 20), waiver_offset_hours=12)
        assert info.waiver_deadline == utc(2025, 8, 22, 5, 30)

    def test_events_scanned_in_id_order(self):
        """Test an unordered calendar is scanned by ascending id."""
        events = list(reversed(make_events('2025-08-15T17:30:00Z', '2025-08-22T17:30:00Z', '2025-08-29T17:30:00Z')))
        info = resolve_deadlines(events, utc(2025, 8, 1))
        assert info.next_event == 1

    def test_all_passed_uses_last_event(self):
        """Test the last event is used once every deadline has passed."""
        events = make_events('2025-08-15T17:30:00Z', '2026-05-16T13:30:00Z')
        info = resolve_deadlines(events, utc(2026, 6, 1))
        assert info.next_event == 2
        assert info.lineup_deadline == utc(2026, 5, 16, 13, 30)

    def test_event_without_deadline(self):
        """Test an event with no deadline is skipped, and the fallback has no deadlines."""
        events = make_events('2025-08-15T17:30:00Z', None)
        info = resolve_deadlines(events, utc(2025, 9, 1))
        assert info == DeadlineInfo(next_event=2)

    def test_empty_calendar(self):
        """Test an empty calendar falls back to the current gameweek."""
        assert resolve_deadlines([], utc(2025, 8, 1), current=7) == DeadlineInfo(next_event=7)


class TestTransactionsDisplayEvent:
    """Tests for transactions_display_event."""

    def test_after_waiver_deadline_shows_next(self):
        """Test the next gameweek's moves are shown once its waivers have closed."""
        info = DeadlineInfo(
            next_event=22,
            waiver_deadline=utc(2026, 1, 16, 11, 0),
            lineup_deadline=utc(2026, 1, 17, 11, 0),
        )
        assert transactions_display_event(21, info, utc(2026, 1, 16, 20, 0)) == 22

    def test_before_waiver_deadline_shows_current(self):
        """Test the current gameweek is shown while waivers are still open."""
        info = DeadlineInfo(
            next_event=22,
            waiver_deadline=utc(2026, 1, 16, 11, 0),
            lineup_deadline=utc(2026, 1, 17, 11, 0),
        )
        assert transactions_display_event(21, info, utc(2026, 1, 15)) == 21

    def test_no_waiver_deadline_shows_current(self):
        """Test a missing waiver deadline always shows the current gameweek."""
        info = DeadlineInfo(next_event=22)
        assert transactions_display_event(21, info, utc(2030, 1, 1)) == 21

    def test_next_not_later_shows_current(self):
        """Test the current gameweek is kept when the next event is not later."""
        info = DeadlineInfo(
            next_event=21,
            waiver_deadline=utc(2026, 1, 9, 11, 0),
            lineup_deadline=utc(2026, 1, 10, 11, 0),
        )
        assert transactions_display_event(21, info, utc(2026, 1, 20)) == 21
