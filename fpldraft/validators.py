"""Consistency checks for derived views.

Each check returns a list of warning messages (empty if consistent) and never
raises: upstream data can be momentarily inconsistent and the dashboard should
still render.
"""

from typing import Iterable

from .constants import STARTER_SLOTS
from .models import StandingRecord, TeamPointsBreakdown
from .schemas import LeagueEntry, Match


def validate_breakdown(breakdown: TeamPointsBreakdown) -> list[str]:
    """
    Check a team's points breakdown.

    Checks:
    - Exactly 11 starters (skipped when no picks are known yet)
    - Total equals the sum of starters' points
    """
    warnings = []

    if breakdown.players:
        starter_count = len(breakdown.starters)
        if starter_count != STARTER_SLOTS:
            warnings.append(
                f'{breakdown.team_name} has {starter_count} starters (expected {STARTER_SLOTS})'
            )

    starter_sum = sum(p.points for p in breakdown.starters)
    if starter_sum != breakdown.total_points:
        warnings.append(
            f'{breakdown.team_name} total ({breakdown.total_points}) != starters sum ({starter_sum})'
        )

    return warnings


def validate_head_to_head(h2h: dict[int, dict[int, StandingRecord]]) -> list[str]:
    """Check every pair mirrors its reverse (wins vs losses, points for vs against)."""
    warnings = []
    for a, row in h2h.items():
        for b, rec in row.items():
            other = h2h.get(b, {}).get(a)
            if other is None:
                warnings.append(f'H2H {a} v {b} has no reverse record')
                continue
            if (
                rec.wins != other.losses
                or rec.draws != other.draws
                or rec.points_for != other.points_against
            ):
                warnings.append(f'H2H {a} v {b} does not mirror {b} v {a}')
    return warnings


def validate_standings(
    records: dict[int, StandingRecord],
    matches: Iterable[Match],
    from_gameweek: int,
) -> list[str]:
    """Check no entry has more results than the finished matches in the window."""
    qualifying = sum(1 for m in matches if m.finished and m.event >= from_gameweek)
    warnings = []
    for entry_id, rec in records.items():
        if rec.played > qualifying:
            warnings.append(
                f'Entry {entry_id} has {rec.played} results from {qualifying} finished matches'
            )
    return warnings


def validate_fixture_entries(
    matches: Iterable[Match],
    entries: Iterable[LeagueEntry],
) -> list[str]:
    """Report matches naming entries missing from the league payload."""
    known = {e.id for e in entries}
    warnings = []
    for m in matches:
        for entry_id in (m.league_entry_1, m.league_entry_2):
            if entry_id not in known:
                warnings.append(f'GW{m.event} match references unknown entry {entry_id}')
    return warnings
