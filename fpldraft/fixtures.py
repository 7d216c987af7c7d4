"""League fixtures projected into display-ready views."""

from collections import defaultdict
from typing import Iterable, Literal, Optional

from .models import FixtureView, TeamPointsBreakdown
from .resolver import EntityResolver
from .schemas import Match

GameweekStatus = Literal['not_started', 'in_progress', 'finished']


def project_fixtures(
    matches: Iterable[Match],
    resolver: EntityResolver,
    event: Optional[int] = None,
) -> list[FixtureView]:
    """
    Map league matches to fixture views with resolved names.

    Args:
        matches: Matches from the league payload
        resolver: Entity lookups
        event: Only project this gameweek (default: all)

    Returns:
        Fixture views in input order. ``winner`` is None for drawn or
        undecided matches.
    """
    fixtures = []
    for m in matches:
        if event is not None and m.event != event:
            continue
        winner = None
        if m.winning_league_entry is not None:
            winner = resolver.entry_name(m.winning_league_entry)
        fixtures.append(
            FixtureView(
                event=m.event,
                team1_id=m.league_entry_1,
                team1_name=resolver.entry_name(m.league_entry_1),
                team1_manager=resolver.manager_name(m.league_entry_1),
                team1_points=m.league_entry_1_points,
                team2_id=m.league_entry_2,
                team2_name=resolver.entry_name(m.league_entry_2),
                team2_manager=resolver.manager_name(m.league_entry_2),
                team2_points=m.league_entry_2_points,
                finished=m.finished,
                started=m.started,
                winner=winner,
            )
        )
    return fixtures


def display_points(
    fixture: FixtureView,
    breakdowns: dict[int, TeamPointsBreakdown],
) -> tuple[int, int]:
    """
    Choose the score to show for a fixture.

    While a match is live the league's own totals lag behind, so the
    reconstructed breakdown totals are shown. Once finished, the league
    totals are authoritative (they include settlement corrections).

    Args:
        fixture: Fixture view
        breakdowns: Breakdowns for the fixture's gameweek, keyed by league-entry id

    Returns:
        (team1_points, team2_points)
    """
    team1 = breakdowns.get(fixture.team1_id)
    team2 = breakdowns.get(fixture.team2_id)
    if fixture.is_live and team1 is not None and team2 is not None:
        return team1.total_points, team2.total_points
    return fixture.team1_points, fixture.team2_points


def _involves(fixture: FixtureView, team_id: Optional[int]) -> bool:
    return team_id is None or team_id in (fixture.team1_id, fixture.team2_id)


def upcoming_fixtures(
    fixtures: Iterable[FixtureView],
    team_id: Optional[int] = None,
) -> dict[int, list[FixtureView]]:
    """Fixtures not yet started, grouped by gameweek (earliest first)."""
    grouped: dict[int, list[FixtureView]] = defaultdict(list)
    for f in sorted(fixtures, key=lambda f: f.event):
        if f.started or f.finished or not _involves(f, team_id):
            continue
        grouped[f.event].append(f)
    return dict(grouped)


def results_by_gameweek(
    fixtures: Iterable[FixtureView],
    team_id: Optional[int] = None,
) -> dict[int, list[FixtureView]]:
    """Finished fixtures, grouped by gameweek (most recent first)."""
    grouped: dict[int, list[FixtureView]] = defaultdict(list)
    for f in sorted(fixtures, key=lambda f: f.event, reverse=True):
        if not f.finished or not _involves(f, team_id):
            continue
        grouped[f.event].append(f)
    return dict(grouped)


def gameweek_status(fixtures: list[FixtureView]) -> GameweekStatus:
    """Overall state of a gameweek's fixtures."""
    if fixtures and all(f.finished for f in fixtures):
        return 'finished'
    if any(f.started for f in fixtures):
        return 'in_progress'
    return 'not_started'
