"""Per-team gameweek points rebuilt from picks and live player data.

The league's own match totals only move after settlement, so during a live
gameweek the score is reconstructed here from each entry's picks and the
live per-player feed. Only the starting eleven count towards the total.
"""

import logging
from collections import defaultdict
from typing import Iterable, Optional

from .constants import EXPLAIN_STATS, STARTER_SLOTS
from .models import PerGameStat, PlayerPoints, TeamPointsBreakdown
from .resolver import EntityResolver
from .schemas import (
    EntryPicksResponse,
    LeagueEntry,
    LiveElement,
    LiveEventResponse,
    LiveFixture,
    Match,
    Pick,
)

logger = logging.getLogger('fpldraft.breakdown')


def is_starter(position: int) -> bool:
    """Slots 1-11 start; everything after is bench."""
    return position <= STARTER_SLOTS


def build_fixture_lookup(live: LiveEventResponse) -> dict[int, list[LiveFixture]]:
    """Map each real-world club to its fixtures in the gameweek (two in a double gameweek)."""
    by_team: dict[int, list[LiveFixture]] = defaultdict(list)
    for f in live.fixtures:
        by_team[f.team_h].append(f)
        by_team[f.team_a].append(f)
    return dict(by_team)


def _opponent(fixture: LiveFixture, team_id: int) -> tuple[int, bool]:
    """(opponent team id, is_home) from ``team_id``'s point of view."""
    if fixture.team_h == team_id:
        return fixture.team_a, True
    return fixture.team_h, False


def build_per_game_stats(
    element: LiveElement,
    team_id: Optional[int],
    fixtures_by_id: dict[int, LiveFixture],
    resolver: EntityResolver,
) -> list[PerGameStat]:
    """
    Split a player's gameweek into one entry per real-world fixture.

    Uses the live ``explain`` blocks, each of which lists the stats scored in
    a single fixture.
    """
    games = []
    for stats, fixture_id in element.explain:
        fixture = fixtures_by_id.get(fixture_id)
        if fixture is not None and team_id is not None:
            opponent_id, is_home = _opponent(fixture, team_id)
        else:
            opponent_id, is_home = None, False

        game = PerGameStat(
            fixture_id=fixture_id,
            opponent_short_name=resolver.team_short_name(opponent_id),
            is_home=is_home,
        )
        for item in stats:
            game.points += item.points
            attr = EXPLAIN_STATS.get(item.stat)
            if attr:
                setattr(game, attr, getattr(game, attr) + item.value)
            elif item.stat == 'clean_sheets' and item.value > 0:
                game.clean_sheet = True
        games.append(game)
    return games


def build_player_points(
    pick: Pick,
    resolver: EntityResolver,
    live: LiveEventResponse,
    fixtures_by_team: dict[int, list[LiveFixture]],
    fixtures_by_id: dict[int, LiveFixture],
) -> PlayerPoints:
    """
    Assemble one player's line for a breakdown.

    Missing catalog or live data degrades to placeholders and zeros: a
    rostered player may have no live data until their match starts.
    """
    player = resolver.player(pick.element)
    team_id = player.team if player else None
    element = live.elements.get(str(pick.element))
    team_fixtures = fixtures_by_team.get(team_id, []) if team_id is not None else []

    if team_fixtures:
        opponents = [_opponent(f, team_id) for f in team_fixtures]
        opponent_short_name = '/'.join(resolver.team_short_name(o) for o, _ in opponents)
        is_home = opponents[0][1]
    else:
        opponent_short_name = resolver.team_short_name(None)
        is_home = False

    result = PlayerPoints(
        element=pick.element,
        name=resolver.player_name(pick.element),
        points=0,
        position=pick.position,
        is_benched=not is_starter(pick.position),
        position_name=resolver.player_position_name(pick.element),
        team_short_name=resolver.team_short_name(team_id),
        opponent_short_name=opponent_short_name,
        is_home=is_home,
        has_played=any(f.started for f in team_fixtures),
    )
    if element is None:
        return result

    stats = element.stats
    result.defensive_contribution = stats.defensive_contribution
    games = build_per_game_stats(element, team_id, fixtures_by_id, resolver)
    result.per_game_stats = games
    # Explain blocks can lag the gameweek total, which is authoritative
    result.points = stats.total_points

    if games:
        result.goals = sum(g.goals for g in games)
        result.assists = sum(g.assists for g in games)
        result.bonus = sum(g.bonus for g in games)
        result.yellow_cards = sum(g.yellow_cards for g in games)
        result.red_cards = sum(g.red_cards for g in games)
        result.own_goals = sum(g.own_goals for g in games)
        result.penalties_missed = sum(g.penalties_missed for g in games)
        result.saves = sum(g.saves for g in games)
        result.minutes_played = sum(g.minutes for g in games)
        result.clean_sheet = any(g.clean_sheet for g in games)
    else:
        result.goals = stats.goals_scored
        result.assists = stats.assists
        result.bonus = stats.bonus
        result.yellow_cards = stats.yellow_cards
        result.red_cards = stats.red_cards
        result.own_goals = stats.own_goals
        result.penalties_missed = stats.penalties_missed
        result.saves = stats.saves
        result.minutes_played = stats.minutes
        result.clean_sheet = stats.clean_sheets > 0

    return result


def team_total(players: Iterable[PlayerPoints]) -> int:
    """Sum of starters' points. Bench points never count."""
    return sum(p.points for p in players if not p.is_benched)


def build_points_breakdown(
    entries: Iterable[LeagueEntry],
    picks_by_entry: dict[int, EntryPicksResponse],
    live: LiveEventResponse,
    resolver: EntityResolver,
) -> dict[int, TeamPointsBreakdown]:
    """
    Rebuild every entry's gameweek score.

    The computed total is returned regardless of match state; whether to show
    it or the league's own total is decided by ``fixtures.display_points``.

    Args:
        entries: League entries
        picks_by_entry: Gameweek picks keyed by external entry id
        live: Live payload for the gameweek
        resolver: Entity lookups

    Returns:
        Dict mapping league-entry id to TeamPointsBreakdown
    """
    fixtures_by_team = build_fixture_lookup(live)
    fixtures_by_id = {f.id: f for f in live.fixtures}

    breakdowns = {}
    for entry in entries:
        picks = picks_by_entry.get(entry.entry_id)
        if picks is None:
            logger.warning(f'No picks for {entry.entry_name} ({entry.entry_id})')
            picks = EntryPicksResponse()

        players = [
            build_player_points(pick, resolver, live, fixtures_by_team, fixtures_by_id)
            for pick in picks.picks
        ]
        players.sort(key=lambda p: p.position)

        breakdowns[entry.id] = TeamPointsBreakdown(
            entry_id=entry.id,
            team_name=entry.entry_name,
            manager_name=entry.manager_name,
            total_points=team_total(players),
            players=players,
        )
    return breakdowns


def breakdown_events(matches: Iterable[Match], current_event: int) -> list[int]:
    """Gameweeks worth a breakdown: every finished one plus the current one once started."""
    events = set()
    for m in matches:
        if m.finished:
            events.add(m.event)
        elif m.event == current_event and m.started:
            events.add(m.event)
    return sorted(events, reverse=True)


def build_all_breakdowns(
    entries: Iterable[LeagueEntry],
    picks_by_event: dict[int, dict[int, EntryPicksResponse]],
    live_by_event: dict[int, LiveEventResponse],
    resolver: EntityResolver,
) -> dict[int, dict[int, TeamPointsBreakdown]]:
    """Breakdowns for several gameweeks, keyed by gameweek then league-entry id."""
    entries = list(entries)
    return {
        event: build_points_breakdown(entries, picks_by_event.get(event, {}), live, resolver)
        for event, live in live_by_event.items()
    }
