"""Season and windowed standings."""

import logging
from collections import defaultdict
from typing import Iterable

from .models import ChampionshipRow, ManagerWithSquad, StandingRecord
from .resolver import EntityResolver
from .schemas import (
    ElementStatusResponse,
    LeagueDetails,
    LeagueEntry,
    Match,
    Player,
    Standing,
)

logger = logging.getLogger('fpldraft.standings')


def season_standings(league_details: LeagueDetails) -> dict[int, Standing]:
    """The league's own standings keyed by league-entry id (no local computation)."""
    return {s.league_entry: s for s in league_details.standings}


def windowed_standings(
    entries: Iterable[LeagueEntry],
    matches: Iterable[Match],
    from_gameweek: int,
) -> dict[int, StandingRecord]:
    """
    Recompute standings from finished matches in gameweek ``from_gameweek`` onwards.

    Every known entry is present in the result, with a zero record if it has
    no qualifying matches. Matches before the threshold or not yet finished
    are left out of the fold entirely.

    Args:
        entries: League entries
        matches: League matches
        from_gameweek: First gameweek counted

    Returns:
        Dict mapping league-entry id to StandingRecord
    """
    standings = {entry.id: StandingRecord() for entry in entries}

    for m in matches:
        if m.event < from_gameweek or not m.finished:
            continue

        s1 = m.league_entry_1_points
        s2 = m.league_entry_2_points
        team1 = standings.get(m.league_entry_1)
        team2 = standings.get(m.league_entry_2)
        if team1 is None or team2 is None:
            logger.warning(
                f'GW{m.event} match {m.league_entry_1} v {m.league_entry_2} names an unknown entry'
            )

        if team1 is not None:
            team1.points_for += s1
            team1.points_against += s2
            if s1 > s2:
                team1.wins += 1
            elif s2 > s1:
                team1.losses += 1
            else:
                team1.draws += 1

        if team2 is not None:
            team2.points_for += s2
            team2.points_against += s1
            if s2 > s1:
                team2.wins += 1
            elif s1 > s2:
                team2.losses += 1
            else:
                team2.draws += 1

    return standings


def championship_table(
    entries: Iterable[LeagueEntry],
    records: dict[int, StandingRecord],
) -> list[ChampionshipRow]:
    """
    Rank a windowed table.

    Sorted by league points (3 per win, 1 per draw), then point difference,
    both descending.
    """
    rows = [ChampionshipRow(entry=e, record=records.get(e.id, StandingRecord())) for e in entries]
    rows.sort(key=lambda r: (r.total, r.record.point_difference), reverse=True)
    for rank, row in enumerate(rows, 1):
        row.rank = rank
    return rows


def managers_with_squads(
    league_details: LeagueDetails,
    element_status: ElementStatusResponse,
    resolver: EntityResolver,
) -> list[ManagerWithSquad]:
    """
    Join each entry with its standing and currently owned players.

    Ownership is keyed by external entry id. Squads are ordered by position
    class (GK, DEF, MID, FWD).
    """
    ownership: dict[int, list[Player]] = defaultdict(list)
    for status in element_status.element_status:
        if not status.owner:
            continue
        player = resolver.player(status.element)
        if player is not None:
            ownership[status.owner].append(player)

    standings = season_standings(league_details)
    managers = []
    for entry in league_details.league_entries:
        standing = standings.get(entry.id)
        if standing is None:
            logger.warning(f'No standing row for {entry.entry_name} ({entry.id})')
            standing = Standing(league_entry=entry.id)
        squad = sorted(ownership.get(entry.entry_id, []), key=lambda p: p.element_type)
        managers.append(ManagerWithSquad(entry=entry, standing=standing, squad=squad))
    return managers


def season_table(managers: Iterable[ManagerWithSquad]) -> list[ManagerWithSquad]:
    """Managers ordered by the league's authoritative rank. Unranked entries go last."""
    return sorted(managers, key=lambda m: (m.standing.rank == 0, m.standing.rank))
