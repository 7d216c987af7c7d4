"""Recent form and head-to-head records."""

from typing import Iterable

from .constants import DEFAULT_FORM_COUNT
from .models import FormResult, StandingRecord
from .schemas import LeagueEntry, Match


def _results(m: Match) -> tuple[FormResult, FormResult]:
    """Result letter for each side of a match."""
    s1 = m.league_entry_1_points
    s2 = m.league_entry_2_points
    if s1 > s2:
        return 'W', 'L'
    if s2 > s1:
        return 'L', 'W'
    return 'D', 'D'


def team_form(
    entries: Iterable[LeagueEntry],
    matches: Iterable[Match],
    count: int = DEFAULT_FORM_COUNT,
) -> dict[int, list[FormResult]]:
    """
    Last ``count`` results per entry, most recent first.

    Args:
        entries: League entries
        matches: League matches (unfinished ones are ignored)
        count: Maximum results per entry

    Returns:
        Dict mapping league-entry id to a list of 'W'/'D'/'L'
    """
    form: dict[int, list[FormResult]] = {entry.id: [] for entry in entries}

    finished = sorted((m for m in matches if m.finished), key=lambda m: m.event, reverse=True)
    for m in finished:
        r1, r2 = _results(m)
        for entry_id, result in ((m.league_entry_1, r1), (m.league_entry_2, r2)):
            results = form.get(entry_id)
            if results is not None and len(results) < count:
                results.append(result)

    return form


def head_to_head(
    entries: Iterable[LeagueEntry],
    matches: Iterable[Match],
) -> dict[int, dict[int, StandingRecord]]:
    """
    Pairwise record between every two distinct entries.

    ``h2h[a][b]`` is a's record against b and always mirrors ``h2h[b][a]``.
    Pairs that have not met yet carry a zero record.
    """
    entries = list(entries)
    h2h = {
        a.id: {b.id: StandingRecord() for b in entries if b.id != a.id}
        for a in entries
    }

    for m in matches:
        if not m.finished:
            continue
        rec1 = h2h.get(m.league_entry_1, {}).get(m.league_entry_2)
        rec2 = h2h.get(m.league_entry_2, {}).get(m.league_entry_1)
        if rec1 is None or rec2 is None:
            continue

        s1 = m.league_entry_1_points
        s2 = m.league_entry_2_points
        rec1.points_for += s1
        rec1.points_against += s2
        rec2.points_for += s2
        rec2.points_against += s1

        if s1 > s2:
            rec1.wins += 1
            rec2.losses += 1
        elif s2 > s1:
            rec1.losses += 1
            rec2.wins += 1
        else:
            rec1.draws += 1
            rec2.draws += 1

    return h2h
