"""What-If leaderboard: draft-day squads valued at season points."""

from collections import defaultdict
from typing import Iterable

from .models import WhatIfPlayer, WhatIfSquad
from .resolver import EntityResolver
from .schemas import DraftChoice


def aggregate_what_if(
    draft_choices: Iterable[DraftChoice],
    resolver: EntityResolver,
) -> list[WhatIfSquad]:
    """
    Score every entry's original draft as if no transfers were ever made.

    Choices are grouped by external entry id and kept in draft-round order.
    Entries without draft choices have no baseline and are left out, as are
    choices for entries not in the league.

    Args:
        draft_choices: Draft-choice feed
        resolver: Entity lookups

    Returns:
        Squads sorted by season points, highest first
    """
    by_entry: dict[int, list[DraftChoice]] = defaultdict(list)
    for choice in draft_choices:
        by_entry[choice.entry].append(choice)

    squads = []
    for external_id, choices in by_entry.items():
        entry = resolver.entry_for_external_id(external_id)
        if entry is None:
            continue

        players = []
        for choice in sorted(choices, key=lambda c: c.round):
            player = resolver.player(choice.element)
            players.append(
                WhatIfPlayer(
                    id=choice.element or 0,
                    name=resolver.player_name(choice.element),
                    position_name=resolver.player_position_name(choice.element),
                    team_short_name=resolver.player_team_short_name(choice.element),
                    total_points=player.total_points if player else 0,
                    draft_round=choice.round,
                )
            )

        squads.append(
            WhatIfSquad(
                entry_id=external_id,
                team_name=entry.entry_name,
                manager_name=entry.manager_name,
                total_points=sum(p.total_points for p in players),
                players=players,
            )
        )

    squads.sort(key=lambda s: s.total_points, reverse=True)
    return squads
