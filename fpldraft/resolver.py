"""Id lookups built once per request from the league and catalog payloads."""

from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    PLAYER_PHOTO_URL,
    POSITION_NAMES,
    UNKNOWN_NAME,
    UNKNOWN_POSITION,
    UNKNOWN_TEAM,
)
from .schemas import BootstrapStatic, LeagueDetails, LeagueEntry, Player


def get_position_name(element_type: int) -> str:
    """Short position name for an element type (GK/DEF/MID/FWD, else UNK)."""
    return POSITION_NAMES.get(element_type, UNKNOWN_POSITION)


@dataclass
class EntityResolver:
    """
    Lookup tables joining ids across independently fetched payloads.

    Every lookup is total: ids missing from the payloads resolve to a
    placeholder instead of raising, since the upstream feeds can briefly
    disagree (e.g. a transaction naming a player the catalog doesn't list yet).
    """

    entries: dict[int, LeagueEntry] = field(default_factory=dict)
    entries_by_external_id: dict[int, LeagueEntry] = field(default_factory=dict)
    players: dict[int, Player] = field(default_factory=dict)
    team_short_names: dict[int, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        league_details: Optional[LeagueDetails] = None,
        bootstrap: Optional[BootstrapStatic] = None,
    ) -> 'EntityResolver':
        """
        Build the lookup tables.

        Args:
            league_details: League payload (entries)
            bootstrap: Catalog payload (players, teams)

        Returns:
            EntityResolver with all maps populated
        """
        resolver = cls()
        if league_details is not None:
            for entry in league_details.league_entries:
                resolver.entries[entry.id] = entry
                resolver.entries_by_external_id[entry.entry_id] = entry
        if bootstrap is not None:
            for player in bootstrap.elements:
                resolver.players[player.id] = player
            for team in bootstrap.teams:
                resolver.team_short_names[team.id] = team.short_name
        return resolver

    # League entries (keyed by league-entry id)

    def entry_name(self, entry_id: Optional[int]) -> str:
        entry = self.entries.get(entry_id)
        return entry.entry_name if entry else UNKNOWN_NAME

    def manager_name(self, entry_id: Optional[int]) -> str:
        entry = self.entries.get(entry_id)
        return entry.manager_name if entry else UNKNOWN_NAME

    # External roster ids (picks, transactions, draft choices, ownership)

    def entry_for_external_id(self, external_id: int) -> Optional[LeagueEntry]:
        return self.entries_by_external_id.get(external_id)

    def manager_name_by_external_id(self, external_id: int) -> str:
        entry = self.entries_by_external_id.get(external_id)
        return entry.manager_name if entry else UNKNOWN_NAME

    # Catalog

    def player(self, player_id: Optional[int]) -> Optional[Player]:
        return self.players.get(player_id)

    def player_name(self, player_id: Optional[int]) -> str:
        player = self.players.get(player_id)
        return player.web_name if player else UNKNOWN_NAME

    def team_short_name(self, team_id: Optional[int]) -> str:
        return self.team_short_names.get(team_id, UNKNOWN_TEAM)

    def player_team_short_name(self, player_id: Optional[int]) -> str:
        player = self.players.get(player_id)
        return self.team_short_name(player.team) if player else UNKNOWN_TEAM

    def player_position_name(self, player_id: Optional[int]) -> str:
        player = self.players.get(player_id)
        return get_position_name(player.element_type) if player else UNKNOWN_POSITION

    def player_photo(self, player_id: Optional[int]) -> Optional[str]:
        player = self.players.get(player_id)
        if player is None or not player.code:
            return None
        return PLAYER_PHOTO_URL.format(code=player.code)
