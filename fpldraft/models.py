"""Data models for derived dashboard views."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Literal, Optional

from .constants import POINTS_PER_DRAW, POINTS_PER_WIN
from .schemas import LeagueEntry, Player, Standing

FormResult = Literal['W', 'D', 'L']


@dataclass
class FixtureView:
    """League match with resolved names on both sides."""
    event: int
    team1_id: int
    team1_name: str
    team1_manager: str
    team1_points: int
    team2_id: int
    team2_name: str
    team2_manager: str
    team2_points: int
    finished: bool
    started: bool
    winner: Optional[str] = None

    @property
    def is_live(self) -> bool:
        return self.started and not self.finished


@dataclass
class StandingRecord:
    """Win/draw/loss and points aggregate, used for tables and head-to-head."""
    wins: int = 0
    draws: int = 0
    losses: int = 0
    points_for: int = 0
    points_against: int = 0

    @property
    def played(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def league_points(self) -> int:
        return self.wins * POINTS_PER_WIN + self.draws * POINTS_PER_DRAW

    @property
    def point_difference(self) -> int:
        return self.points_for - self.points_against


@dataclass
class ChampionshipRow:
    """Ranked row of a windowed table."""
    entry: LeagueEntry
    record: StandingRecord
    rank: int = 0

    @property
    def total(self) -> int:
        return self.record.league_points


@dataclass
class ManagerWithSquad:
    """Entry joined with its authoritative standing and owned players."""
    entry: LeagueEntry
    standing: Standing
    squad: list[Player] = field(default_factory=list)


@dataclass
class TransactionView:
    """Accepted roster move with resolved names."""
    id: int
    event: int
    manager_name: str
    player_in: str
    player_in_team: str
    player_in_photo: Optional[str]
    player_out: str
    player_out_team: str
    player_out_photo: Optional[str]
    type: Literal['waiver', 'free']
    added: str


@dataclass
class PerGameStat:
    """One real-world fixture's contribution to a player's gameweek."""
    fixture_id: int
    opponent_short_name: str
    is_home: bool
    points: int = 0
    minutes: int = 0
    goals: int = 0
    assists: int = 0
    clean_sheet: bool = False
    bonus: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    own_goals: int = 0
    penalties_missed: int = 0
    saves: int = 0


@dataclass
class PlayerPoints:
    """Player line in a team's points breakdown."""
    element: int
    name: str
    points: int
    position: int
    is_benched: bool
    position_name: str
    team_short_name: str
    opponent_short_name: str
    is_home: bool
    goals: int = 0
    assists: int = 0
    clean_sheet: bool = False
    bonus: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    own_goals: int = 0
    penalties_missed: int = 0
    saves: int = 0
    minutes_played: int = 0
    has_played: bool = False
    defensive_contribution: int = 0
    per_game_stats: list[PerGameStat] = field(default_factory=list)


@dataclass
class TeamPointsBreakdown:
    """Per-team reconstruction of a gameweek score."""
    entry_id: int
    team_name: str
    manager_name: str
    total_points: int
    players: list[PlayerPoints] = field(default_factory=list)

    @property
    def starters(self) -> list[PlayerPoints]:
        return [p for p in self.players if not p.is_benched]

    @property
    def bench(self) -> list[PlayerPoints]:
        return [p for p in self.players if p.is_benched]


@dataclass
class WhatIfPlayer:
    """Drafted player valued at season-aggregate points."""
    id: int
    name: str
    position_name: str
    team_short_name: str
    total_points: int
    draft_round: int


@dataclass
class WhatIfSquad:
    """An entry's draft-day squad and its season total."""
    entry_id: int
    team_name: str
    manager_name: str
    total_points: int
    players: list[WhatIfPlayer] = field(default_factory=list)


@dataclass
class DeadlineInfo:
    """Next actionable gameweek and its deadlines."""
    next_event: int
    waiver_deadline: Optional[datetime] = None
    lineup_deadline: Optional[datetime] = None


@dataclass
class Dashboard:
    """Everything the presentation layer needs for one request."""
    league_name: str
    current_event: int
    transactions_event: int
    deadlines: DeadlineInfo
    managers: list[ManagerWithSquad]
    current_fixtures: list[FixtureView]
    all_fixtures: list[FixtureView]
    championship: list[ChampionshipRow]
    form: dict[int, list[FormResult]]
    head_to_head: dict[int, dict[int, StandingRecord]]
    transactions: list[TransactionView]
    points_breakdown: dict[int, TeamPointsBreakdown] = field(default_factory=dict)
    results_breakdowns: dict[int, dict[int, TeamPointsBreakdown]] = field(default_factory=dict)
    what_if: list[WhatIfSquad] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_json_payload(self) -> dict[str, Any]:
        """Plain dict of the dashboard, safe for ``json.dump``."""

        def _deadline(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            'league_name': self.league_name,
            'current_event': self.current_event,
            'transactions_event': self.transactions_event,
            'deadlines': {
                'next_event': self.deadlines.next_event,
                'waiver_deadline': _deadline(self.deadlines.waiver_deadline),
                'lineup_deadline': _deadline(self.deadlines.lineup_deadline),
            },
            'standings': [
                {
                    'entry_id': m.entry.id,
                    'team_name': m.entry.entry_name,
                    'manager_name': m.entry.manager_name,
                    **m.standing.model_dump(),
                    'squad': [p.web_name for p in m.squad],
                }
                for m in self.managers
            ],
            'championship': [
                {
                    'rank': row.rank,
                    'entry_id': row.entry.id,
                    'team_name': row.entry.entry_name,
                    **asdict(row.record),
                    'total': row.total,
                }
                for row in self.championship
            ],
            'current_fixtures': [asdict(f) for f in self.current_fixtures],
            'fixtures': [asdict(f) for f in self.all_fixtures],
            'form': {str(k): v for k, v in self.form.items()},
            'head_to_head': {
                str(a): {str(b): asdict(rec) for b, rec in row.items()}
                for a, row in self.head_to_head.items()
            },
            'transactions': [asdict(t) for t in self.transactions],
            'points_breakdown': {str(k): asdict(v) for k, v in self.points_breakdown.items()},
            'results_breakdowns': {
                str(gw): {str(k): asdict(v) for k, v in row.items()}
                for gw, row in self.results_breakdowns.items()
            },
            'what_if': [asdict(s) for s in self.what_if],
            'warnings': list(self.warnings),
        }
