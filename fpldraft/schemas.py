"""Pydantic schemas for upstream draft API payloads and league config."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CHAMPIONSHIP_START,
    DEFAULT_FORM_COUNT,
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT_SEC,
    WAIVER_DEADLINE_OFFSET_HOURS,
)


class TransactionKind(str, Enum):
    """How a roster move was made."""

    WAIVER = 'w'
    FREE = 'f'
    # Any code the dashboard doesn't recognise (e.g. trades)
    OTHER = 'other'


class TransactionResult(str, Enum):
    """Outcome of a roster move. Upstream sends null while pending."""

    ACCEPTED = 'a'
    DECLINED_IN = 'di'
    DECLINED_OUT = 'do'
    PENDING = 'pending'


# League details


class League(BaseModel):
    """League metadata."""

    id: int
    name: str = ''
    admin_entry: Optional[int] = None
    closed: bool = False
    draft_dt: Optional[str] = None
    draft_status: Optional[str] = None
    scoring: Optional[str] = None
    start_event: int = Field(1, ge=1)
    stop_event: int = Field(38, ge=1)
    trades: Optional[str] = None
    transaction_mode: Optional[str] = None
    variety: Optional[str] = None

    class Config:
        extra = 'ignore'


class LeagueEntry(BaseModel):
    """A manager's team in the league.

    ``id`` is the league-entry id used by matches and standings, ``entry_id``
    is the external roster id used by picks, transactions and draft choices.
    """

    id: int
    entry_id: int
    entry_name: str = ''
    player_first_name: str = ''
    player_last_name: str = ''
    short_name: str = ''
    waiver_pick: Optional[int] = None

    class Config:
        extra = 'ignore'

    @property
    def manager_name(self) -> str:
        return f'{self.player_first_name} {self.player_last_name}'.strip()


class Match(BaseModel):
    """Head-to-head fixture between two league entries."""

    event: int = Field(..., ge=1)
    finished: bool = False
    started: bool = False
    league_entry_1: int
    league_entry_1_points: int = 0
    league_entry_2: int
    league_entry_2_points: int = 0
    winning_league_entry: Optional[int] = None
    winning_method: Optional[str] = None

    class Config:
        extra = 'ignore'


class Standing(BaseModel):
    """Authoritative season standing for one league entry."""

    league_entry: int
    rank: int = 0
    last_rank: Optional[int] = None
    rank_sort: Optional[int] = None
    matches_played: int = 0
    matches_won: int = 0
    matches_drawn: int = 0
    matches_lost: int = 0
    points_for: int = 0
    points_against: int = 0
    total: int = 0

    class Config:
        extra = 'ignore'


class LeagueDetails(BaseModel):
    """Complete /league/{id}/details payload."""

    league: League
    league_entries: list[LeagueEntry] = Field(default_factory=list)
    matches: list[Match] = Field(default_factory=list)
    standings: list[Standing] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# Element ownership


class ElementStatus(BaseModel):
    """Ownership of one catalog player."""

    element: int
    owner: Optional[int] = None
    status: str = 'a'
    in_accepted_trade: bool = False

    class Config:
        extra = 'ignore'


class ElementStatusResponse(BaseModel):
    """Complete /league/{id}/element-status payload."""

    element_status: list[ElementStatus] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# Bootstrap catalog


class Player(BaseModel):
    """Catalog player with season-aggregate stats."""

    id: int
    code: Optional[int] = None
    first_name: str = ''
    second_name: str = ''
    web_name: str = ''
    team: int = 0
    element_type: int = 0
    total_points: int = 0
    goals_scored: int = 0
    assists: int = 0
    clean_sheets: int = 0
    goals_conceded: int = 0
    saves: int = 0
    bonus: int = 0
    form: str = '0.0'
    points_per_game: str = '0.0'
    now_cost: Optional[int] = None
    status: str = 'a'
    news: str = ''

    class Config:
        extra = 'ignore'


class ElementType(BaseModel):
    """Position class."""

    id: int
    plural_name: str = ''
    plural_name_short: str = ''
    singular_name: str = ''
    singular_name_short: str = ''

    class Config:
        extra = 'ignore'


class Team(BaseModel):
    """Real-world club."""

    id: int
    name: str = ''
    short_name: str = Field('', max_length=5)

    class Config:
        extra = 'ignore'


class Event(BaseModel):
    """Gameweek in the event calendar."""

    id: int = Field(..., ge=1)
    name: str = ''
    deadline_time: Optional[str] = None
    finished: bool = False
    is_current: bool = False
    is_next: bool = False

    class Config:
        extra = 'ignore'


class Events(BaseModel):
    """Event calendar with the current gameweek pointer."""

    current: Optional[int] = None
    data: list[Event] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


class BootstrapStatic(BaseModel):
    """Complete /bootstrap-static payload."""

    elements: list[Player] = Field(default_factory=list)
    element_types: list[ElementType] = Field(default_factory=list)
    teams: list[Team] = Field(default_factory=list)
    events: Events = Field(default_factory=Events)

    class Config:
        extra = 'ignore'


# Transactions


class Transaction(BaseModel):
    """Waiver or free-agent roster move."""

    id: int
    added: str
    element_in: int
    element_out: int
    entry: int
    event: int
    kind: TransactionKind
    result: TransactionResult = TransactionResult.PENDING
    index: Optional[int] = None
    priority: Optional[int] = None

    @field_validator('result', mode='before')
    @classmethod
    def unknown_result_is_pending(cls, v):
        """Upstream reports unprocessed moves with a null result. Unknown codes are treated the same."""
        if v is None or v not in [r.value for r in TransactionResult]:
            return TransactionResult.PENDING
        return v

    @field_validator('kind', mode='before')
    @classmethod
    def unknown_kind_is_other(cls, v):
        if v not in [k.value for k in TransactionKind]:
            return TransactionKind.OTHER
        return v

    class Config:
        extra = 'ignore'


class TransactionsResponse(BaseModel):
    """Complete /draft/league/{id}/transactions payload."""

    transactions: list[Transaction] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# Entry picks


class Pick(BaseModel):
    """One roster slot in an entry's gameweek lineup."""

    element: int
    position: int = Field(..., ge=1)
    is_captain: bool = False
    is_vice_captain: bool = False
    multiplier: int = 1

    class Config:
        extra = 'ignore'


class EntryPicksResponse(BaseModel):
    """Complete /entry/{entry_id}/event/{event} payload."""

    picks: list[Pick] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# Live scoring


class LiveStats(BaseModel):
    """Gameweek stat block for one player."""

    minutes: int = 0
    total_points: int = 0
    goals_scored: int = 0
    assists: int = 0
    clean_sheets: int = 0
    goals_conceded: int = 0
    bonus: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    own_goals: int = 0
    penalties_missed: int = 0
    penalties_saved: int = 0
    saves: int = 0
    clearances_blocks_interceptions: int = 0
    recoveries: int = 0
    tackles: int = 0
    defensive_contribution: int = 0

    class Config:
        extra = 'ignore'


class ExplainStat(BaseModel):
    """Points attributed to one stat in one fixture."""

    name: str = ''
    stat: str
    value: int = 0
    points: int = 0

    class Config:
        extra = 'ignore'


class LiveElement(BaseModel):
    """Live data for one player: gameweek stats plus per-fixture explain blocks."""

    stats: LiveStats = Field(default_factory=LiveStats)
    explain: list[tuple[list[ExplainStat], int]] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


class LiveFixture(BaseModel):
    """Real-world fixture in the live gameweek payload."""

    id: int
    event: Optional[int] = None
    team_h: int
    team_a: int
    started: bool = False
    finished: bool = False

    class Config:
        extra = 'ignore'


class LiveEventResponse(BaseModel):
    """Complete /event/{event}/live payload."""

    elements: dict[str, LiveElement] = Field(default_factory=dict)
    fixtures: list[LiveFixture] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# Draft choices


class DraftChoice(BaseModel):
    """One pick made on draft day."""

    id: int
    element: Optional[int] = None
    entry: int
    entry_name: str = ''
    player_first_name: str = ''
    player_last_name: str = ''
    round: int = Field(..., ge=1)
    pick: int = 0
    index: int = 0

    class Config:
        extra = 'ignore'


class DraftChoicesResponse(BaseModel):
    """Complete /draft/{id}/choices payload."""

    choices: list[DraftChoice] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# Configuration


class LeagueConfig(BaseModel):
    """League configuration settings."""

    league_id: int = Field(..., ge=1)
    league_name: str = ''
    championship_start_gameweek: int = Field(DEFAULT_CHAMPIONSHIP_START, ge=1, le=38)
    form_count: int = Field(DEFAULT_FORM_COUNT, ge=1, le=38)
    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = Field(DEFAULT_TIMEOUT_SEC, gt=0)
    max_workers: int = Field(DEFAULT_MAX_WORKERS, ge=1, le=32)
    waiver_deadline_offset_hours: int = Field(WAIVER_DEADLINE_OFFSET_HOURS, ge=0, le=168)

    @field_validator('api_base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Ensure the base URL is absolute and has no trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f'api_base_url must be an http(s) URL, got {v}')
        return v.rstrip('/')

    class Config:
        extra = 'forbid'
