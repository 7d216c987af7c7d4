from .schemas import (
    LeagueConfig,
    LeagueDetails,
    BootstrapStatic,
    TransactionKind,
    TransactionResult,
)
from .models import (
    FixtureView,
    StandingRecord,
    TeamPointsBreakdown,
    DeadlineInfo,
    Dashboard,
)
from .resolver import EntityResolver, get_position_name
from .fixtures import (
    project_fixtures,
    display_points,
    upcoming_fixtures,
    results_by_gameweek,
    gameweek_status,
)
from .standings import (
    season_standings,
    windowed_standings,
    championship_table,
    managers_with_squads,
    season_table,
)
from .form import team_form, head_to_head
from .transactions import classify_transactions
from .breakdown import build_points_breakdown, build_all_breakdowns
from .deadlines import current_event, resolve_deadlines, transactions_display_event
from .whatif import aggregate_what_if
from .data_fetcher import DraftDataFetcher, UpstreamError
from .dashboard import build_dashboard

__all__ = [
    # Schemas
    'LeagueConfig',
    'LeagueDetails',
    'BootstrapStatic',
    'TransactionKind',
    'TransactionResult',
    # Models
    'FixtureView',
    'StandingRecord',
    'TeamPointsBreakdown',
    'DeadlineInfo',
    'Dashboard',
    # Lookups
    'EntityResolver',
    'get_position_name',
    # Fixtures
    'project_fixtures',
    'display_points',
    'upcoming_fixtures',
    'results_by_gameweek',
    'gameweek_status',
    # Standings
    'season_standings',
    'windowed_standings',
    'championship_table',
    'managers_with_squads',
    'season_table',
    # Form and head-to-head
    'team_form',
    'head_to_head',
    # Transactions
    'classify_transactions',
    # Live breakdowns
    'build_points_breakdown',
    'build_all_breakdowns',
    # Deadlines
    'current_event',
    'resolve_deadlines',
    'transactions_display_event',
    # What-If
    'aggregate_what_if',
    # Data fetching
    'DraftDataFetcher',
    'UpstreamError',
    'build_dashboard',
]
