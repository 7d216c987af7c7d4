"""Assemble every dashboard view for one request.

Primary payloads (league details, ownership, catalog, transactions) are
required: if any of them fails the whole build fails with ``UpstreamError``.
Live breakdowns and draft choices are optional enrichments that degrade to
empty results when their fetch fails.
"""

import logging
from datetime import datetime
from typing import Optional

from .breakdown import breakdown_events, build_points_breakdown
from .data_fetcher import DraftDataFetcher, UpstreamError
from .deadlines import current_event, resolve_deadlines, transactions_display_event
from .fixtures import project_fixtures
from .form import head_to_head, team_form
from .models import Dashboard, TeamPointsBreakdown, WhatIfSquad
from .resolver import EntityResolver
from .schemas import LeagueConfig, LeagueDetails
from .standings import (
    championship_table,
    managers_with_squads,
    season_table,
    windowed_standings,
)
from .transactions import classify_transactions
from .utils import utc_now
from .validators import (
    validate_breakdown,
    validate_fixture_entries,
    validate_head_to_head,
    validate_standings,
)
from .whatif import aggregate_what_if

logger = logging.getLogger('fpldraft.dashboard')


def fetch_points_breakdown(
    fetcher: DraftDataFetcher,
    league_details: LeagueDetails,
    resolver: EntityResolver,
    event: int,
) -> dict[int, TeamPointsBreakdown]:
    """
    Fetch live data and every entry's picks for a gameweek, then rebuild scores.

    Raises:
        UpstreamError: If the live payload or any entry's picks fail
    """
    entries = league_details.league_entries
    live = fetcher.fetch_live_event(event)
    picks = fetcher.fetch_all_picks([e.entry_id for e in entries], event)
    return build_points_breakdown(entries, picks, live, resolver)


def load_points_breakdown(
    fetcher: DraftDataFetcher,
    league_details: LeagueDetails,
    resolver: EntityResolver,
    event: int,
) -> dict[int, TeamPointsBreakdown]:
    """Points breakdown for a gameweek, or an empty dict if it can't be fetched."""
    try:
        return fetch_points_breakdown(fetcher, league_details, resolver, event)
    except UpstreamError as e:
        logger.warning(f'Points breakdown unavailable for GW{event}: {e}')
        return {}


def load_results_breakdowns(
    fetcher: DraftDataFetcher,
    league_details: LeagueDetails,
    resolver: EntityResolver,
    event: int,
) -> dict[int, dict[int, TeamPointsBreakdown]]:
    """Breakdowns for every finished gameweek (and the current one once started)."""
    return {
        gw: load_points_breakdown(fetcher, league_details, resolver, gw)
        for gw in breakdown_events(league_details.matches, event)
    }


def load_what_if(fetcher: DraftDataFetcher, resolver: EntityResolver) -> list[WhatIfSquad]:
    """What-If leaderboard, or an empty list if draft choices can't be fetched."""
    try:
        choices = fetcher.fetch_draft_choices()
    except UpstreamError as e:
        logger.warning(f'Draft choices unavailable: {e}')
        return []
    return aggregate_what_if(choices.choices, resolver)


def build_dashboard(
    fetcher: DraftDataFetcher,
    config: LeagueConfig,
    now: Optional[datetime] = None,
    include_history: bool = False,
) -> Dashboard:
    """
    Build the full dashboard.

    Args:
        fetcher: Upstream data source
        config: League configuration
        now: Wall-clock time (default: current UTC time)
        include_history: Also rebuild breakdowns for past gameweeks

    Returns:
        Dashboard

    Raises:
        UpstreamError: If a primary payload can't be fetched
    """
    now = now or utc_now()

    fetcher.load_primary()
    details = fetcher.league_details
    bootstrap = fetcher.bootstrap
    entries = details.league_entries
    matches = details.matches

    resolver = EntityResolver.build(details, bootstrap)
    event = current_event(bootstrap)
    deadlines = resolve_deadlines(
        bootstrap.events.data, now, event, config.waiver_deadline_offset_hours
    )
    tx_event = transactions_display_event(event, deadlines, now)
    logger.info(f'Building dashboard for GW{event} (transactions GW{tx_event})')

    managers = season_table(managers_with_squads(details, fetcher.element_status, resolver))
    all_fixtures = project_fixtures(matches, resolver)
    current_fixtures = [f for f in all_fixtures if f.event == event]

    records = windowed_standings(entries, matches, config.championship_start_gameweek)
    h2h = head_to_head(entries, matches)

    points_breakdown = load_points_breakdown(fetcher, details, resolver, event)
    results_breakdowns = {}
    if include_history:
        results_breakdowns = load_results_breakdowns(fetcher, details, resolver, event)

    warnings = []
    warnings.extend(validate_fixture_entries(matches, entries))
    warnings.extend(validate_standings(records, matches, config.championship_start_gameweek))
    warnings.extend(validate_head_to_head(h2h))
    for breakdown in points_breakdown.values():
        warnings.extend(validate_breakdown(breakdown))
    for warning in warnings:
        logger.warning(warning)

    return Dashboard(
        league_name=details.league.name or config.league_name,
        current_event=event,
        transactions_event=tx_event,
        deadlines=deadlines,
        managers=managers,
        current_fixtures=current_fixtures,
        all_fixtures=all_fixtures,
        championship=championship_table(entries, records),
        form=team_form(entries, matches, config.form_count),
        head_to_head=h2h,
        transactions=classify_transactions(fetcher.transactions.transactions, resolver, tx_event),
        points_breakdown=points_breakdown,
        results_breakdowns=results_breakdowns,
        what_if=load_what_if(fetcher, resolver),
        warnings=warnings,
    )
