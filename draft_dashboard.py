#!/usr/bin/env python3
"""
Draft League Dashboard CLI

Fetches the league from the draft API and prints standings, the championship
table, fixtures, transactions and the What-If leaderboard.

Usage:
    python draft_dashboard.py
    python draft_dashboard.py --league-id 37265 --history --output web/data/dashboard.json
"""

import argparse
import logging
import sys
from pathlib import Path

from fpldraft import build_dashboard, display_points, DraftDataFetcher, UpstreamError
from fpldraft.config import get_config, load_config
from fpldraft.logging_config import setup_logging
from fpldraft.models import Dashboard
from fpldraft.utils import save_json


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draft league dashboard report")
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to league config JSON (defaults to data/league_config.json)",
    )
    parser.add_argument(
        "--league-id", "-l",
        type=int,
        default=None,
        help="Override the configured league id",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Also save the dashboard as JSON to this path",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Rebuild points breakdowns for every finished gameweek",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print warnings and errors",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    return parser.parse_args(argv)


def print_report(dashboard: Dashboard) -> None:
    print("=" * 60)
    print(f"{dashboard.league_name} - Gameweek {dashboard.current_event}")
    print("=" * 60)

    deadlines = dashboard.deadlines
    if deadlines.lineup_deadline:
        print(f"\nGW{deadlines.next_event} waivers close: {deadlines.waiver_deadline:%a %d %b %H:%M} UTC")
        print(f"GW{deadlines.next_event} lineups lock:  {deadlines.lineup_deadline:%a %d %b %H:%M} UTC")

    print("\nSTANDINGS")
    for m in dashboard.managers:
        s = m.standing
        print(
            f"  {s.rank:>2}. {m.entry.entry_name:<24} "
            f"{s.matches_won}-{s.matches_drawn}-{s.matches_lost}  "
            f"{s.points_for:>5} pts  {s.total:>3}"
        )

    print("\nCHAMPIONSHIP")
    for row in dashboard.championship:
        r = row.record
        form = "".join(dashboard.form.get(row.entry.id, []))
        print(
            f"  {row.rank:>2}. {row.entry.entry_name:<24} "
            f"{r.wins}-{r.draws}-{r.losses}  {r.point_difference:+5}  {row.total:>3}  {form}"
        )

    print(f"\nFIXTURES GW{dashboard.current_event}")
    for f in dashboard.current_fixtures:
        p1, p2 = display_points(f, dashboard.points_breakdown)
        status = " (live)" if f.is_live else ""
        print(f"  {f.team1_name:>24} {p1:>3} - {p2:<3} {f.team2_name}{status}")

    print(f"\nTRANSACTIONS GW{dashboard.transactions_event}")
    if not dashboard.transactions:
        print("  None")
    for t in dashboard.transactions:
        print(
            f"  [{t.type}] {t.manager_name}: "
            f"+{t.player_in} ({t.player_in_team}) -{t.player_out} ({t.player_out_team})"
        )

    if dashboard.what_if:
        print("\nWHAT IF (draft-day squads)")
        for rank, squad in enumerate(dashboard.what_if, 1):
            print(f"  {rank:>2}. {squad.team_name:<24} {squad.total_points:>5} pts")


def main(argv=None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logger = setup_logging(level=level)

    try:
        config = load_config(args.config) if args.config else get_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Could not load config: {e}")
        return 1

    if args.league_id is not None:
        config = config.model_copy(update={"league_id": args.league_id})

    fetcher = DraftDataFetcher.from_config(config)
    try:
        dashboard = build_dashboard(fetcher, config, include_history=args.history)
    except UpstreamError as e:
        logger.error(f"Failed to load league data: {e}")
        print("❌ Could not reach the draft API. Please try again later.")
        return 1

    print_report(dashboard)

    if args.output:
        save_json(Path(args.output), dashboard.to_json_payload())
        print(f"\nDashboard saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
