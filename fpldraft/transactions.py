"""Accepted waiver and free-agent moves for a gameweek."""

from datetime import datetime, timezone
from typing import Iterable

from .models import TransactionView
from .resolver import EntityResolver
from .schemas import Transaction, TransactionKind, TransactionResult
from .utils import parse_timestamp

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _added_at(t: Transaction) -> datetime:
    return parse_timestamp(t.added) or _EPOCH


def classify_transactions(
    transactions: Iterable[Transaction],
    resolver: EntityResolver,
    current_event: int,
) -> list[TransactionView]:
    """
    Accepted moves for one gameweek in settlement order.

    Waivers come first, in the order the waiver run processed them
    (ascending index); free-agent moves follow, oldest first. Declined and
    pending moves never touched a roster and are dropped, as are moves of an
    unrecognised kind.

    Args:
        transactions: Transactions feed
        resolver: Entity lookups
        current_event: Gameweek to show

    Returns:
        List of TransactionView
    """
    accepted = [
        t for t in transactions
        if t.result == TransactionResult.ACCEPTED and t.event == current_event
    ]

    waivers = sorted(
        (t for t in accepted if t.kind == TransactionKind.WAIVER),
        key=lambda t: t.index or 0,
    )
    frees = sorted(
        (t for t in accepted if t.kind == TransactionKind.FREE),
        key=_added_at,
    )

    views = []
    for t in waivers + frees:
        in_player = resolver.player(t.element_in)
        out_player = resolver.player(t.element_out)
        views.append(
            TransactionView(
                id=t.id,
                event=t.event,
                manager_name=resolver.manager_name_by_external_id(t.entry),
                player_in=resolver.player_name(t.element_in),
                player_in_team=resolver.team_short_name(in_player.team) if in_player else '',
                player_in_photo=resolver.player_photo(t.element_in),
                player_out=resolver.player_name(t.element_out),
                player_out_team=resolver.team_short_name(out_player.team) if out_player else '',
                player_out_photo=resolver.player_photo(t.element_out),
                type='waiver' if t.kind == TransactionKind.WAIVER else 'free',
                added=t.added,
            )
        )
    return views
