"""Shared payload fixtures for dashboard tests."""

from unittest.mock import MagicMock, Mock

import pytest
import requests

from fpldraft.resolver import EntityResolver
from fpldraft.schemas import BootstrapStatic, LeagueDetails, Match

BASE_URL = 'https://example.com/api'

TEAMS = [
    {'id': 1, 'name': 'Arsenal', 'short_name': 'ARS'},
    {'id': 2, 'name': 'Chelsea', 'short_name': 'CHE'},
    {'id': 3, 'name': 'Liverpool', 'short_name': 'LIV'},
    {'id': 4, 'name': 'Man Utd', 'short_name': 'MUN'},
]


def make_match(event, e1, p1, e2, p2, finished=True, started=True, winner='auto'):
    """Build a Match; the winner defaults to whoever scored more."""
    if winner == 'auto':
        winner = e1 if p1 > p2 else e2 if p2 > p1 else None
    return Match(
        event=event,
        finished=finished,
        started=started,
        league_entry_1=e1,
        league_entry_1_points=p1,
        league_entry_2=e2,
        league_entry_2_points=p2,
        winning_league_entry=winner if finished else None,
    )


def make_player(player_id, web_name, team, element_type, total_points=0, code=None):
    return {
        'id': player_id,
        'code': code,
        'first_name': web_name,
        'second_name': web_name,
        'web_name': web_name,
        'team': team,
        'element_type': element_type,
        'total_points': total_points,
    }


@pytest.fixture
def league_details_data():
    """Raw /league/{id}/details payload with four entries."""
    return {
        'league': {'id': 37265, 'name': 'Hogwarts', 'start_event': 1, 'stop_event': 38},
        'league_entries': [
            {'id': 1, 'entry_id': 101, 'entry_name': 'Gryffindor', 'player_first_name': 'Harry',
             'player_last_name': 'Potter', 'short_name': 'GRY', 'waiver_pick': 4},
            {'id': 2, 'entry_id': 102, 'entry_name': 'Slytherin', 'player_first_name': 'Draco',
             'player_last_name': 'Malfoy', 'short_name': 'SLY', 'waiver_pick': 3},
            {'id': 3, 'entry_id': 103, 'entry_name': 'Ravenclaw', 'player_first_name': 'Luna',
             'player_last_name': 'Lovegood', 'short_name': 'RAV', 'waiver_pick': 2},
            {'id': 4, 'entry_id': 104, 'entry_name': 'Hufflepuff', 'player_first_name': 'Cedric',
             'player_last_name': 'Diggory', 'short_name': 'HUF', 'waiver_pick': 1},
        ],
        'matches': [
            {'event': 1, 'finished': True, 'started': True, 'league_entry_1': 1,
             'league_entry_1_points': 50, 'league_entry_2': 2, 'league_entry_2_points': 40,
             'winning_league_entry': 1, 'winning_method': None},
            {'event': 1, 'finished': True, 'started': True, 'league_entry_1': 3,
             'league_entry_1_points': 45, 'league_entry_2': 4, 'league_entry_2_points': 45,
             'winning_league_entry': None, 'winning_method': None},
            {'event': 2, 'finished': True, 'started': True, 'league_entry_1': 1,
             'league_entry_1_points': 30, 'league_entry_2': 3, 'league_entry_2_points': 60,
             'winning_league_entry': 3, 'winning_method': None},
            {'event': 2, 'finished': True, 'started': True, 'league_entry_1': 2,
             'league_entry_1_points': 55, 'league_entry_2': 4, 'league_entry_2_points': 35,
             'winning_league_entry': 2, 'winning_method': None},
            {'event': 3, 'finished': False, 'started': True, 'league_entry_1': 1,
             'league_entry_1_points': 0, 'league_entry_2': 4, 'league_entry_2_points': 0,
             'winning_league_entry': None, 'winning_method': None},
            {'event': 3, 'finished': False, 'started': True, 'league_entry_1': 2,
             'league_entry_1_points': 0, 'league_entry_2': 3, 'league_entry_2_points': 0,
             'winning_league_entry': None, 'winning_method': None},
            {'event': 4, 'finished': False, 'started': False, 'league_entry_1': 1,
             'league_entry_1_points': 0, 'league_entry_2': 2, 'league_entry_2_points': 0,
             'winning_league_entry': None, 'winning_method': None},
            {'event': 4, 'finished': False, 'started': False, 'league_entry_1': 3,
             'league_entry_1_points': 0, 'league_entry_2': 4, 'league_entry_2_points': 0,
             'winning_league_entry': None, 'winning_method': None},
        ],
        'standings': [
            {'league_entry': 1, 'rank': 2, 'matches_played': 2, 'matches_won': 1,
             'matches_drawn': 0, 'matches_lost': 1, 'points_for': 80, 'points_against': 100,
             'total': 3},
            {'league_entry': 2, 'rank': 1, 'matches_played': 2, 'matches_won': 1,
             'matches_drawn': 0, 'matches_lost': 1, 'points_for': 95, 'points_against': 85,
             'total': 3},
            {'league_entry': 3, 'rank': 3, 'matches_played': 2, 'matches_won': 1,
             'matches_drawn': 1, 'matches_lost': 0, 'points_for': 105, 'points_against': 75,
             'total': 4},
            {'league_entry': 4, 'rank': 4, 'matches_played': 2, 'matches_won': 0,
             'matches_drawn': 1, 'matches_lost': 1, 'points_for': 80, 'points_against': 100,
             'total': 1},
        ],
    }


@pytest.fixture
def bootstrap_data():
    """Raw /bootstrap-static payload."""
    elements = [
        make_player(10, 'Raya', 1, 1, total_points=90, code=1010),
        make_player(11, 'Saliba', 1, 2, total_points=80, code=1011),
        make_player(12, 'Saka', 1, 3, total_points=120, code=1012),
        make_player(13, 'Havertz', 1, 4, total_points=70),
        make_player(20, 'Sanchez', 2, 1, total_points=60),
        make_player(21, 'Colwill', 2, 2, total_points=50),
        make_player(22, 'Palmer', 2, 3, total_points=150, code=1022),
        make_player(23, 'Jackson', 2, 4, total_points=85),
        make_player(30, 'Alisson', 3, 1, total_points=75),
        make_player(31, 'Van Dijk', 3, 2, total_points=95),
        make_player(32, 'Salah', 3, 3, total_points=200, code=1032),
        make_player(33, 'Nunez', 3, 4, total_points=65),
        make_player(40, 'Onana', 4, 1, total_points=55),
        make_player(41, 'Dalot', 4, 2, total_points=45),
        make_player(42, 'Fernandes', 4, 3, total_points=110),
        make_player(43, 'Hojlund', 4, 4, total_points=40),
    ]
    return {
        'elements': elements,
        'element_types': [
            {'id': 1, 'singular_name_short': 'GKP'},
            {'id': 2, 'singular_name_short': 'DEF'},
            {'id': 3, 'singular_name_short': 'MID'},
            {'id': 4, 'singular_name_short': 'FWD'},
        ],
        'teams': TEAMS,
        'events': {
            'current': 3,
            'data': [
                {'id': 1, 'name': 'Gameweek 1', 'deadline_time': '2025-08-15T17:30:00Z', 'finished': True},
                {'id': 2, 'name': 'Gameweek 2', 'deadline_time': '2025-08-22T17:30:00Z', 'finished': True},
                {'id': 3, 'name': 'Gameweek 3', 'deadline_time': '2025-08-29T17:30:00Z', 'is_current': True},
                {'id': 4, 'name': 'Gameweek 4', 'deadline_time': '2025-09-12T17:30:00Z', 'is_next': True},
            ],
        },
    }


@pytest.fixture
def league_details(league_details_data):
    return LeagueDetails.model_validate(league_details_data)


@pytest.fixture
def bootstrap(bootstrap_data):
    return BootstrapStatic.model_validate(bootstrap_data)


@pytest.fixture
def resolver(league_details, bootstrap):
    return EntityResolver.build(league_details, bootstrap)


@pytest.fixture
def entries(league_details):
    return league_details.league_entries


def make_response(payload=None, status_error=None, json_error=None):
    response = Mock()
    if status_error:
        response.raise_for_status.side_effect = status_error
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_session(routes):
    """Session mock answering GETs from a path -> payload (or response) mapping."""
    session = MagicMock()

    def get(url, timeout=None):
        path = url[len(BASE_URL):]
        if path not in routes:
            return make_response(status_error=requests.HTTPError(f'404 for {path}'))
        value = routes[path]
        return value if isinstance(value, Mock) else make_response(value)

    session.get.side_effect = get
    return session
