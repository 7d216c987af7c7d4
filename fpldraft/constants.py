"""Constants and mappings for the draft league dashboard."""

# Element type -> short position name
POSITION_NAMES = {
    1: 'GK',
    2: 'DEF',
    3: 'MID',
    4: 'FWD',
}

# Roster slots 1-11 start, 12+ sit on the bench
STARTER_SLOTS = 11

# Placeholders for ids missing from a payload
UNKNOWN_NAME = 'Unknown'
UNKNOWN_TEAM = '???'
UNKNOWN_POSITION = 'UNK'

# League points awarded per result in the windowed table
POINTS_PER_WIN = 3
POINTS_PER_DRAW = 1

DEFAULT_FORM_COUNT = 5
DEFAULT_CHAMPIONSHIP_START = 20

# Waivers close this many hours before the lineup deadline
WAIVER_DEADLINE_OFFSET_HOURS = 24

DEFAULT_BASE_URL = 'https://draft.premierleague.com/api'
DEFAULT_TIMEOUT_SEC = 20
DEFAULT_MAX_WORKERS = 8

PLAYER_PHOTO_URL = 'https://resources.premierleague.com/premierleague/photos/players/110x140/p{code}.png'

# Live explain stat identifiers summed across a player's gameweek fixtures
EXPLAIN_STATS = {
    'minutes': 'minutes',
    'goals_scored': 'goals',
    'assists': 'assists',
    'bonus': 'bonus',
    'yellow_cards': 'yellow_cards',
    'red_cards': 'red_cards',
    'own_goals': 'own_goals',
    'penalties_missed': 'penalties_missed',
    'saves': 'saves',
}
