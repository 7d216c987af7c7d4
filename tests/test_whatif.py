"""Unit tests for the What-If leaderboard."""

from fpldraft.schemas import DraftChoicesResponse
from fpldraft.whatif import aggregate_what_if


def make_choices(*picks):
    """Draft choices from (entry, element, round) tuples."""
    return DraftChoicesResponse.model_validate({
        'choices': [
            {'id': i, 'entry': entry, 'element': element, 'round': rnd, 'pick': i, 'index': i}
            for i, (entry, element, rnd) in enumerate(picks, 1)
        ],
    }).choices


class TestAggregateWhatIf:
    """Tests for aggregate_what_if."""

    def test_sorted_by_season_points(self, resolver):
        """Test squads are valued at season points and sorted highest first."""
        choices = make_choices(
            (101, 12, 1), (101, 13, 2),   # 120 + 70
            (102, 32, 1), (102, 41, 2),   # 200 + 45
            (103, 43, 1),                 # 40
        )
        squads = aggregate_what_if(choices, resolver)
        assert [(s.entry_id, s.total_points) for s in squads] == [(102, 245), (101, 190), (103, 40)]
        assert squads[0].team_name == 'Slytherin'
        assert squads[0].manager_name == 'Draco Malfoy'

    def test_players_in_round_order(self, resolver):
        """Test players are listed in draft-round order with resolved names."""
        squads = aggregate_what_if(make_choices((101, 22, 2), (101, 10, 1)), resolver)
        players = squads[0].players
        assert [p.draft_round for p in players] == [1, 2]
        assert players[0].name == 'Raya'
        assert players[0].position_name == 'GK'
        assert players[1].team_short_name == 'CHE'

    def test_entry_without_choices_omitted(self, resolver):
        """Test entries with no draft choices have no squad."""
        squads = aggregate_what_if(make_choices((101, 12, 1)), resolver)
        assert [s.entry_id for s in squads] == [101]

    def test_unknown_entry_dropped(self, resolver):
        """Test choices for an entry outside the league are ignored."""
        assert aggregate_what_if(make_choices((999, 12, 1)), resolver) == []

    def test_unknown_player_scores_zero(self, resolver):
        """Test a drafted player missing from the catalog counts as zero."""
        squads = aggregate_what_if(make_choices((101, 5000, 1), (101, 12, 2)), resolver)
        assert squads[0].total_points == 120
        assert squads[0].players[0].name == 'Unknown'
        assert squads[0].players[0].position_name == 'UNK'

    def test_empty(self, resolver):
        """Test no draft choices gives an empty leaderboard."""
        assert aggregate_what_if([], resolver) == []
