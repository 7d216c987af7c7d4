"""Unit tests for form and head-to-head records."""

from conftest import make_match

from fpldraft.form import head_to_head, team_form


class TestTeamForm:
    """Tests for team_form."""

    def test_most_recent_first(self, entries, league_details):
        """Test results are listed newest gameweek first."""
        form = team_form(entries, league_details.matches)
        assert form[1] == ['L', 'W']
        assert form[2] == ['W', 'L']
        assert form[3] == ['W', 'D']
        assert form[4] == ['L', 'D']

    def test_limited_to_count(self, entries):
        """Test that only the last ``count`` results are kept."""
        matches = [make_match(gw, 1, 50 + gw, 2, 50) for gw in range(1, 9)]
        form = team_form(entries, matches, count=3)
        assert form[1] == ['W', 'W', 'W']
        assert all(len(results) <= 3 for results in form.values())

    def test_unfinished_ignored(self, entries):
        """Test that live matches are not part of form."""
        matches = [
            make_match(1, 1, 40, 2, 50),
            make_match(2, 1, 70, 2, 10, finished=False, started=True),
        ]
        assert team_form(entries, matches)[1] == ['L']

    def test_entry_without_matches(self, entries):
        """Test that an entry without finished matches has empty form."""
        assert team_form(entries, [])[3] == []


class TestHeadToHead:
    """Tests for head_to_head."""

    def test_all_pairs_present(self, entries):
        """Test every ordered pair of distinct entries has a record."""
        h2h = head_to_head(entries, [])
        for a in (1, 2, 3, 4):
            assert set(h2h[a]) == {1, 2, 3, 4} - {a}
            assert all(rec.played == 0 for rec in h2h[a].values())

    def test_mirrored(self, entries, league_details):
        """Test a's record against b mirrors b's record against a."""
        h2h = head_to_head(entries, league_details.matches)
        for a, row in h2h.items():
            for b, rec in row.items():
                other = h2h[b][a]
                assert rec.wins == other.losses
                assert rec.draws == other.draws
                assert rec.points_for == other.points_against

    def test_repeat_meetings_accumulate(self, entries):
        """Test two meetings between the same pair add up."""
        matches = [make_match(1, 1, 50, 2, 40), make_match(20, 2, 60, 1, 30)]
        h2h = head_to_head(entries, matches)
        assert h2h[1][2].wins == 1
        assert h2h[1][2].losses == 1
        assert h2h[1][2].points_for == 80
        assert h2h[2][1].points_for == 100

    def test_unknown_entry_skipped(self, entries):
        """Test matches naming unknown entries are ignored."""
        h2h = head_to_head(entries, [make_match(1, 1, 50, 99, 40)])
        assert 99 not in h2h
        assert all(rec.played == 0 for rec in h2h[1].values())
