"""tests/test_analysis.py"""
from datetime import date

from src.analysis.regularity_reporter import analyze_regularity
from src.analysis.statistics_reporter import compute_statistics, get_top_numbers, round_half_up
from src.schemas.lottery import DrawRecord


def record(iso_date: str, winning, machine=(), category="Etoile") -> DrawRecord:
    return DrawRecord(
        category=category,
        date=date.fromisoformat(iso_date),
        winning_numbers=winning,
        machine_numbers=machine,
    )


class TestTopNumbers:
    def test_ties_at_boundary_are_kept(self):
        freqs = {4: 2, 1: 3, 5: 2, 2: 3, 3: 3}
        assert sorted(get_top_numbers(freqs, 3)) == [1, 2, 3]

    def test_truncated_after_ties(self):
        freqs = {1: 5, 2: 3, 3: 3, 4: 3, 5: 1}
        assert get_top_numbers(freqs, 2) == [1, 2]

    def test_bottom(self):
        freqs = {1: 3, 2: 3, 3: 3, 4: 2, 5: 2}
        assert sorted(get_top_numbers(freqs, 2, ascending=True)) == [4, 5]

    def test_fewer_entries_than_requested(self):
        assert get_top_numbers({7: 1}, 5) == [7]
        assert get_top_numbers({}, 5) == []

    def test_equal_counts_rank_by_number(self):
        assert get_top_numbers({9: 2, 3: 2, 7: 2}, 2) == [3, 7]
        assert get_top_numbers({9: 1, 5: 4, 3: 1}, 2, ascending=True) == [3, 9]

    def test_round_half_up(self):
        assert round_half_up(0.125) == 0.13
        assert round_half_up(2.675) == 2.68
        assert round_half_up(1 / 3) == 0.33


class TestStatisticsReporter:
    def setup_method(self):
        self.records = [
            record("2024-01-01", [1, 2, 3, 4, 5], machine=[0, 0, 0, 0, 0]),
            record("2024-01-08", [2, 4, 6, 8, 11], machine=[10, 20, 30, 40, 50]),
        ]

    def test_empty_history(self):
        report = compute_statistics([], "Etoile")
        assert report.analyzed_count == 0
        assert report.winning_frequencies == {}
        assert report.machine_frequencies == {}
        assert report.most_frequent_winning == []
        assert report.odd_even.average_odds == 0
        assert report.odd_even.average_evens == 0
        assert report.odd_even.draws_with_x_odds == {"0": 0, "1": 0, "2": 0, "3": 0, "4": 0, "5": 0}
        assert report.sums.average_sum == 0
        assert report.sums.min_sum is None
        assert report.sums.max_sum is None
        assert report.sums.sum_frequencies == {}

    def test_frequencies(self):
        report = compute_statistics(self.records, "Etoile")
        assert report.analyzed_count == 2
        assert report.winning_frequencies[2] == 2
        assert report.winning_frequencies[11] == 1
        assert report.most_frequent_winning[:2] == [2, 4]

    def test_machine_numbers_absent_when_zero_quintuple(self):
        report = compute_statistics(self.records[:1], "Etoile")
        assert report.machine_frequencies == {}
        assert report.most_frequent_machine == []

    def test_machine_frequencies(self):
        report = compute_statistics(self.records, "Etoile")
        assert report.machine_frequencies == {10: 1, 20: 1, 30: 1, 40: 1, 50: 1}

    def test_pair_table_of_one_draw(self):
        report = compute_statistics([record("2024-02-01", [5, 12, 40, 67, 88])], "Etoile")
        assert len(report.winning_pair_frequencies) == 10
        assert all(cnt == 1 for cnt in report.winning_pair_frequencies.values())
        assert "5-12" in report.winning_pair_frequencies
        assert "67-88" in report.winning_pair_frequencies

    def test_top_pairs_by_count_then_first_seen(self):
        report = compute_statistics(self.records, "Etoile")
        assert report.winning_pair_frequencies["2-4"] == 2
        assert report.most_frequent_pairs[0] == "2-4"
        assert report.most_frequent_pairs[1:4] == ["1-2", "1-3", "1-4"]
        assert len(report.most_frequent_pairs) == 10

    def test_odd_even(self):
        report = compute_statistics(self.records, "Etoile")
        assert report.odd_even.average_odds == 2.0
        assert report.odd_even.average_evens == 3.0
        assert report.odd_even.draws_with_x_odds["3"] == 1
        assert report.odd_even.draws_with_x_odds["1"] == 1
        assert report.odd_even.draws_with_x_odds["0"] == 0

    def test_odd_even_rounding(self):
        records = self.records + [record("2024-01-15", [1, 20, 30, 40, 50])]
        report = compute_statistics(records, "Etoile")
        assert report.odd_even.average_odds == 1.67
        assert report.odd_even.average_evens == 3.33

    def test_exact_half_rounds_up(self):
        records = [record(f"2024-03-0{i + 1}", [2, 4, 6, 8, 10]) for i in range(7)]
        records.append(record("2024-03-08", [1, 4, 6, 8, 10]))
        report = compute_statistics(records, "Etoile")
        assert report.odd_even.average_odds == 0.13
        assert report.odd_even.average_evens == 4.88
        assert report.sums.average_sum == 29.88

    def test_unsorted_draw_ranks_by_number(self):
        report = compute_statistics([record("2024-02-01", [88, 5, 40, 12, 67])], "Etoile")
        assert report.most_frequent_winning == [5, 12, 40, 67, 88]
        assert report.least_frequent_winning == [5, 12, 40, 67, 88]

    def test_sums(self):
        report = compute_statistics(self.records, "Etoile")
        assert report.sums.average_sum == 23.0
        assert report.sums.min_sum == 15
        assert report.sums.max_sum == 31
        assert report.sums.sum_frequencies == {15: 1, 31: 1}

    def test_other_categories_ignored(self):
        records = self.records + [record("2024-01-08", [70, 71, 72, 73, 74], category="Akwaba")]
        report = compute_statistics(records, "Etoile")
        assert report.analyzed_count == 2
        assert 70 not in report.winning_frequencies


class TestRegularityReporter:
    def setup_method(self):
        # Deliberately out of date order
        self.records = [
            record("2024-01-15", [10, 11, 12, 13, 14]),
            record("2024-01-01", [1, 2, 3, 4, 5]),
            record("2024-01-08", [1, 6, 7, 8, 9]),
        ]

    def test_scenario(self):
        report = analyze_regularity(self.records, 1, "Etoile")
        assert report.occurrence_count == 2
        assert report.co_occurrence == {2: 1, 3: 1, 4: 1, 5: 1, 6: 1, 7: 1, 8: 1, 9: 1}
        assert report.next_draw == {6: 1, 7: 1, 8: 1, 9: 1, 10: 1, 11: 1, 12: 1, 13: 1, 14: 1}
        assert len(report.most_co_occurring) == 5
        assert len(report.most_frequent_next_draw) == 5

    def test_target_not_counted_in_next_draw(self):
        records = [
            record("2024-01-01", [1, 2, 3, 4, 5]),
            record("2024-01-08", [1, 6, 7, 8, 9]),
        ]
        report = analyze_regularity(records, 1, "Etoile")
        assert 1 not in report.next_draw
        assert report.next_draw == {6: 1, 7: 1, 8: 1, 9: 1}

    def test_ties_rank_by_number(self):
        records = [
            record("2024-01-01", [1, 50, 60, 70, 80]),
            record("2024-01-08", [1, 2, 3, 4, 5]),
        ]
        report = analyze_regularity(records, 1, "Etoile")
        assert report.most_co_occurring == [2, 3, 4, 5, 50]
        assert report.most_frequent_next_draw == [2, 3, 4, 5]

    def test_never_drawn(self):
        report = analyze_regularity(self.records, 90, "Etoile")
        assert report.occurrence_count == 0
        assert report.co_occurrence == {}
        assert report.next_draw == {}
        assert report.most_co_occurring == []
        assert report.most_frequent_next_draw == []

    def test_only_the_immediately_following_draw(self):
        records = [
            record("2024-01-01", [1, 2, 3, 4, 5]),
            record("2024-01-08", [20, 21, 22, 23, 24]),
            record("2024-01-15", [30, 31, 32, 33, 34]),
        ]
        report = analyze_regularity(records, 1, "Etoile")
        assert set(report.next_draw) == {20, 21, 22, 23, 24}

    def test_last_draw_has_no_next(self):
        report = analyze_regularity(self.records, 10, "Etoile")
        assert report.occurrence_count == 1
        assert report.next_draw == {}

    def test_top_lists_by_count(self):
        records = [
            record("2024-01-01", [7, 2, 3, 4, 5]),
            record("2024-01-02", [7, 2, 3, 40, 50]),
            record("2024-01-03", [7, 2, 60, 70, 80]),
        ]
        report = analyze_regularity(records, 7, "Etoile")
        assert report.co_occurrence[2] == 3
        assert report.most_co_occurring[:2] == [2, 3]
        assert report.next_draw[2] == 2

    def test_other_categories_ignored(self):
        records = self.records + [record("2024-01-02", [1, 50, 51, 52, 53], category="Akwaba")]
        report = analyze_regularity(records, 1, "Etoile")
        assert report.occurrence_count == 2
        assert 50 not in report.co_occurrence
