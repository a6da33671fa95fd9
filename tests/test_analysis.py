"""Tests for the set-free analysis harness."""

import random

import pytest

from setgame.analysis import harness
from setgame.analysis.harness import (
    AnalysisResult,
    greedy_set_free,
    most_cards_with_no_set,
    run_analysis,
    run_analysis_sequential,
    split_trials,
)
from setgame.config import AnalysisConfig
from setgame.game.analyzer import has_set
from setgame.game.deck import make_deck


class TestGreedy:
    """Tests for one trial."""

    def test_cap_kept_whole(self, binary_cards):
        """Test a set-free deck is kept in full and in order."""
        assert greedy_set_free(binary_cards) == binary_cards

    def test_result_has_no_set(self):
        """Test the kept cards never contain a set."""
        kept = greedy_set_free(make_deck())
        assert kept
        assert not has_set(kept)

    def test_first_two_always_kept(self):
        """Test two cards can never complete a set on their own."""
        deck = make_deck()
        kept = greedy_set_free(deck)
        assert kept[:2] == deck[:2]
        assert deck[2] not in kept

    def test_duplicates_skipped(self):
        """Test repeated cards are kept once."""
        deck = make_deck()
        assert greedy_set_free([deck[0], deck[0], deck[1]]) == [deck[0], deck[1]]

    def test_bounded(self):
        """Test no trial keeps more than twenty cards."""
        rng = random.Random(9)
        for _ in range(50):
            assert 2 <= most_cards_with_no_set(rng) <= 20


class TestSplitTrials:
    """Tests for dividing trials between workers."""

    def test_even_split(self):
        """Test trials that divide evenly."""
        assert split_trials(32, 16) == [2] * 16

    def test_remainder_distributed(self):
        """Test no trial is dropped when the count does not divide."""
        shares = split_trials(10, 4)
        assert shares == [3, 3, 2, 2]
        assert sum(shares) == 10

    def test_fewer_trials_than_threads(self):
        """Test idle workers get zero trials."""
        assert split_trials(3, 5) == [1, 1, 1, 0, 0]


class TestRunAnalysis:
    """Tests for the parallel runner."""

    @pytest.mark.parametrize("thread_count", [1, 3, 16])
    def test_total_matches_trials(self, thread_count):
        """Test every trial reaches the histogram."""
        result = run_analysis(trial_count=50, thread_count=thread_count, seed=1)
        assert result.total == 50
        assert result.trial_count == 50
        assert result.thread_count == thread_count
        assert all(2 <= value <= 20 for value in result.histogram)

    def test_capacity_one(self):
        """Test a single-slot queue still drains every result."""
        result = run_analysis(trial_count=40, thread_count=8, channel_capacity=1, seed=2)
        assert result.total == 40

    def test_zero_trials(self):
        """Test an empty run returns an empty histogram."""
        result = run_analysis(trial_count=0, thread_count=4)
        assert result.histogram == {}
        assert result.total == 0
        assert result.summary_lines() == []

    def test_histogram_sorted(self):
        """Test histogram keys are in ascending order."""
        result = run_analysis(trial_count=60, thread_count=4, seed=3)
        assert list(result.histogram) == sorted(result.histogram)

    def test_seeded_runs_agree(self):
        """Test a fixed seed gives the same histogram regardless of scheduling."""
        first = run_analysis(trial_count=30, thread_count=4, seed=42)
        second = run_analysis(trial_count=30, thread_count=4, seed=42)
        assert first.histogram == second.histogram

    def test_uses_config(self):
        """Test counts fall back to the analysis config."""
        config = AnalysisConfig(trial_count=20, thread_count=3, channel_capacity=2, seed=5)
        result = run_analysis(config=config)
        assert result.total == 20
        assert result.thread_count == 3

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"trial_count": -1, "thread_count": 1},
            {"trial_count": 10, "thread_count": 0},
            {"trial_count": 10, "thread_count": 2, "channel_capacity": 0},
        ],
    )
    def test_invalid_counts(self, kwargs):
        """Test out-of-range arguments are rejected before any thread starts."""
        with pytest.raises(ValueError):
            run_analysis(**kwargs)

    def test_worker_failure_propagates(self, monkeypatch):
        """Test an exception in a worker is raised to the caller."""

        def fail(rng=None):
            raise RuntimeError("trial failed")

        monkeypatch.setattr(harness, "most_cards_with_no_set", fail)
        with pytest.raises(RuntimeError):
            run_analysis(trial_count=10, thread_count=2)


class TestSequential:
    """Tests for the single-threaded runner."""

    def test_total(self):
        """Test every trial is counted."""
        result = run_analysis_sequential(25, random.Random(4))
        assert result.total == 25
        assert result.thread_count == 1

    def test_negative(self):
        """Test negative trial counts are rejected."""
        with pytest.raises(ValueError):
            run_analysis_sequential(-5)


class TestAnalysisResult:
    """Tests for AnalysisResult formatting."""

    def test_percentages(self):
        """Test shares sum to one hundred."""
        result = AnalysisResult(histogram={16: 1, 17: 3}, trial_count=4)
        assert result.percentages() == {16: 25.0, 17: 75.0}

    def test_summary_lines(self):
        """Test one line per statistic value."""
        result = AnalysisResult(histogram={16: 1, 17: 3}, trial_count=4)
        assert result.summary_lines() == ["16: 1 (25.00%)", "17: 3 (75.00%)"]
