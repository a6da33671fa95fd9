"""Deck statistics."""

from .harness import (
    AnalysisResult,
    greedy_set_free,
    most_cards_with_no_set,
    run_analysis,
    run_analysis_sequential,
    split_trials,
)

__all__ = [
    "AnalysisResult",
    "greedy_set_free",
    "most_cards_with_no_set",
    "run_analysis",
    "run_analysis_sequential",
    "split_trials",
]
