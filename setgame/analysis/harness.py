"""Monte-Carlo estimate of how many cards fit on a table without a set.

One trial streams a shuffled deck and keeps each card unless it would
complete a set with two cards already kept. The number of kept cards is the
trial's statistic; many trials give a histogram.

The parallel runner fans trials out to a fixed pool of worker threads. Each
worker owns its random source and deck, and sends every result into one
bounded queue. A single aggregator thread drains the queue into the
histogram. A full queue blocks the workers, so memory stays bounded no
matter how many trials run. After all workers are joined, a close marker is
queued and the aggregator stops when it reads it.
"""

from __future__ import annotations

import logging
import queue
import random
import threading
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from setgame.config import AnalysisConfig
from setgame.game.analyzer import third_card
from setgame.game.deck import make_shuffled_deck
from setgame.models.card import Card

logger = logging.getLogger(__name__)

# Queued by the coordinator once every worker has finished
_CLOSED = object()


@dataclass
class AnalysisResult:
    """Histogram of trial statistics."""

    histogram: dict[int, int] = field(default_factory=dict)
    trial_count: int = 0
    thread_count: int = 1

    @property
    def total(self) -> int:
        """Number of observations in the histogram."""
        return sum(self.histogram.values())

    def percentages(self) -> dict[int, float]:
        """Get each statistic value's share of all trials, in percent."""
        total = self.total
        if total == 0:
            return {}
        return {value: 100.0 * count / total for value, count in self.histogram.items()}

    def summary_lines(self) -> list[str]:
        """Format the histogram as "value: count (percent%)" lines."""
        percentages = self.percentages()
        return [
            f"{value}: {count} ({percentages[value]:.2f}%)"
            for value, count in self.histogram.items()
        ]


def greedy_set_free(deck: Iterable[Card]) -> list[Card]:
    """Keep every card that does not complete a set with two kept cards.

    Args:
        deck: Cards in the order they are considered

    Returns:
        Kept cards in the order they were accepted
    """
    kept: list[Card] = []
    present: set[Card] = set()
    for card in deck:
        if card in present:
            continue
        if any(third_card(card, other) in present for other in kept):
            continue
        kept.append(card)
        present.add(card)
    return kept


def most_cards_with_no_set(rng: random.Random | None = None) -> int:
    """Run one trial on a freshly shuffled deck."""
    return len(greedy_set_free(make_shuffled_deck(rng)))


def split_trials(trial_count: int, thread_count: int) -> list[int]:
    """Divide trials between workers so the shares sum to trial_count."""
    base, extra = divmod(trial_count, thread_count)
    return [base + (1 if i < extra else 0) for i in range(thread_count)]


def _sorted_histogram(counts: Counter[int]) -> dict[int, int]:
    return dict(sorted(counts.items()))


def run_analysis_sequential(
    trial_count: int,
    rng: random.Random | None = None,
) -> AnalysisResult:
    """Run all trials on the calling thread.

    Args:
        trial_count: Number of trials
        rng: Random source shared by every trial

    Returns:
        AnalysisResult
    """
    if trial_count < 0:
        raise ValueError(f"trial_count must not be negative: {trial_count}")

    counts: Counter[int] = Counter(most_cards_with_no_set(rng) for _ in range(trial_count))
    return AnalysisResult(
        histogram=_sorted_histogram(counts),
        trial_count=trial_count,
        thread_count=1,
    )


def run_analysis(
    trial_count: int | None = None,
    thread_count: int | None = None,
    channel_capacity: int | None = None,
    config: AnalysisConfig | None = None,
    seed: int | None = None,
) -> AnalysisResult:
    """Run trials on a worker pool and aggregate them into a histogram.

    Arguments left as None fall back to the analysis config.

    Args:
        trial_count: Total number of trials
        thread_count: Number of worker threads
        channel_capacity: Size of the bounded result queue
        config: Analysis configuration (uses defaults if not provided)
        seed: Base seed; worker i uses seed + i

    Returns:
        AnalysisResult whose total equals trial_count

    Raises:
        ValueError: If a count is out of range
    """
    config = config or AnalysisConfig()
    trial_count = config.trial_count if trial_count is None else trial_count
    thread_count = config.thread_count if thread_count is None else thread_count
    channel_capacity = config.channel_capacity if channel_capacity is None else channel_capacity
    seed = config.seed if seed is None else seed

    if trial_count < 0:
        raise ValueError(f"trial_count must not be negative: {trial_count}")
    if thread_count < 1:
        raise ValueError(f"thread_count must be at least 1: {thread_count}")
    if channel_capacity < 1:
        raise ValueError(f"channel_capacity must be at least 1: {channel_capacity}")

    channel: queue.Queue = queue.Queue(maxsize=channel_capacity)
    counts: Counter[int] = Counter()
    failures: list[BaseException] = []

    def work(index: int, count: int) -> None:
        rng = random.Random(seed + index) if seed is not None else random.Random()
        try:
            for _ in range(count):
                channel.put(most_cards_with_no_set(rng))
        except Exception as e:
            logger.exception(f"Analysis worker {index} failed: {e}")
            failures.append(e)

    def aggregate() -> None:
        while True:
            value = channel.get()
            if value is _CLOSED:
                break
            counts[value] += 1

    logger.info(
        f"Starting analysis: {trial_count} trials on {thread_count} threads "
        f"(queue capacity {channel_capacity})"
    )
    started = time.perf_counter()

    aggregator = threading.Thread(target=aggregate, name="analysis-aggregator")
    aggregator.start()

    workers = [
        threading.Thread(target=work, args=(i, share), name=f"analysis-worker-{i}")
        for i, share in enumerate(split_trials(trial_count, thread_count))
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    channel.put(_CLOSED)
    aggregator.join()

    if failures:
        raise failures[0]

    result = AnalysisResult(
        histogram=_sorted_histogram(counts),
        trial_count=trial_count,
        thread_count=thread_count,
    )
    logger.info(
        f"Analysis finished: {result.total} trials in {time.perf_counter() - started:.2f}s"
    )
    return result
