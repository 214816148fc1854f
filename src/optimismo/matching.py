"""Lexicon matching: future-vocabulary gate, then affect weight lookup."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class WeightedMatch:
    """A gated term that carries an affect weight within bounds."""

    term: str
    frequency: int
    weight: float


def gate(tokens: Iterable[str], future: frozenset[str] | set[str]) -> dict[str, int]:
    """Count tokens that belong to the future vocabulary.

    Counts cover every occurrence in ``tokens``; keys keep first-occurrence
    order.
    """
    return dict(Counter(token for token in tokens if token in future))


def weigh(
    gated: Mapping[str, int],
    affect: Mapping[str, float],
    min_weight: float = -math.inf,
    max_weight: float = math.inf,
) -> list[WeightedMatch]:
    """Attach affect weights to gated terms, keeping ``min <= weight <= max``."""
    matches: list[WeightedMatch] = []
    for term, frequency in gated.items():
        weight = affect.get(term)
        if weight is None:
            continue
        if min_weight <= weight <= max_weight:
            matches.append(WeightedMatch(term=term, frequency=frequency, weight=weight))
    return matches
