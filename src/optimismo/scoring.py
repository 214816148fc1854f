"""Optimism scoring: encode matched weights and format the result.

Scale runs from 1 (completely pessimistic) to 9 (completely optimistic),
with text that matches nothing landing on the intercept, just above 5.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from optimismo.core.logging import get_logger
from optimismo.lexicon import Lexicon, get_lexicon
from optimismo.matching import WeightedMatch, gate, weigh
from optimismo.options import Encoding, Locale, OutputMode, ScoreOptions, SortKey
from optimismo.text import expand, normalize, tokenize, translate_gb

logger = get_logger("scoring")

INTERCEPT = 5.037104721


class MatchRecord(BaseModel):
    """One matched term and its encoded contribution."""

    model_config = ConfigDict(frozen=True)

    term: str
    frequency: int = Field(ge=1)
    weight: float
    value: float


class MatchInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_matches: int
    total_unique_matches: int
    total_tokens: int
    percent_matches: float


class MatchesResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matches: list[MatchRecord]
    info: MatchInfo


class FullResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    lex: float
    matches: MatchesResult


ScoreResult = float | MatchesResult | FullResult


def encode(match: WeightedMatch, word_count: int, encoding: Encoding) -> float:
    """Contribution of a single match under ``encoding``."""
    if encoding == Encoding.FREQUENCY:
        return (match.frequency / word_count) * match.weight
    if encoding == Encoding.PERCENT:
        return match.frequency / word_count
    return match.weight


def aggregate(records: list[MatchRecord], encoding: Encoding, no_int: bool = False) -> float:
    """Sum contributions and add the intercept once.

    Percent values are fractions of the text, not weights, so the percent
    encoding aggregates the raw weights instead.
    """
    if encoding == Encoding.PERCENT:
        total = sum(record.weight for record in records)
    else:
        total = sum(record.value for record in records)
    if no_int:
        return float(total)
    return float(total) + INTERCEPT


def round_places(value: float, places: int | None) -> float:
    """Round half away from zero; ``None`` leaves the value untouched."""
    if places is None:
        return value
    quantum = Decimal(1).scaleb(-places)
    exact = Decimal(repr(value))
    # Enough digits for the integer part plus every requested place.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


_SORT_KEYS = {
    SortKey.FREQ: lambda record: record.frequency,
    SortKey.WEIGHT: lambda record: record.weight,
    SortKey.LEX: lambda record: record.value,
}


def sort_records(records: list[MatchRecord], sort_by: SortKey) -> list[MatchRecord]:
    """Descending by ``sort_by``; ties keep their original order."""
    return sorted(records, key=_SORT_KEYS[sort_by], reverse=True)


class OptimismScorer:
    """Scores text against a lexicon captured at construction time."""

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon

    def match(self, text: Any, options: ScoreOptions) -> tuple[list[MatchRecord], int] | None:
        """Run the matching pipeline.

        Returns the match records in first-occurrence order and the word
        count used for encoding, or ``None`` when the text yields no tokens.
        """
        normalized = normalize(text)
        if normalized is None:
            return None
        if options.locale == Locale.GB:
            normalized = translate_gb(normalized)

        tokens = tokenize(normalized)
        if tokens is None:
            logger.debug("no_tokens", length=len(normalized))
            return None

        expanded = expand(tokens, options.n_grams)
        word_count = len(expanded) if options.wc_grams else len(tokens)

        gated = gate(expanded, self.lexicon.future)
        weighted = weigh(gated, self.lexicon.affect, options.min_weight, options.max_weight)
        records = [
            MatchRecord(
                term=match.term,
                frequency=match.frequency,
                weight=match.weight,
                value=encode(match, word_count, options.encoding),
            )
            for match in weighted
        ]
        return records, word_count

    def score(
        self,
        text: Any,
        options: ScoreOptions | Mapping[str, Any] | None = None,
    ) -> ScoreResult | None:
        """Score ``text``; ``None`` means there was nothing to score."""
        opts = ScoreOptions.resolve(options)
        matched = self.match(text, opts)
        if matched is None:
            return None
        records, word_count = matched

        if opts.output == OutputMode.LEX:
            return round_places(aggregate(records, opts.encoding, opts.no_int), opts.places)

        details = self._format_matches(records, word_count, opts)
        if opts.output == OutputMode.MATCHES:
            return details
        return FullResult(
            lex=round_places(aggregate(records, opts.encoding, opts.no_int), opts.places),
            matches=details,
        )

    @staticmethod
    def _format_matches(
        records: list[MatchRecord], word_count: int, opts: ScoreOptions
    ) -> MatchesResult:
        total_matches = sum(record.frequency for record in records)
        ordered = [
            record.model_copy(update={"value": round_places(record.value, opts.places)})
            for record in sort_records(records, opts.sort_by)
        ]
        info = MatchInfo(
            total_matches=total_matches,
            total_unique_matches=len(records),
            total_tokens=word_count,
            percent_matches=round_places((total_matches / word_count) * 100, opts.places),
        )
        return MatchesResult(matches=ordered, info=info)


def score(
    text: Any,
    options: ScoreOptions | Mapping[str, Any] | None = None,
    *,
    lexicon: Lexicon | None = None,
) -> ScoreResult | None:
    """Score ``text`` with ``lexicon`` or the process-wide lexicon."""
    return OptimismScorer(lexicon if lexicon is not None else get_lexicon()).score(text, options)
