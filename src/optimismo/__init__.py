"""Analyse the optimism of a string."""

from optimismo.core.logging import configure_library_logging
from optimismo.lexicon import Lexicon, LexiconError, get_lexicon, load_lexicon
from optimismo.options import Encoding, Locale, OutputMode, ScoreOptions, SortKey
from optimismo.scoring import (
    INTERCEPT,
    FullResult,
    MatchesResult,
    MatchInfo,
    MatchRecord,
    OptimismScorer,
    score,
)

configure_library_logging()

__all__ = [
    "Encoding",
    "FullResult",
    "INTERCEPT",
    "Lexicon",
    "LexiconError",
    "Locale",
    "MatchInfo",
    "MatchRecord",
    "MatchesResult",
    "OptimismScorer",
    "OutputMode",
    "ScoreOptions",
    "SortKey",
    "get_lexicon",
    "load_lexicon",
    "score",
]
