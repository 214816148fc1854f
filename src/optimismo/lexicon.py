"""Immutable future/affect lexicon and its loaders."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

from optimismo.core.config import get_settings
from optimismo.core.logging import get_logger

logger = get_logger("lexicon")

BUNDLED_LEXICON = "lexicon.json"


class LexiconError(Exception):
    """Raised when lexicon data is missing or malformed."""


@dataclass(frozen=True)
class Lexicon:
    """Gating "future" vocabulary plus weighted "affect" vocabulary.

    Both halves are read-only after construction, so a single instance can
    be shared by any number of concurrent scoring calls.
    """

    future: frozenset[str]
    affect: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "future", frozenset(self.future))
        object.__setattr__(self, "affect", MappingProxyType(dict(self.affect)))

    @classmethod
    def from_terms(cls, future: Iterable[str], affect: Mapping[str, float]) -> Lexicon:
        weights: dict[str, float] = {}
        for term, weight in affect.items():
            value = float(weight)
            if not math.isfinite(value):
                raise LexiconError(f"non-finite weight for {term!r}")
            weights[term.lower()] = value
        return cls(future=frozenset(term.lower() for term in future), affect=weights)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Lexicon:
        """Build from the JSON layout ``{"FUTURE": ..., "AFFECT": {...}}``.

        ``FUTURE`` may be a list of terms or an object keyed by term.
        """
        if not isinstance(payload, Mapping):
            raise LexiconError("lexicon payload must be an object")
        try:
            raw_future = payload["FUTURE"]
            raw_affect = payload["AFFECT"]
        except KeyError as exc:
            raise LexiconError(f"lexicon payload missing category {exc.args[0]!r}") from exc

        if isinstance(raw_future, Mapping):
            future_terms: Iterable[str] = raw_future.keys()
        elif isinstance(raw_future, list):
            future_terms = raw_future
        else:
            raise LexiconError("FUTURE must be a list or an object")
        if not isinstance(raw_affect, Mapping):
            raise LexiconError("AFFECT must be an object of term -> weight")

        affect: dict[str, float] = {}
        for term, weight in raw_affect.items():
            try:
                value = float(weight)
            except (TypeError, ValueError) as exc:
                raise LexiconError(f"non-numeric weight for {term!r}: {weight!r}") from exc
            affect[str(term)] = value

        return cls.from_terms((str(t) for t in future_terms), affect)

    @classmethod
    def from_json(cls, path: Path) -> Lexicon:
        if not path.exists():
            raise LexiconError(f"lexicon file not found: {path}")
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LexiconError(f"unreadable lexicon file {path}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise LexiconError(f"invalid lexicon JSON in {path}: {exc}") from exc
        return cls.from_dict(payload)

    @classmethod
    def bundled(cls) -> Lexicon:
        source = resources.files("optimismo.data").joinpath(BUNDLED_LEXICON)
        try:
            payload = json.loads(source.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise LexiconError(f"bundled lexicon unavailable: {exc}") from exc
        return cls.from_dict(payload)

    @property
    def max_span(self) -> int:
        """Longest term length in words across both vocabularies."""
        terms = [*self.future, *self.affect]
        if not terms:
            return 0
        return max(len(term.split()) for term in terms)


def load_lexicon(path: Path | None = None) -> Lexicon:
    """Load a lexicon from ``path`` or the bundled data file."""
    lexicon = Lexicon.from_json(path) if path is not None else Lexicon.bundled()
    logger.info(
        "lexicon_loaded",
        source=str(path) if path is not None else BUNDLED_LEXICON,
        future_terms=len(lexicon.future),
        affect_terms=len(lexicon.affect),
    )
    return lexicon


@lru_cache(maxsize=1)
def get_lexicon() -> Lexicon:
    """Return the process-wide lexicon, loaded once from settings."""
    return load_lexicon(get_settings().lexicon_path)
