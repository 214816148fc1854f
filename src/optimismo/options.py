"""Per-call scoring options.

Options are resolved once per call into a frozen ``ScoreOptions``. Invalid
values never abort a call: each field falls back to its default and a
warning is logged.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from optimismo.core.logging import get_logger

logger = get_logger("options")

MAX_PLACES = 20


class Encoding(StrEnum):
    """How a match's frequency and weight become its contribution."""

    BINARY = "binary"
    FREQUENCY = "frequency"
    PERCENT = "percent"


class Locale(StrEnum):
    """Spelling dialect of the input text."""

    US = "US"
    GB = "GB"


class OutputMode(StrEnum):
    LEX = "lex"
    MATCHES = "matches"
    FULL = "full"


class SortKey(StrEnum):
    FREQ = "freq"
    WEIGHT = "weight"
    LEX = "lex"


class ScoreOptions(BaseModel):
    """Typed scoring options; accepts snake_case names or the camelCase aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    encoding: Encoding = Encoding.BINARY
    locale: Locale = Locale.US
    min_weight: float = Field(default=-math.inf, alias="min")
    max_weight: float = Field(default=math.inf, alias="max")
    n_grams: tuple[int, ...] = Field(default=(2, 3), alias="nGrams")
    no_int: bool = Field(default=False, alias="noInt")
    output: OutputMode = OutputMode.LEX
    places: int | None = None
    sort_by: SortKey = Field(default=SortKey.FREQ, alias="sortBy")
    wc_grams: bool = Field(default=False, alias="wcGrams")

    @classmethod
    def resolve(cls, options: ScoreOptions | Mapping[str, Any] | None) -> ScoreOptions:
        if options is None:
            return cls()
        if isinstance(options, ScoreOptions):
            return options
        if isinstance(options, Mapping):
            return cls.model_validate(dict(options))
        logger.warning("options_invalid", value_type=type(options).__name__)
        return cls()

    @classmethod
    def _fallback(cls, info: ValidationInfo, value: Any) -> Any:
        default = cls.model_fields[info.field_name].default
        logger.warning(
            "option_invalid",
            option=info.field_name,
            value=repr(value),
            fallback=repr(default),
        )
        return default

    @field_validator("encoding", "locale", "output", "sort_by", mode="before")
    @classmethod
    def _coerce_choice(cls, value: Any, info: ValidationInfo) -> Any:
        default = cls.model_fields[info.field_name].default
        if value is None:
            return default
        choice_type = type(default)
        if isinstance(value, choice_type):
            return value
        if not isinstance(value, str):
            return cls._fallback(info, value)
        candidate = value.strip()
        candidate = candidate.upper() if choice_type is Locale else candidate.lower()
        try:
            return choice_type(candidate)
        except ValueError:
            return cls._fallback(info, value)

    @field_validator("min_weight", "max_weight", mode="before")
    @classmethod
    def _coerce_bound(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        if isinstance(value, bool):
            return cls._fallback(info, value)
        try:
            bound = float(value)
        except (TypeError, ValueError):
            return cls._fallback(info, value)
        if math.isnan(bound):
            return cls._fallback(info, value)
        return bound

    @field_validator("n_grams", mode="before")
    @classmethod
    def _coerce_spans(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        if not isinstance(value, (list, tuple)):
            return cls._fallback(info, value)
        spans: set[int] = set()
        disabled = False
        for item in value:
            if isinstance(item, bool) or not isinstance(item, int):
                logger.warning("ngram_span_invalid", span=repr(item))
                continue
            if item == 0:
                disabled = True
                continue
            if item < 2:
                logger.warning("ngram_span_ignored", span=item)
                continue
            if item > 3:
                logger.info("ngram_span_unmatched", span=item)
            spans.add(item)
        # A non-empty list with no usable length is invalid, not a disable marker.
        if value and not spans and not disabled:
            return cls._fallback(info, value)
        return tuple(sorted(spans))

    @field_validator("no_int", "wc_grams", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        return cls._fallback(info, value)

    @field_validator("places", mode="before")
    @classmethod
    def _coerce_places(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            return cls._fallback(info, value)
        if not 0 <= value <= MAX_PLACES:
            return cls._fallback(info, value)
        return value
