"""Tests for per-call option resolution."""

from __future__ import annotations

import math

from optimismo.options import Encoding, Locale, OutputMode, ScoreOptions, SortKey


class TestScoreOptions:
    def test_defaults(self) -> None:
        opts = ScoreOptions.resolve(None)
        assert opts.encoding == Encoding.BINARY
        assert opts.locale == Locale.US
        assert opts.min_weight == -math.inf
        assert opts.max_weight == math.inf
        assert opts.n_grams == (2, 3)
        assert opts.no_int is False
        assert opts.output == OutputMode.LEX
        assert opts.places is None
        assert opts.sort_by == SortKey.FREQ
        assert opts.wc_grams is False

    def test_camel_case_aliases(self) -> None:
        opts = ScoreOptions.resolve(
            {"nGrams": [0], "noInt": True, "sortBy": "weight", "wcGrams": True, "min": -0.5, "max": 0.5}
        )
        assert opts.n_grams == ()
        assert opts.no_int is True
        assert opts.sort_by == SortKey.WEIGHT
        assert opts.wc_grams is True
        assert opts.min_weight == -0.5
        assert opts.max_weight == 0.5

    def test_snake_case_names(self) -> None:
        opts = ScoreOptions.resolve({"n_grams": [2], "sort_by": "lex"})
        assert opts.n_grams == (2,)
        assert opts.sort_by == SortKey.LEX

    def test_case_insensitive_choices(self) -> None:
        opts = ScoreOptions.resolve({"encoding": "FREQUENCY", "locale": "gb", "output": " Full "})
        assert opts.encoding == Encoding.FREQUENCY
        assert opts.locale == Locale.GB
        assert opts.output == OutputMode.FULL

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        opts = ScoreOptions.resolve(
            {
                "output": "banana",
                "encoding": 7,
                "nGrams": "2",
                "min": "abc",
                "max": True,
                "places": 25,
                "noInt": "yes",
            }
        )
        assert opts.output == OutputMode.LEX
        assert opts.encoding == Encoding.BINARY
        assert opts.n_grams == (2, 3)
        assert opts.min_weight == -math.inf
        assert opts.max_weight == math.inf
        assert opts.places is None
        assert opts.no_int is False

    def test_zero_and_false_are_kept(self) -> None:
        opts = ScoreOptions.resolve({"min": 0, "max": 0, "places": 0, "noInt": False})
        assert opts.min_weight == 0.0
        assert opts.max_weight == 0.0
        assert opts.places == 0
        assert opts.no_int is False

    def test_span_lengths_are_cleaned(self) -> None:
        opts = ScoreOptions.resolve({"nGrams": [3, 1, 2, 2, "x", 5]})
        assert opts.n_grams == (2, 3, 5)

    def test_numeric_strings_are_accepted_as_bounds(self) -> None:
        opts = ScoreOptions.resolve({"min": "0.25"})
        assert opts.min_weight == 0.25

    def test_non_mapping_options(self) -> None:
        assert ScoreOptions.resolve(["output", "full"]) == ScoreOptions()  # type: ignore[arg-type]

    def test_resolve_passes_instances_through(self) -> None:
        opts = ScoreOptions(output=OutputMode.FULL)
        assert ScoreOptions.resolve(opts) is opts

    def test_spans_without_usable_length_fall_back(self) -> None:
        assert ScoreOptions.resolve({"nGrams": ["x"]}).n_grams == (2, 3)
        assert ScoreOptions.resolve({"nGrams": [1]}).n_grams == (2, 3)

    def test_zero_or_empty_spans_disable_expansion(self) -> None:
        assert ScoreOptions.resolve({"nGrams": [0]}).n_grams == ()
        assert ScoreOptions.resolve({"nGrams": []}).n_grams == ()
        assert ScoreOptions.resolve({"nGrams": [0, "x"]}).n_grams == ()
