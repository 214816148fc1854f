from __future__ import annotations

import pytest

from optimismo.lexicon import Lexicon


@pytest.fixture
def lexicon() -> Lexicon:
    """Small lexicon with gated-only and affect-only terms."""
    return Lexicon.from_terms(
        future=["succeed", "grow", "will", "hope", "looking forward", "can't wait", "fail", "worry"],
        affect={
            "succeed": 0.6,
            "grow": 0.4,
            "hope": 0.5,
            "looking forward": 0.7,
            "can't wait": 0.8,
            "fail": -0.7,
            "worry": -0.5,
            "definitely": 0.9,
        },
    )
