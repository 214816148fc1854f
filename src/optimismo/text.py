"""Text normalization, tokenization and n-gram expansion."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Any

from optimismo.core.logging import get_logger

logger = get_logger("text")

# Words with inner apostrophes ("won't", "we'll") stay whole.
_TOKEN_RE = re.compile(r"[a-z0-9]+(?:['’][a-z0-9]+)*")
_CURLY_APOSTROPHE = "’"

# British -> American spellings for terms likely to appear in prospection text.
GB_TO_US: dict[str, str] = {
    "apologise": "apologize",
    "behaviour": "behavior",
    "centre": "center",
    "colour": "color",
    "endeavour": "endeavor",
    "endeavours": "endeavors",
    "enrol": "enroll",
    "favour": "favor",
    "favourable": "favorable",
    "favourite": "favorite",
    "fulfil": "fulfill",
    "fulfilment": "fulfillment",
    "honour": "honor",
    "humour": "humor",
    "labour": "labor",
    "licence": "license",
    "neighbour": "neighbor",
    "optimise": "optimize",
    "organise": "organize",
    "organised": "organized",
    "practise": "practice",
    "prioritise": "prioritize",
    "programme": "program",
    "realise": "realize",
    "realised": "realized",
    "recognise": "recognize",
    "rumour": "rumor",
    "travelling": "traveling",
    "travelled": "traveled",
    "utilise": "utilize",
}

_GB_RE = re.compile(r"\b(" + "|".join(sorted(GB_TO_US, key=len, reverse=True)) + r")\b")


def normalize(text: Any) -> str | None:
    """Lowercase and trim; ``None`` stays ``None``, other values are stringified."""
    if text is None:
        return None
    if not isinstance(text, str):
        text = str(text)
    return text.lower().strip()


def translate_gb(text: str) -> str:
    """Rewrite British spellings to American ones in lowercased text."""
    return _GB_RE.sub(lambda match: GB_TO_US[match.group(1)], text)


def tokenize(text: str) -> list[str] | None:
    """Split lowercased text into word tokens, ``None`` when there are none."""
    tokens = _TOKEN_RE.findall(text.replace(_CURLY_APOSTROPHE, "'"))
    return tokens or None


def ngrams(tokens: Sequence[str], n: int) -> list[str]:
    """Contiguous ``n``-token spans joined with single spaces."""
    if n < 1 or len(tokens) < n:
        return []
    return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]


def expand(tokens: Sequence[str], spans: Iterable[int]) -> list[str]:
    """Unigrams followed by the n-grams of each span length, ascending."""
    expanded = list(tokens)
    for n in sorted(set(spans)):
        if len(tokens) < n:
            logger.debug("ngram_span_skipped", span=n, tokens=len(tokens))
            continue
        expanded.extend(ngrams(tokens, n))
    return expanded
