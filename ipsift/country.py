"""Per-line country marker heuristic."""

from __future__ import annotations

import re

from .config import NON_COUNTRY_TOKENS, UNKNOWN_COUNTRY

_TOKEN_SPLIT_RE = re.compile(r"[^A-Za-z0-9]+")
_CODE_RE = re.compile(r"[A-Z]{2}")


def tokenize(line: str) -> list[str]:
    return [t for t in _TOKEN_SPLIT_RE.split(line) if t]


def infer_country(line: str) -> str:
    """Return the first two-letter uppercase token that isn't a protocol word.

    Lowercase words ("us", "it") never qualify. Returns "Unknown" when
    nothing on the line looks like a country code. This is a guess, not
    a geolocation lookup.
    """
    for token in tokenize(line):
        if _CODE_RE.fullmatch(token) and token not in NON_COUNTRY_TOKENS:
            return token
    return UNKNOWN_COUNTRY
