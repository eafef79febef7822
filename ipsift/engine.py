"""Record assembly and the views derived from it (catalog, render, stats).

All functions here are pure: they take their inputs explicitly, never
mutate them, and never raise for any string input.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from .config import ALL_COUNTRIES
from .country import infer_country
from .models import Record, Stats
from .ports import recover_ports
from .scanner import scan_endpoints

log = logging.getLogger(__name__)

RecordSet = tuple[Record, ...]

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def parse_line(line: str) -> list[Record]:
    """Turn one line into records (one per endpoint found)."""
    endpoints = scan_endpoints(line)
    if not endpoints:
        return []

    country = infer_country(line)
    endpoints = recover_ports(line, endpoints)

    return [
        Record(
            address=ep.address,
            port=ep.port,
            country=country,
            source_line=line,
        )
        for ep in endpoints
    ]


def build_record_set(raw_text: str) -> RecordSet:
    """Extract every endpoint in *raw_text*, sorted by country.

    Blank lines and lines without an IPv4 address are skipped. The sort
    is stable, so records of the same country keep discovery order.
    """
    if not raw_text.strip():
        return ()

    records: list[Record] = []
    for line in _LINE_SPLIT_RE.split(raw_text):
        if not line.strip():
            continue
        records.extend(parse_line(line))

    log.debug("Extracted %d records", len(records))
    return tuple(sorted(records, key=lambda r: r.country))


def catalog(records: Iterable[Record]) -> list[str]:
    """Distinct country markers present in *records*, sorted."""
    return sorted({r.country for r in records})


def matches_country(record: Record, selected_country: str) -> bool:
    return selected_country == ALL_COUNTRIES or record.country == selected_country


def filter_records(
    records: Sequence[Record], selected_country: str
) -> list[Record]:
    return [r for r in records if matches_country(r, selected_country)]


def render(
    records: Sequence[Record], selected_country: str, hide_port: bool = False
) -> str:
    """Newline-joined ``address[:port]`` lines for the selected country."""
    return "\n".join(
        r.to_line(hide_port) for r in filter_records(records, selected_country)
    )


def stats(records: Sequence[Record], selected_country: str) -> Stats:
    total = len(records)
    if selected_country == ALL_COUNTRIES:
        return Stats(total=total, filtered_count=total)
    filtered = sum(1 for r in records if matches_country(r, selected_country))
    return Stats(total=total, filtered_count=filtered)
