"""Dataclasses for endpoints, records, and filter statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    """An IPv4 address found in a line, with the port written next to it."""

    address: str  # dotted quad, e.g. "10.0.0.1"
    port: str = ""  # "" when no port was determined


@dataclass(frozen=True)
class Record:
    """An endpoint tagged with the country marker inferred for its line."""

    address: str
    port: str
    country: str  # two uppercase letters, or "Unknown"
    source_line: str

    def to_line(self, hide_port: bool = False) -> str:
        if self.port and not hide_port:
            return f"{self.address}:{self.port}"
        return self.address


@dataclass(frozen=True)
class Stats:
    """Record counts before and after the country filter."""

    total: int
    filtered_count: int
