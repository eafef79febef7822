"""Fallback port detection for lines like "10.0.0.1 8080"."""

from __future__ import annotations

import re
from dataclasses import replace

from .config import MAX_PORT
from .models import Endpoint

_LOOSE_PORT_RE = re.compile(r"\b\d{2,5}\b", re.ASCII)


def find_loose_port(line: str, address: str) -> str:
    """Return the first standalone 2-5 digit number usable as a port.

    Numbers that appear verbatim inside *address* (e.g. an octet) are
    skipped. Known weakness: "10.0.0.1 10" never yields port 10.
    """
    for candidate in _LOOSE_PORT_RE.findall(line):
        if candidate in address:
            continue
        if 0 < int(candidate) <= MAX_PORT:
            return candidate
    return ""


def recover_ports(line: str, endpoints: list[Endpoint]) -> list[Endpoint]:
    """Fill in a missing port when the line holds exactly one endpoint.

    With several endpoints a loose number can't be tied to any one of
    them, so nothing is changed.
    """
    if len(endpoints) != 1 or endpoints[0].port:
        return endpoints

    only = endpoints[0]
    port = find_loose_port(line, only.address)
    if not port:
        return endpoints
    return [replace(only, port=port)]
