"""Endpoint scanning — find IPv4 addresses (with optional :port) in a line."""

from __future__ import annotations

import re

from .config import MAX_PORT, MIN_PORT
from .models import Endpoint

_OCTET = r"(?:25[0-5]|2[0-4]\d|[01]?\d\d?)"

# Group 1: address, group 2: attached port (optional)
# e.g. 192.168.1.1
# e.g. 192.168.1.1:8080
_ENDPOINT_RE = re.compile(
    rf"\b((?:{_OCTET}\.){{3}}{_OCTET})(?::(\d{{1,5}}))?\b",
    re.ASCII,
)


def valid_port(value: str) -> bool:
    """True if *value* is a decimal port number in 1-65535."""
    return value.isdigit() and MIN_PORT <= int(value) <= MAX_PORT


def scan_endpoints(line: str) -> list[Endpoint]:
    """Return every endpoint in *line*, left to right.

    An attached port outside 1-65535 is dropped, leaving the endpoint
    portless.
    """
    endpoints: list[Endpoint] = []
    for match in _ENDPOINT_RE.finditer(line):
        port = match.group(2) or ""
        if port and not valid_port(port):
            port = ""
        endpoints.append(Endpoint(address=match.group(1), port=port))
    return endpoints
