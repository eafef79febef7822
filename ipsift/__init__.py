"""ipsift — pull IPv4 endpoints and country markers out of messy text."""

__version__ = "0.1.0"
