"""Paths, constants, and AI service settings."""

from pathlib import Path

from platformdirs import user_downloads_dir

APP_NAME = "ipsift"

# Filter / classification sentinels
ALL_COUNTRIES = "ALL"
UNKNOWN_COUNTRY = "Unknown"

# Two-letter uppercase tokens that look like country codes but are really
# protocol or status words.
NON_COUNTRY_TOKENS = frozenset({"OK", "UP", "IP", "TCP", "UDP", "HTTP", "ID"})

MIN_PORT = 1
MAX_PORT = 65535

# Export
DOWNLOAD_DIR = Path(user_downloads_dir())
EXPORT_PREFIX = "ip_list"

# Logging
LOG_LEVEL_ENV = "IPSIFT_LOG_LEVEL"

# AI extraction (Gemini REST API)
AI_API_KEY_ENVS = ("IPSIFT_API_KEY", "GEMINI_API_KEY")
AI_MODEL_ENV = "IPSIFT_AI_MODEL"
AI_DEFAULT_MODEL = "gemini-2.5-flash"
AI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
AI_MAX_INPUT_CHARS = 30000
REQUEST_TIMEOUT = 60
USER_AGENT = "ipsift/0.1.0"
