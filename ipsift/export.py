"""Write rendered output to disk."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from .config import ALL_COUNTRIES, DOWNLOAD_DIR, EXPORT_PREFIX

log = logging.getLogger(__name__)


def default_filename(selected_country: str, now: float | None = None) -> str:
    """e.g. ip_list_US_1718000000000.txt"""
    if now is None:
        now = time.time()
    return f"{EXPORT_PREFIX}_{selected_country}_{int(now * 1000)}.txt"


def save_output(
    text: str,
    dest: Path | None = None,
    selected_country: str = ALL_COUNTRIES,
) -> Path | None:
    """Save *text* and return the path written.

    *dest* may be a file or an existing directory; when omitted the user's
    downloads directory is used. Nothing is written for empty text.
    """
    if not text:
        return None

    if dest is None:
        dest = DOWNLOAD_DIR / default_filename(selected_country)
    dest = Path(dest).expanduser()
    if dest.is_dir():
        dest = dest / default_filename(selected_country)

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(text, encoding="utf-8")
    log.info("Wrote %s", dest)
    return dest
