"""Raw text sources: plain files and PDFs (via pdfplumber)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pdfplumber

log = logging.getLogger(__name__)


def read_pdf(path: Path) -> str:
    """Concatenate the extracted text of every page in a PDF."""
    text_parts: list[str] = []

    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

    return "\n".join(text_parts)


def read_source(path: Path) -> str:
    """Read one input file as text. Undecodable bytes become U+FFFD."""
    path = Path(path)
    log.debug("Reading %s", path)
    if path.suffix.lower() == ".pdf":
        return read_pdf(path)
    return path.read_text(encoding="utf-8", errors="replace")


def read_sources(paths: Iterable[Path]) -> str:
    return "\n".join(read_source(p) for p in paths)
