"""Session state with memoized derived views.

An ExtractionSession owns the current input text and filter selection.
Each derived view (records, countries, output, stats) is cached against
the inputs it depends on and recomputed only when one of them changes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable

from . import engine
from .config import ALL_COUNTRIES
from .models import Stats

log = logging.getLogger(__name__)


class ExtractionSession:
    def __init__(
        self,
        text: str = "",
        selected_country: str = ALL_COUNTRIES,
        hide_port: bool = False,
    ):
        self.text = text
        self.selected_country = selected_country
        self.hide_port = hide_port
        self._cache: dict[str, tuple[Hashable, Any]] = {}

    def _derive(self, name: str, key: Hashable, compute: Callable[[], Any]) -> Any:
        cached = self._cache.get(name)
        if cached is not None and cached[0] == key:
            return cached[1]
        log.debug("Recomputing %s", name)
        value = compute()
        self._cache[name] = (key, value)
        return value

    # --- Actions ---

    def process(self, text: str) -> None:
        """Load new input text and reset the country selection."""
        if not text.strip():
            return
        self.text = text
        self.selected_country = ALL_COUNTRIES

    def process_with_ai(self, text: str, client, instruction: str = "") -> None:
        """Let *client* pre-extract CSV from *text*, then parse that instead.

        Errors from the client propagate and leave the session untouched.
        """
        if not text.strip():
            return
        self.text = client.extract(text, instruction)
        self.selected_country = ALL_COUNTRIES

    def select_country(self, country: str) -> None:
        self.selected_country = country

    def clear(self) -> None:
        self.text = ""
        self.selected_country = ALL_COUNTRIES

    # --- Derived views ---

    @property
    def records(self) -> engine.RecordSet:
        return self._derive(
            "records", self.text, lambda: engine.build_record_set(self.text)
        )

    @property
    def countries(self) -> list[str]:
        return list(
            self._derive(
                "countries", self.text, lambda: tuple(engine.catalog(self.records))
            )
        )

    @property
    def selector_values(self) -> list[str]:
        return [ALL_COUNTRIES, *self.countries]

    @property
    def output(self) -> str:
        key = (self.text, self.selected_country, self.hide_port)
        return self._derive(
            "output",
            key,
            lambda: engine.render(self.records, self.selected_country, self.hide_port),
        )

    @property
    def stats(self) -> Stats:
        key = (self.text, self.selected_country)
        return self._derive(
            "stats", key, lambda: engine.stats(self.records, self.selected_country)
        )
