# brokeuni_travel/api/services/autocomplete.py
"""City autocomplete controller.

Local matches from the static city list are shown as soon as the user
types; a remote lookup is issued once typing pauses for the debounce
window and its results are merged in front of the local ones.

Every dispatched lookup is tagged with a sequence number.  Typing,
selecting and closing advance the sequence, so a lookup that finishes
after the query changed is dropped instead of merged into newer results.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from brokeuni_travel.api.cities import POPULAR_CITIES, filter_cities
from brokeuni_travel.api.errors import CityLookupError

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
DEFAULT_DEBOUNCE_SECONDS = 0.3


@dataclass(frozen=True)
class SuggestionState:
    """Snapshot of what the suggestion panel should show."""

    field: str
    value: str
    suggestions: Tuple[str, ...]
    visible: bool
    loading: bool

    @property
    def no_results(self) -> bool:
        return (
            self.visible
            and not self.suggestions
            and not self.loading
            and len(self.value) >= MIN_QUERY_LENGTH
        )

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "value": self.value,
            "suggestions": list(self.suggestions),
            "visible": self.visible,
            "loading": self.loading,
            "no_results": self.no_results,
        }


def merge_suggestions(remote: Iterable[str], local: Iterable[str]) -> List[str]:
    """Remote names first, then local ones; duplicates keep their first slot."""
    return list(dict.fromkeys([*remote, *local]))


def start_timer(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Default scheduler: run ``callback`` once on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class CityAutocomplete:
    """Suggestion state for one city input field."""

    def __init__(
        self,
        field: str,
        fetch: Callable[[str], List[str]],
        on_change: Optional[Callable[[SuggestionState], None]] = None,
        scheduler: Callable = start_timer,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        cities: Sequence[str] = POPULAR_CITIES,
        value: str = "",
    ):
        self.field = field
        self._fetch = fetch
        self._on_change = on_change
        self._scheduler = scheduler
        self._delay = delay
        self._cities = tuple(cities)

        self._lock = threading.Lock()
        self._value = value
        self._suggestions: List[str] = []
        self._visible = False
        self._loading = False
        self._timer = None
        self._sequence = 0
        self._closed = False

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #
    @property
    def state(self) -> SuggestionState:
        with self._lock:
            return self._snapshot()

    @property
    def value(self) -> str:
        return self._value

    def _snapshot(self) -> SuggestionState:
        return SuggestionState(
            field=self.field,
            value=self._value,
            suggestions=tuple(self._suggestions),
            visible=self._visible,
            loading=self._loading,
        )

    def _publish(self, state: SuggestionState) -> None:
        if self._on_change is not None:
            self._on_change(state)

    def _invalidate(self) -> None:
        """Cancel the pending timer and orphan any in-flight lookup. Lock held."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._sequence += 1
        self._loading = False

    # ------------------------------------------------------------------ #
    # User events
    # ------------------------------------------------------------------ #
    def type(self, text: str) -> SuggestionState:
        """Handle a keystroke: show local matches now, schedule the remote lookup."""
        with self._lock:
            if self._closed:
                return self._snapshot()
            self._invalidate()
            self._value = text

            if len(text) < MIN_QUERY_LENGTH:
                self._suggestions = []
                self._visible = False
            else:
                self._suggestions = filter_cities(text, self._cities)
                self._visible = True
                sequence = self._sequence
                self._timer = self._scheduler(
                    self._delay, lambda: self._run_lookup(sequence)
                )
            state = self._snapshot()
        self._publish(state)
        return state

    def focus(self) -> SuggestionState:
        with self._lock:
            if self._value == "":
                self._suggestions = list(self._cities)
                self._visible = True
            elif self._suggestions:
                self._visible = True
            state = self._snapshot()
        self._publish(state)
        return state

    def select(self, suggestion: str) -> SuggestionState:
        """Commit a suggestion: set the value, close the panel, clear the list."""
        with self._lock:
            self._invalidate()
            self._value = suggestion
            self._suggestions = []
            self._visible = False
            state = self._snapshot()
        self._publish(state)
        return state

    def dismiss(self) -> SuggestionState:
        """Pointer went down outside the component; the value is left alone."""
        with self._lock:
            self._visible = False
            state = self._snapshot()
        self._publish(state)
        return state

    def close(self) -> None:
        """Unmount: no timer may fire and no late result may be applied."""
        with self._lock:
            self._invalidate()
            self._closed = True

    # ------------------------------------------------------------------ #
    # Debounced remote lookup
    # ------------------------------------------------------------------ #
    def _run_lookup(self, sequence: int) -> None:
        with self._lock:
            if self._closed or sequence != self._sequence:
                return
            self._timer = None
            query = self._value
            self._loading = True
            state = self._snapshot()
        self._publish(state)

        try:
            remote = self._fetch(query)
        except CityLookupError as exc:
            logger.warning("City lookup failed for %r: %s", query, exc)
            remote = []
        except Exception:
            logger.exception("Unexpected error looking up %r", query)
            remote = []

        with self._lock:
            if self._closed or sequence != self._sequence:
                logger.debug("Dropping stale suggestions for %r", query)
                return
            self._loading = False
            self._suggestions = merge_suggestions(remote, self._suggestions)
            state = self._snapshot()
        self._publish(state)


__all__ = [
    "CityAutocomplete",
    "SuggestionState",
    "merge_suggestions",
    "start_timer",
    "MIN_QUERY_LENGTH",
]
