from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

from clients.admins_client_sdk.models import AdminRecord

DEFAULT_SEARCH_DELAY_MS = 1000


def normalize_term(term: str | None) -> str:
    return (term or "").strip().lower()


def filter_admins(admins: Sequence[AdminRecord], term: str | None) -> list[AdminRecord]:
    """Case-insensitive substring match on name, email or role."""
    needle = normalize_term(term)
    if not needle:
        return list(admins)
    return [admin for admin in admins if any(needle in field.lower() for field in admin.searchable_fields())]


class DebouncedSearchInput:
    """Search box draft that commits upstream once typing pauses.

    Every keystroke cancels the pending commit and arms a new single-shot
    timer on the running event loop; only the last value is delivered.
    """

    def __init__(
        self,
        on_change: Callable[[str], None],
        value: str = "",
        delay_ms: int = DEFAULT_SEARCH_DELAY_MS,
    ) -> None:
        self.draft = value
        self.delay_ms = max(0, delay_ms)
        self._on_change = on_change
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def keystroke(self, value: str) -> None:
        self.draft = value
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay_ms / 1000, self._commit)

    def sync(self, value: str) -> None:
        """Mirror a term changed outside the box without re-emitting it."""
        self.cancel()
        self.draft = value

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _commit(self) -> None:
        self._handle = None
        self._on_change(self.draft)
