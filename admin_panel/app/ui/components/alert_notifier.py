from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

DEFAULT_ALERT_SECONDS = 3.5


class AlertKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Alert:
    kind: AlertKind
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def title(self) -> str:
        return "Success" if self.kind is AlertKind.SUCCESS else "Error"


class AlertNotifier:
    """Single transient alert slot; a newer alert replaces and re-arms expiry."""

    def __init__(
        self,
        duration_seconds: float = DEFAULT_ALERT_SECONDS,
        on_change: Callable[[Alert | None], None] | None = None,
    ) -> None:
        self.duration_seconds = duration_seconds
        self.current: Alert | None = None
        self._on_change = on_change
        self._expiry: asyncio.TimerHandle | None = None

    def success(self, message: str) -> Alert:
        return self.show(AlertKind.SUCCESS, message)

    def error(self, message: str) -> Alert:
        return self.show(AlertKind.ERROR, message)

    def show(self, kind: AlertKind, message: str) -> Alert:
        self._cancel_expiry()
        alert = Alert(kind=kind, message=message)
        self.current = alert
        self._expiry = asyncio.get_running_loop().call_later(self.duration_seconds, self._expire, alert)
        self._notify()
        return alert

    def dismiss(self) -> None:
        self._cancel_expiry()
        if self.current is not None:
            self.current = None
            self._notify()

    def _expire(self, alert: Alert) -> None:
        self._expiry = None
        if self.current is alert:
            self.current = None
            self._notify()

    def _cancel_expiry(self) -> None:
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(self.current)
