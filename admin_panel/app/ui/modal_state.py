from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from clients.admins_client_sdk.models import AdminRecord

logger = logging.getLogger(__name__)


class ModalMode(str, Enum):
    CLOSED = "closed"
    CREATING = "create"
    EDITING = "edit"
    VIEWING = "view"


@dataclass(frozen=True)
class ModalState:
    mode: ModalMode = ModalMode.CLOSED
    focused: AdminRecord | None = None
    delete_target: AdminRecord | None = None

    def __post_init__(self) -> None:
        if self.mode in {ModalMode.EDITING, ModalMode.VIEWING} and self.focused is None:
            raise ValueError(f"{self.mode.value} modal requires a focused admin")
        if self.mode in {ModalMode.CLOSED, ModalMode.CREATING} and self.focused is not None:
            raise ValueError(f"{self.mode.value} modal cannot focus an admin")
        if self.delete_target is not None and self.mode is not ModalMode.CLOSED:
            raise ValueError("delete confirmation only opens over a closed modal")

    @property
    def is_open(self) -> bool:
        return self.mode is not ModalMode.CLOSED

    @property
    def delete_confirm_open(self) -> bool:
        return self.delete_target is not None


class ModalOrchestrator:
    def __init__(self, on_change: Callable[[ModalState], None] | None = None) -> None:
        self.state = ModalState()
        self.busy = False
        self._on_change = on_change

    @property
    def mode(self) -> ModalMode:
        return self.state.mode

    @property
    def focused(self) -> AdminRecord | None:
        return self.state.focused

    @property
    def delete_target(self) -> AdminRecord | None:
        return self.state.delete_target

    def open_create(self) -> bool:
        return self._apply(ModalState(mode=ModalMode.CREATING), "open_create")

    def open_edit(self, record: AdminRecord) -> bool:
        return self._apply(ModalState(mode=ModalMode.EDITING, focused=record), "open_edit")

    def open_view(self, record: AdminRecord) -> bool:
        return self._apply(ModalState(mode=ModalMode.VIEWING, focused=record), "open_view")

    def close(self) -> bool:
        return self._apply(replace(self.state, mode=ModalMode.CLOSED, focused=None), "close")

    def request_delete(self, record: AdminRecord) -> bool:
        return self._apply(ModalState(delete_target=record), "request_delete")

    def cancel_delete(self) -> bool:
        return self._apply(replace(self.state, delete_target=None), "cancel_delete")

    def finish_delete(self) -> None:
        # Runs once the delete call has settled, so it bypasses the busy lock.
        self._set(replace(self.state, delete_target=None))

    def _apply(self, state: ModalState, transition: str) -> bool:
        if self.busy:
            logger.debug("modal transition %s ignored while a request is in flight", transition)
            return False
        self._set(state)
        return True

    def _set(self, state: ModalState) -> None:
        self.state = state
        if self._on_change:
            self._on_change(state)
