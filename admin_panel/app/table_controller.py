from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from clients.admins_client_sdk.admins_client import AdminsClient
from clients.admins_client_sdk.errors import RequestError
from clients.admins_client_sdk.models import AdminRecord

from admin_panel.app.config import DEFAULT_PAGE_SIZE, DEFAULT_SEARCH_DELAY_MS
from admin_panel.app.infrastructure.logging.logger import get_logger, log_action
from admin_panel.app.ui.components.alert_notifier import AlertNotifier
from admin_panel.app.ui.filters import DebouncedSearchInput, filter_admins
from admin_panel.app.ui.forms import ValidationError, validate_admin_form
from admin_panel.app.ui.modal_state import ModalMode, ModalOrchestrator
from admin_panel.app.ui.pagination import PageView, clamp_page, page_numbers, paginate, total_pages

MODULE = "admins"

logger = get_logger(__name__)


@dataclass(frozen=True)
class MutationResult:
    success: bool
    message: str
    record: AdminRecord | None = None


class AdminTableController:
    """Owns the admin collection plus its search, paging and modal state.

    Presentation surfaces only read the derived properties and call back into
    the public operations; nothing else mutates the collection.
    """

    def __init__(
        self,
        client: AdminsClient,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        search_delay_ms: int = DEFAULT_SEARCH_DELAY_MS,
        notifier: AlertNotifier | None = None,
        modal: ModalOrchestrator | None = None,
    ) -> None:
        self.client = client
        self.page_size = max(1, page_size)
        self.notifier = notifier or AlertNotifier()
        self.modal = modal or ModalOrchestrator()
        self.admins: tuple[AdminRecord, ...] = ()
        self.loading = False
        self.search_term = ""
        self.form_error: str | None = None
        self._page = 1
        self.search_input = DebouncedSearchInput(self.set_search_term, value=self.search_term, delay_ms=search_delay_ms)

    # Derived view state

    @property
    def filtered(self) -> list[AdminRecord]:
        return filter_admins(self.admins, self.search_term)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered), self.page_size)

    @property
    def current_page(self) -> int:
        return clamp_page(self._page, self.total_pages)

    @property
    def page_view(self) -> PageView[AdminRecord]:
        return paginate(self.filtered, self.current_page, self.page_size)

    @property
    def page_numbers(self) -> list[int | str]:
        return page_numbers(self.current_page, self.total_pages)

    # View state changes

    def set_search_term(self, term: str) -> None:
        self.search_term = term
        self._page = 1
        self.search_input.sync(term)

    def set_page(self, page: int) -> None:
        self._page = clamp_page(page, self.total_pages)

    # Modal transitions

    def open_create(self) -> bool:
        return self._clear_form_error(self.modal.open_create())

    def open_edit(self, record: AdminRecord) -> bool:
        return self._clear_form_error(self.modal.open_edit(record))

    def open_view(self, record: AdminRecord) -> bool:
        return self._clear_form_error(self.modal.open_view(record))

    def close(self) -> bool:
        return self._clear_form_error(self.modal.close())

    def request_delete(self, record: AdminRecord) -> bool:
        return self.modal.request_delete(record)

    def cancel_delete(self) -> bool:
        return self.modal.cancel_delete()

    # Remote operations

    async def start(self) -> None:
        await self.fetch_all()

    async def fetch_all(self) -> None:
        self.loading = True
        try:
            self.admins = tuple(await self.client.list_all())
        except Exception as error:  # noqa: BLE001
            log_action(logger, MODULE, "fetch_all", None, "error", str(error))
            self.notifier.error("Failed to load admins")
            self.admins = ()
        finally:
            self.loading = False

    async def submit(self, values: dict[str, Any]) -> MutationResult:
        if self.modal.busy:
            logger.debug("submit ignored while a request is in flight")
            return MutationResult(success=False, message="Request in progress")

        mode = self.modal.mode
        existing = self.modal.focused
        form = validate_admin_form(values, creating=mode is ModalMode.CREATING)
        try:
            form.raise_for_errors()
        except ValidationError as error:
            self.form_error = error.message
            return MutationResult(success=False, message=error.message)
        self.form_error = None

        if mode is ModalMode.CREATING:
            action, record_id, success_message = "create", None, "Admin created successfully"
        elif mode is ModalMode.EDITING and existing is not None and existing.id is not None:
            action, record_id, success_message = "update", existing.id, "Admin updated successfully"
        else:
            logger.warning("submit ignored in %s mode", mode.value)
            return MutationResult(success=False, message="No admin selected")

        self.modal.busy = True
        try:
            if record_id is None:
                record = await self.client.create(AdminRecord(**form.values))
            else:
                record = await self.client.update(record_id, form.values)
        except RequestError as error:
            log_action(logger, MODULE, action, record_id, "error", error.message)
            self.notifier.error(error.message)
            return MutationResult(success=False, message=error.message)
        finally:
            self.modal.busy = False

        # The reply body may omit the record; the refetch below is authoritative.
        log_action(logger, MODULE, action, record.id if record is not None else record_id, "success")
        self.notifier.success(success_message)
        await self.fetch_all()
        self.close()
        return MutationResult(success=True, message=success_message, record=record)

    async def confirm_delete(self) -> MutationResult | None:
        target = self.modal.delete_target
        if self.modal.busy or target is None or target.id is None:
            return None

        self.modal.busy = True
        try:
            await self.client.delete(target.id)
        except RequestError as error:
            log_action(logger, MODULE, "delete", target.id, "error", error.message)
            self.notifier.error(error.message)
            return MutationResult(success=False, message=error.message, record=target)
        finally:
            self.modal.busy = False
            self.modal.finish_delete()

        log_action(logger, MODULE, "delete", target.id, "success")
        self.notifier.success("Admin deleted successfully")
        await self.fetch_all()
        return MutationResult(success=True, message="Admin deleted successfully", record=target)

    def _clear_form_error(self, applied: bool) -> bool:
        if applied:
            self.form_error = None
        return applied
