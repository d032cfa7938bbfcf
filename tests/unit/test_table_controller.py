import asyncio

import pytest

from clients.admins_client_sdk.errors import RequestError
from clients.admins_client_sdk.models import AdminRecord

from admin_panel.app.table_controller import AdminTableController
from admin_panel.app.ui.components.alert_notifier import AlertKind
from admin_panel.app.ui.modal_state import ModalMode


def _admins(count: int) -> list[AdminRecord]:
    return [AdminRecord(id=index, name=f"Admin {index}", email=f"admin{index}@corp.io") for index in range(1, count + 1)]


class StubAdminsClient:
    def __init__(self, admins: list[AdminRecord] | None = None) -> None:
        self.admins = list(admins or [])
        self.calls: list[tuple] = []
        self.list_error: Exception | None = None
        self.create_error: RequestError | None = None
        self.update_error: RequestError | None = None
        self.delete_error: RequestError | None = None
        self.delete_gate: asyncio.Event | None = None
        self.create_gate: asyncio.Event | None = None

    async def list_all(self) -> list[AdminRecord]:
        self.calls.append(("list_all",))
        if self.list_error:
            raise self.list_error
        return list(self.admins)

    async def create(self, record: AdminRecord) -> AdminRecord:
        self.calls.append(("create", record))
        if self.create_gate:
            await self.create_gate.wait()
        if self.create_error:
            raise self.create_error
        created = record.model_copy(update={"id": len(self.admins) + 1, "password": None})
        self.admins.append(created)
        return created

    async def update(self, admin_id: int, partial: dict) -> AdminRecord:
        self.calls.append(("update", admin_id, partial))
        if self.update_error:
            raise self.update_error
        current = next(admin for admin in self.admins if admin.id == admin_id)
        updated = current.model_copy(update={key: value for key, value in partial.items() if key != "password"})
        self.admins = [updated if admin.id == admin_id else admin for admin in self.admins]
        return updated

    async def delete(self, admin_id: int) -> None:
        self.calls.append(("delete", admin_id))
        if self.delete_gate:
            await self.delete_gate.wait()
        if self.delete_error:
            raise self.delete_error
        self.admins = [admin for admin in self.admins if admin.id != admin_id]

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.mark.asyncio
async def test_fetch_on_start_pages_seven_admins() -> None:
    controller = AdminTableController(StubAdminsClient(_admins(7)), page_size=6)

    await controller.start()

    assert controller.loading is False
    assert [admin.id for admin in controller.page_view.items] == [1, 2, 3, 4, 5, 6]
    assert controller.total_pages == 2
    controller.set_page(2)
    assert [admin.id for admin in controller.page_view.items] == [7]


@pytest.mark.asyncio
async def test_search_resets_page_to_one() -> None:
    controller = AdminTableController(StubAdminsClient(_admins(13)), page_size=6)
    await controller.start()
    controller.set_page(3)

    controller.set_search_term("admin1")

    assert controller.current_page == 1
    assert [admin.id for admin in controller.filtered] == [1, 10, 11, 12, 13]


@pytest.mark.asyncio
async def test_current_page_is_clamped_when_collection_shrinks() -> None:
    client = StubAdminsClient(_admins(13))
    controller = AdminTableController(client, page_size=6)
    await controller.start()
    controller.set_page(3)

    client.admins = client.admins[:4]
    await controller.fetch_all()

    assert controller.current_page == 1
    controller.set_page(42)
    assert controller.current_page == 1


@pytest.mark.asyncio
async def test_debounced_search_commits_into_controller() -> None:
    controller = AdminTableController(StubAdminsClient(_admins(8)), page_size=6, search_delay_ms=10)
    await controller.start()
    controller.set_page(2)

    controller.search_input.keystroke("admin8")
    await asyncio.sleep(0.08)

    assert controller.search_term == "admin8"
    assert controller.current_page == 1
    assert [admin.id for admin in controller.page_view.items] == [8]


@pytest.mark.asyncio
async def test_empty_listing_does_not_alert() -> None:
    controller = AdminTableController(StubAdminsClient([]))

    await controller.fetch_all()

    assert controller.admins == ()
    assert controller.notifier.current is None


@pytest.mark.asyncio
async def test_unexpected_listing_exception_alerts_and_empties_collection() -> None:
    client = StubAdminsClient(_admins(2))
    controller = AdminTableController(client)
    await controller.fetch_all()
    client.list_error = RuntimeError("event loop hiccup")

    await controller.fetch_all()

    assert controller.admins == ()
    assert controller.loading is False
    assert controller.notifier.current.kind is AlertKind.ERROR
    assert controller.notifier.current.message == "Failed to load admins"


@pytest.mark.asyncio
async def test_invalid_email_never_reaches_client() -> None:
    client = StubAdminsClient()
    controller = AdminTableController(client)
    controller.open_create()

    result = await controller.submit({"name": "Ana", "email": "bad-email", "password": "secret1"})

    assert result.success is False
    assert controller.form_error == "Invalid email format"
    assert client.calls == []
    assert controller.modal.mode is ModalMode.CREATING


@pytest.mark.asyncio
async def test_create_success_alerts_refetches_then_closes() -> None:
    client = StubAdminsClient(_admins(2))
    controller = AdminTableController(client)
    await controller.start()
    controller.open_create()

    result = await controller.submit({"name": "Cara", "email": "cara@corp.io", "role": "Moderator", "password": "secret1"})

    assert result.success is True
    assert result.record.id == 3
    assert client.call_names() == ["list_all", "create", "list_all"]
    created = client.calls[1][1]
    assert created.id is None
    assert created.password == "secret1"
    assert controller.notifier.current.message == "Admin created successfully"
    assert controller.modal.mode is ModalMode.CLOSED
    assert len(controller.admins) == 3


@pytest.mark.asyncio
async def test_create_failure_keeps_modal_open_with_error_alert() -> None:
    client = StubAdminsClient()
    client.create_error = RequestError(code="HTTP_ERROR", message="Email already registered", status_code=409)
    controller = AdminTableController(client)
    controller.open_create()

    result = await controller.submit({"name": "Cara", "email": "cara@corp.io", "password": "secret1"})

    assert result.success is False
    assert controller.notifier.current.kind is AlertKind.ERROR
    assert controller.notifier.current.message == "Email already registered"
    assert controller.modal.mode is ModalMode.CREATING
    assert controller.modal.busy is False
    assert client.call_names() == ["create"]


@pytest.mark.asyncio
async def test_edit_sends_update_for_focused_id_without_blank_password() -> None:
    client = StubAdminsClient(_admins(3))
    controller = AdminTableController(client)
    await controller.start()
    controller.open_edit(controller.admins[1])

    result = await controller.submit({"name": "Renamed", "email": "admin2@corp.io", "role": "Admin", "password": ""})

    assert result.success is True
    assert client.calls[1] == ("update", 2, {"name": "Renamed", "email": "admin2@corp.io", "role": "Admin"})
    assert controller.notifier.current.message == "Admin updated successfully"
    assert controller.admins[1].name == "Renamed"


@pytest.mark.asyncio
async def test_submit_outside_create_or_edit_is_a_no_op() -> None:
    client = StubAdminsClient(_admins(1))
    controller = AdminTableController(client)
    await controller.start()
    controller.open_view(controller.admins[0])

    result = await controller.submit({"name": "Admin 1", "email": "admin1@corp.io"})

    assert result.success is False
    assert client.call_names() == ["list_all"]
    assert controller.modal.mode is ModalMode.VIEWING


@pytest.mark.asyncio
async def test_confirm_delete_without_target_does_nothing() -> None:
    client = StubAdminsClient()
    controller = AdminTableController(client)

    assert await controller.confirm_delete() is None
    controller.request_delete(AdminRecord(name="Ghost", email="ghost@corp.io"))
    assert await controller.confirm_delete() is None
    assert client.calls == []


@pytest.mark.asyncio
async def test_delete_failure_alerts_and_closes_overlay() -> None:
    client = StubAdminsClient(_admins(3))
    client.delete_error = RequestError(code="HTTP_ERROR", message="locked", status_code=500)
    controller = AdminTableController(client)
    await controller.start()
    snapshot = controller.admins

    controller.request_delete(controller.admins[2])
    result = await controller.confirm_delete()

    assert result.success is False
    assert controller.notifier.current.message == "locked"
    assert controller.modal.state.delete_confirm_open is False
    assert controller.admins == snapshot
    assert client.call_names() == ["list_all", "delete"]


@pytest.mark.asyncio
async def test_transitions_locked_while_delete_in_flight() -> None:
    client = StubAdminsClient(_admins(2))
    client.delete_gate = asyncio.Event()
    controller = AdminTableController(client)
    await controller.start()
    controller.request_delete(controller.admins[0])

    pending = asyncio.create_task(controller.confirm_delete())
    await asyncio.sleep(0)

    assert controller.modal.busy is True
    assert controller.open_create() is False
    assert controller.cancel_delete() is False

    client.delete_gate.set()
    result = await pending

    assert result.success is True
    assert controller.modal.busy is False
    assert [admin.id for admin in controller.admins] == [2]
    assert controller.open_create() is True


@pytest.mark.asyncio
async def test_second_submit_while_create_in_flight_is_rejected() -> None:
    client = StubAdminsClient()
    client.create_gate = asyncio.Event()
    controller = AdminTableController(client)
    controller.open_create()
    values = {"name": "Cara", "email": "cara@corp.io", "password": "secret1"}

    first = asyncio.create_task(controller.submit(values))
    await asyncio.sleep(0)
    second = await controller.submit(values)

    assert second.success is False
    assert controller.modal.busy is True

    client.create_gate.set()
    result = await first

    assert result.success is True
    assert client.call_names().count("create") == 1
    assert controller.modal.busy is False


@pytest.mark.asyncio
async def test_confirm_delete_ignored_while_another_delete_in_flight() -> None:
    client = StubAdminsClient(_admins(2))
    client.delete_gate = asyncio.Event()
    controller = AdminTableController(client)
    await controller.start()
    controller.request_delete(controller.admins[0])

    pending = asyncio.create_task(controller.confirm_delete())
    await asyncio.sleep(0)

    assert await controller.confirm_delete() is None

    client.delete_gate.set()
    await pending

    assert client.call_names().count("delete") == 1
