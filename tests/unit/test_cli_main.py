import pytest

from clients.admins_client_sdk.errors import RequestError
from clients.admins_client_sdk.models import AdminRecord

from admin_panel.app.main import build_parser, run_command
from admin_panel.app.table_controller import AdminTableController
from admin_panel.app.ui.components.alert_notifier import AlertNotifier
from admin_panel.app.ui.table_printer import print_alert


class _Client:
    def __init__(self, admins: list[AdminRecord]) -> None:
        self.admins = admins
        self.deleted: list[int] = []

    async def list_all(self) -> list[AdminRecord]:
        return list(self.admins)

    async def create(self, record: AdminRecord) -> AdminRecord:
        created = record.model_copy(update={"id": 99})
        self.admins.append(created)
        return created

    async def update(self, admin_id: int, partial: dict) -> AdminRecord:
        raise RequestError(code="HTTP_ERROR", message="email taken", status_code=422)

    async def delete(self, admin_id: int) -> None:
        self.deleted.append(admin_id)
        self.admins = [admin for admin in self.admins if admin.id != admin_id]


def _controller(admins: list[AdminRecord]) -> AdminTableController:
    return AdminTableController(_Client(admins), page_size=2, notifier=AlertNotifier(on_change=print_alert))


ROSTER = [
    AdminRecord(id=1, name="Ana Diaz", email="ana@corp.io", role="Admin"),
    AdminRecord(id=2, name="Bob Stone", email="bob@corp.io", role="Moderator"),
    AdminRecord(id=3, name="Cara Lind", email="cara@corp.io", role="Super Admin", password="never-shown"),
]


@pytest.mark.asyncio
async def test_list_prints_requested_page(capsys) -> None:
    args = build_parser().parse_args(["list", "--page", "2"])

    code = await run_command(args, _controller(list(ROSTER)))

    out = capsys.readouterr().out
    assert code == 0
    assert "Cara Lind" in out
    assert "Ana Diaz" not in out
    assert "Page 2/2" in out
    assert "never-shown" not in out


@pytest.mark.asyncio
async def test_list_with_search_without_matches(capsys) -> None:
    args = build_parser().parse_args(["list", "--search", "zed"])

    await run_command(args, _controller(list(ROSTER)))

    assert 'No admins found for "zed"' in capsys.readouterr().out


@pytest.mark.asyncio
async def test_create_reports_validation_error_without_network(capsys) -> None:
    args = build_parser().parse_args(["create", "--name", "Dan", "--email", "bad-email", "--password", "secret1"])

    code = await run_command(args, _controller(list(ROSTER)))

    assert code == 1
    assert "Invalid input: Invalid email format" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_update_failure_prints_error_banner(capsys) -> None:
    args = build_parser().parse_args(["update", "2", "--email", "ana@corp.io"])

    code = await run_command(args, _controller(list(ROSTER)))

    assert code == 1
    assert "[error] Error: email taken" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_delete_and_show_unknown_id(capsys) -> None:
    controller = _controller(list(ROSTER))

    assert await run_command(build_parser().parse_args(["delete", "1"]), controller) == 0
    assert "[success] Success: Admin deleted successfully" in capsys.readouterr().out
    assert controller.client.deleted == [1]

    assert await run_command(build_parser().parse_args(["show", "1"]), controller) == 1
    assert "Admin 1 not found" in capsys.readouterr().out
