from __future__ import annotations

from clients.admins_client_sdk.models import AdminRecord

from admin_panel.app.ui.components.alert_notifier import Alert
from admin_panel.app.ui.pagination import PageView

EMPTY_VALUE = "—"
ADMIN_COLUMNS: list[tuple[str, str]] = [("id", "ID"), ("name", "User"), ("email", "Email"), ("role", "Role")]


def normalize_value(value: object) -> str:
    if value is None:
        return EMPTY_VALUE
    text = str(value).strip()
    return text or EMPTY_VALUE


def print_table(title: str, rows: list[AdminRecord], columns: list[tuple[str, str]], search_term: str = "") -> None:
    print(f"\n{title}")
    if not rows:
        suffix = f' for "{search_term}"' if search_term else ""
        print(f"No admins found{suffix}")
        return

    widths = []
    for key, header in columns:
        max_cell = max(len(normalize_value(getattr(row, key))) for row in rows)
        widths.append(max(len(header), max_cell))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, (_, header) in enumerate(columns))
    separator = "-+-".join("-" * width for width in widths)
    print(header_line)
    print(separator)

    for row in rows:
        line = " | ".join(normalize_value(getattr(row, key)).ljust(widths[idx]) for idx, (key, _) in enumerate(columns))
        print(line)


def print_page(view: PageView[AdminRecord], numbers: list[int | str], search_term: str = "") -> None:
    print_table("Admins", view.items, ADMIN_COLUMNS, search_term=search_term)
    if view.total_pages > 1:
        buttons = " ".join(f"[{item}]" if item == view.page else str(item) for item in numbers)
        print(f"Page {view.page}/{view.total_pages}: {buttons}")


def print_details(admin: AdminRecord) -> None:
    initial = admin.name[:1].upper() if admin.name else "?"
    print(f"\n({initial}) {admin.name}")
    print(f"  Email:  {normalize_value(admin.email)}")
    print(f"  Role:   {normalize_value(admin.role)}")
    print(f"  ID:     {normalize_value(admin.id)}")


def print_alert(alert: Alert | None) -> None:
    if alert is None:
        return
    print(f"[{alert.kind.value}] {alert.title}: {alert.message}")
