from __future__ import annotations

import argparse
import asyncio
import sys

from clients.admins_client_sdk.admins_client import AdminsClient
from clients.admins_client_sdk.http_client import HttpClient
from clients.admins_client_sdk.models import AdminRecord, AdminRole

from admin_panel.app.config import AppConfig
from admin_panel.app.table_controller import AdminTableController
from admin_panel.app.ui.components.alert_notifier import AlertNotifier
from admin_panel.app.ui.table_printer import print_alert, print_details, print_page


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="admin-panel", description="Manage admin accounts of the remote admins service.")
    parser.add_argument("--env-file", default=".env", help="dotenv file with ADMINS_API_* settings")
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="list admins")
    list_cmd.add_argument("--search", default="", help="filter by name, email or role")
    list_cmd.add_argument("--page", type=int, default=1)

    show_cmd = commands.add_parser("show", help="show one admin")
    show_cmd.add_argument("admin_id", type=int)

    roles = [role.value for role in AdminRole]
    create_cmd = commands.add_parser("create", help="register a new admin")
    create_cmd.add_argument("--name", required=True)
    create_cmd.add_argument("--email", required=True)
    create_cmd.add_argument("--password", required=True)
    create_cmd.add_argument("--role", default=AdminRole.ADMIN.value, choices=roles)

    update_cmd = commands.add_parser("update", help="update an existing admin")
    update_cmd.add_argument("admin_id", type=int)
    update_cmd.add_argument("--name")
    update_cmd.add_argument("--email")
    update_cmd.add_argument("--password")
    update_cmd.add_argument("--role", choices=roles)

    delete_cmd = commands.add_parser("delete", help="delete an admin")
    delete_cmd.add_argument("admin_id", type=int)
    return parser


def _find(controller: AdminTableController, admin_id: int) -> AdminRecord | None:
    return next((admin for admin in controller.admins if admin.id == admin_id), None)


async def run_command(args: argparse.Namespace, controller: AdminTableController) -> int:
    await controller.start()

    if args.command == "list":
        controller.set_search_term(args.search)
        controller.set_page(args.page)
        print_page(controller.page_view, controller.page_numbers, search_term=controller.search_term)
        return 0

    if args.command == "create":
        controller.open_create()
        result = await controller.submit(
            {"name": args.name, "email": args.email, "password": args.password, "role": args.role}
        )
        if controller.form_error:
            print(f"Invalid input: {controller.form_error}")
        return 0 if result.success else 1

    existing = _find(controller, args.admin_id)
    if existing is None:
        print(f"Admin {args.admin_id} not found")
        return 1

    if args.command == "show":
        controller.open_view(existing)
        print_details(existing)
        controller.close()
        return 0

    if args.command == "update":
        controller.open_edit(existing)
        result = await controller.submit(
            {
                "name": args.name if args.name is not None else existing.name,
                "email": args.email if args.email is not None else existing.email,
                "role": args.role or existing.role,
                "password": args.password,
            }
        )
        if controller.form_error:
            print(f"Invalid input: {controller.form_error}")
        return 0 if result.success else 1

    controller.request_delete(existing)
    result = await controller.confirm_delete()
    return 0 if result is not None and result.success else 1


async def _main(args: argparse.Namespace) -> int:
    config = AppConfig.from_env(args.env_file)
    http_client = HttpClient(config=config.sdk_config())
    controller = AdminTableController(
        AdminsClient(http_client),
        page_size=config.page_size,
        search_delay_ms=config.search_delay_ms,
        notifier=AlertNotifier(duration_seconds=config.alert_seconds, on_change=print_alert),
    )
    try:
        return await run_command(args, controller)
    finally:
        await http_client.aclose()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(_main(args))
    except ValueError as error:
        print(f"Configuration error: {error}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
