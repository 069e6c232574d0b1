"""
Command-line front end for the employee API.

Examples:
    staff-client list --position chef --status active
    staff-client list --search maria
    staff-client add --name "Maria Lopez" --age 29 --position chef ...
    staff-client update-status 6650f0c2a1b2c3d4e5f60718 on-leave
    staff-client delete 6650f0c2a1b2c3d4e5f60718
    staff-client stats
"""
import argparse
import asyncio
import logging
import os
import sys

from restaurant_staff.client.api import ApiError, EmployeeApiClient, NetworkError
from restaurant_staff.client.forms import FORM_FIELDS
from restaurant_staff.client.manager import EmployeeManager
from restaurant_staff.client.render import render_state, render_stats
from restaurant_staff.models.employee import POSITIONS, SHIFTS, STATUSES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Restaurant Staff Manager client")
    parser.add_argument(
        "--url",
        default=os.environ.get("STAFF_API_URL", "http://localhost:3000"),
        help="Server root URL (default: $STAFF_API_URL or http://localhost:3000)",
    )
    parser.add_argument("--legacy", action="store_true", help="Use the /persons routes")
    parser.add_argument("--verbose", action="store_true", help="Log requests and retries")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List employees")
    list_cmd.add_argument("--position", default="", choices=[""] + POSITIONS)
    list_cmd.add_argument("--status", default="", choices=[""] + STATUSES)
    list_cmd.add_argument("--shift", default="", choices=[""] + SHIFTS)
    list_cmd.add_argument("--search", default="", help="Match name, email, employee id or address")

    sub.add_parser("stats", help="Summarize active staff")

    add_cmd = sub.add_parser("add", help="Create an employee")
    defaults = {"status": "active", "shift": "flexible"}
    for name in FORM_FIELDS:
        add_cmd.add_argument(f"--{name}", default=defaults.get(name, ""))

    status_cmd = sub.add_parser("update-status", help="Change an employee's status")
    status_cmd.add_argument("id")
    status_cmd.add_argument("status", choices=STATUSES)

    delete_cmd = sub.add_parser("delete", help="Delete an employee")
    delete_cmd.add_argument("id")

    return parser


async def run_command(args, api: EmployeeApiClient) -> int:
    """Execute one parsed command; returns the process exit code."""
    manager = EmployeeManager(api)

    if args.command == "stats":
        try:
            print(render_stats(await api.stats()))
        except (ApiError, NetworkError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        return 0

    if args.command == "list":
        if not await manager.initialize():
            print(render_state(manager.state), file=sys.stderr)
            return 1
        manager.set_filters(position=args.position, status=args.status, shift=args.shift, search=args.search)
        print(render_state(manager.state))
        return 0

    if args.command == "add":
        manager.open_modal()
        saved = await manager.submit_form({name: getattr(args, name) for name in FORM_FIELDS})
        if saved is None:
            for field, message in manager.state.field_errors.items():
                print(f"{field}: {message}", file=sys.stderr)
            if manager.state.error:
                print(f"ERROR: {manager.state.error}", file=sys.stderr)
            return 1
        print(render_state(manager.state))
        return 0

    try:
        if args.command == "update-status":
            await manager.update_status(args.id, args.status)
        elif args.command == "delete":
            await manager.delete_employee(args.id)
    except (ApiError, NetworkError):
        print(f"ERROR: {manager.state.error or 'request failed'}", file=sys.stderr)
        return 1
    print(manager.state.notification.message if manager.state.notification else "Done")
    return 0


async def _main(args) -> int:
    async with EmployeeApiClient(args.url, resource="persons" if args.legacy else "employees") as api:
        return await run_command(args, api)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
