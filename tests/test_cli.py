"""Terminal rendering and CLI commands over a mocked transport."""
import asyncio
import json

import httpx

from restaurant_staff.client.api import EmployeeApiClient
from restaurant_staff.client.cli import build_parser, run_command
from restaurant_staff.client.render import EMPTY_MESSAGE, format_salary, render_employee, render_stats

CHEF = {"_id": "1", "name": "Ana Reyes", "email": "ana@bistro.com", "employeeId": "EMP0001", "age": 34,
        "mobile": "555-0100", "address": "1 Dock Road", "position": "chef", "status": "active",
        "shift": "morning", "salary": 52000, "hireDate": "2024-03-01T00:00:00"}
WAITER = dict(CHEF, _id="2", name="Ben Ito", email="ben@bistro.com", employeeId="EMP0002",
              position="waiter", shift="night")


def run_cli(argv, handler):
    args = build_parser().parse_args(argv)

    async def go():
        async with EmployeeApiClient("http://staff.test", transport=httpx.MockTransport(handler)) as api:
            return await run_command(args, api)

    return asyncio.run(go())


def test_format_salary():
    assert format_salary(52000) == "$52,000"
    assert format_salary("1234.5") == "$1,234.50"
    assert format_salary(None) == "$0"


def test_render_employee_card():
    card = render_employee(CHEF)
    assert "Ana Reyes  [EMP0001]" in card
    assert "👨‍🍳 chef" in card
    assert "Salary: $52,000" in card
    assert "Hired:" in card


def test_render_employee_without_id_or_hire_date():
    card = render_employee(dict(CHEF, employeeId=None, hireDate=None))
    assert "[N/A]" in card
    assert "Hired:" not in card


def test_render_stats_sorted_buckets():
    text = render_stats({
        "totalEmployees": 3,
        "byPosition": [{"_id": "waiter", "count": 1}, {"_id": "chef", "count": 2}],
        "byShift": [{"_id": "night", "count": 3}],
    })
    lines = text.splitlines()
    assert lines[0] == "Active employees: 3"
    assert lines.index("  chef: 2") < lines.index("  waiter: 1")


def test_list_filters_locally(capsys):
    def handler(request):
        if request.url.path == "/health":
            return httpx.Response(200, json={"status": "OK"})
        return httpx.Response(200, json=[CHEF, WAITER])

    assert run_cli(["list", "--position", "waiter"], handler) == 0
    out = capsys.readouterr().out
    assert "Ben Ito" in out
    assert "Ana Reyes" not in out


def test_list_with_no_matches_prints_empty_message(capsys):
    def handler(request):
        if request.url.path == "/health":
            return httpx.Response(200, json={"status": "OK"})
        return httpx.Response(200, json=[CHEF])

    assert run_cli(["list", "--search", "nobody"], handler) == 0
    assert EMPTY_MESSAGE in capsys.readouterr().out


def test_list_reports_unreachable_server(capsys):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    assert run_cli(["list"], handler) == 1
    assert "Failed to connect to server" in capsys.readouterr().err


def test_add_validates_before_sending(capsys):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(201, json={})

    assert run_cli(["add", "--name", "Cara", "--age", "12"], handler) == 1
    assert calls == []
    assert "age:" in capsys.readouterr().err


def test_add_posts_typed_values(capsys):
    sent = {}

    def handler(request):
        sent.update(json.loads(request.content))
        return httpx.Response(201, json={"Data saved": dict(CHEF, _id="3", name="Cara Diaz")})

    argv = ["add", "--name", "Cara Diaz", "--age", "30", "--position", "host", "--mobile", "555-0103",
            "--email", "cara@bistro.com", "--address", "3 Dock Road", "--salary", "30000"]
    assert run_cli(argv, handler) == 0
    assert sent["age"] == 30
    assert sent["shift"] == "flexible"
    assert sent["status"] == "active"
    assert "Employee created successfully!" in capsys.readouterr().out


def test_delete_missing_employee_fails(capsys):
    def handler(request):
        return httpx.Response(404, json={"message": "Employee not found", "kind": "not_found"})

    assert run_cli(["delete", "abc"], handler) == 1
    assert "Employee not found" in capsys.readouterr().err


def test_stats_command(capsys):
    def handler(request):
        assert request.url.path == "/employees/stats/summary"
        return httpx.Response(200, json={"totalEmployees": 1, "byPosition": [], "byShift": []})

    assert run_cli(["stats"], handler) == 0
    assert "Active employees: 1" in capsys.readouterr().out
