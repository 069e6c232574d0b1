"""
Plain-text rendering of the employee list for terminals.
"""
from typing import Any, Dict, Iterable, List

from restaurant_staff.client.state import AppState
from restaurant_staff.utils.datetime_handler import DateTimeHandler

POSITION_ICONS = {
    "waiter": "🍽️",
    "chef": "👨‍🍳",
    "manager": "👔",
    "bartender": "🍸",
    "host": "🎩",
    "dishwasher": "🧼",
}
STATUS_ICONS = {
    "active": "✅",
    "on-leave": "🏖️",
    "terminated": "❌",
}
SHIFT_ICONS = {
    "morning": "🌅",
    "evening": "🌆",
    "night": "🌙",
    "flexible": "🔄",
}

EMPTY_MESSAGE = "No employees found. Try adjusting the filters or add a new employee."


def _icon(icons: Dict[str, str], value: Any, fallback: str) -> str:
    return icons.get(str(value or "").lower(), fallback)


def format_salary(value: Any) -> str:
    try:
        return f"${float(value):,.2f}".replace(".00", "")
    except (TypeError, ValueError):
        return "$0"


def render_employee(employee: Dict[str, Any]) -> str:
    """Render one employee as a multi-line card."""
    position = employee.get("position", "")
    status = employee.get("status", "")
    shift = employee.get("shift", "")
    lines = [
        f"{employee.get('name', '')}  [{employee.get('employeeId') or 'N/A'}]",
        f"  {employee.get('email', '')}",
        f"  {_icon(POSITION_ICONS, position, '💼')} {position}   {_icon(STATUS_ICONS, status, '📊')} {status}",
        f"  Age: {employee.get('age', '')} years   Mobile: {employee.get('mobile', '')}",
        f"  Shift: {_icon(SHIFT_ICONS, shift, '🔄')} {shift}   Salary: {format_salary(employee.get('salary'))}",
        f"  Address: {employee.get('address', '')}",
    ]
    hired = DateTimeHandler.format_date(employee.get("hireDate"))
    if hired:
        lines.append(f"  Hired: {hired}")
    return "\n".join(lines)


def render_employees(employees: Iterable[Dict[str, Any]]) -> str:
    cards = [render_employee(employee) for employee in employees]
    if not cards:
        return EMPTY_MESSAGE
    return "\n\n".join(cards)


def render_state(state: AppState) -> str:
    """Render the banner, notification and filtered list of a client state."""
    parts: List[str] = []
    if state.error:
        parts.append(f"ERROR: {state.error}")
    if state.notification:
        parts.append(state.notification.message)
    if state.is_loading:
        parts.append("Loading...")
    parts.append(render_employees(state.filtered))
    return "\n\n".join(parts)


def render_stats(stats: Dict[str, Any]) -> str:
    lines = [f"Active employees: {stats.get('totalEmployees', 0)}"]
    for title, key in (("By position", "byPosition"), ("By shift", "byShift")):
        lines.append(f"{title}:")
        for bucket in sorted(stats.get(key, []), key=lambda b: str(b.get("_id"))):
            lines.append(f"  {bucket.get('_id')}: {bucket.get('count')}")
    return "\n".join(lines)
