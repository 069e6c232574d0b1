"""
Local filtering of the employee list.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

SEARCH_FIELDS = ("name", "email", "employeeId", "address")


@dataclass(frozen=True)
class FilterCriteria:
    """Active filter selections; an empty string means "any"."""
    position: str = ""
    status: str = ""
    shift: str = ""
    search: str = ""


def _text(value: Any) -> str:
    return str(value).lower() if value is not None else ""


def matches(employee: Dict[str, Any], criteria: FilterCriteria) -> bool:
    """
    Check one employee against every active predicate.

    Position, status and shift compare case-insensitively for equality. The
    search term matches when it is a case-insensitive substring of the name,
    email, employee id or address.
    """
    for field in ("position", "status", "shift"):
        selected = getattr(criteria, field).lower()
        if selected and _text(employee.get(field)) != selected:
            return False

    term = criteria.search.lower()
    if not term:
        return True
    return any(term in _text(employee.get(field)) for field in SEARCH_FIELDS)


def apply_filters(employees: Iterable[Dict[str, Any]], criteria: FilterCriteria) -> List[Dict[str, Any]]:
    return [employee for employee in employees if matches(employee, criteria)]
