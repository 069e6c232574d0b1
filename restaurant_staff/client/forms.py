"""
Client-side validation of the employee form.
"""
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

FORM_FIELDS = ("name", "age", "position", "mobile", "email", "address", "salary", "shift", "status")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_AGE = 18
MAX_AGE = 100

REQUIRED_MESSAGE = "This field is required"
AGE_MESSAGE = f"Age must be between {MIN_AGE} and {MAX_AGE}"
EMAIL_MESSAGE = "Please enter a valid email address"
SALARY_MESSAGE = "Please enter a valid salary amount"


@dataclass
class FormResult:
    """Cleaned values plus at most one error message per field."""
    data: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _parse_age(value: str):
    try:
        age = int(value)
    except ValueError:
        return None
    if MIN_AGE <= age <= MAX_AGE:
        return age
    return None


def _parse_salary(value: str):
    try:
        salary = float(value)
    except ValueError:
        return None
    if not math.isfinite(salary) or salary < 0:
        return None
    return salary


def validate_form(values: Mapping[str, Any]) -> FormResult:
    """
    Validate raw form input before it is sent to the server.

    Every field is required. Age must be a whole number from 18 to 100
    inclusive, email must look like an address and salary must be a
    non-negative number. Everything else passes through trimmed.

    Args:
        values: Raw field values, typically strings typed by the user

    Returns:
        FormResult with the cleaned payload and any per-field errors
    """
    result = FormResult()

    for name in FORM_FIELDS:
        raw = values.get(name)
        value = "" if raw is None else str(raw).strip()

        if not value:
            result.errors[name] = REQUIRED_MESSAGE
            continue

        if name == "age":
            age = _parse_age(value)
            if age is None:
                result.errors[name] = AGE_MESSAGE
            else:
                result.data[name] = age
        elif name == "email":
            if EMAIL_PATTERN.match(value):
                result.data[name] = value
            else:
                result.errors[name] = EMAIL_MESSAGE
        elif name == "salary":
            salary = _parse_salary(value)
            if salary is None:
                result.errors[name] = SALARY_MESSAGE
            else:
                result.data[name] = salary
        else:
            result.data[name] = value

    return result
