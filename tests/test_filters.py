"""Client-side filter composition."""
import pytest

from restaurant_staff.client.filters import FilterCriteria, apply_filters, matches

A = {"_id": "a", "name": "Ana Reyes", "email": "ana@bistro.com", "employeeId": "EMP0001",
     "address": "1 Dock Road", "position": "chef", "status": "active", "shift": "morning"}
B = {"_id": "b", "name": "Ben Ito", "email": "ben@bistro.com", "employeeId": "EMP0002",
     "address": "2 Mill Lane", "position": "chef", "status": "on-leave", "shift": "night"}
C = {"_id": "c", "name": "Cara Diaz", "email": "cara@bistro.com", "employeeId": "EMP0003",
     "address": "3 Dock Road", "position": "waiter", "status": "active", "shift": "morning"}
EMPLOYEES = [A, B, C]


def test_position_and_status_together():
    criteria = FilterCriteria(position="chef", status="active")
    assert apply_filters([A, B], criteria) == [A]


def test_no_criteria_keeps_everything():
    assert apply_filters(EMPLOYEES, FilterCriteria()) == EMPLOYEES


def test_selection_is_case_insensitive():
    assert apply_filters(EMPLOYEES, FilterCriteria(position="CHEF", shift="Night")) == [B]


@pytest.mark.parametrize("term,expected", [
    ("ana", [A]),            # name
    ("BEN@", [B]),           # email
    ("emp0003", [C]),        # employee id
    ("dock road", [A, C]),   # address
    ("nobody", []),
])
def test_search_spans_name_email_id_and_address(term, expected):
    assert apply_filters(EMPLOYEES, FilterCriteria(search=term)) == expected


def test_search_combines_with_selections():
    assert apply_filters(EMPLOYEES, FilterCriteria(search="dock", position="waiter")) == [C]


def test_record_without_employee_id_can_still_match_other_fields():
    legacy = dict(A, employeeId=None)
    assert matches(legacy, FilterCriteria(search="ana"))
    assert not matches(legacy, FilterCriteria(search="emp"))
