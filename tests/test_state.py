"""Reducer and store behaviour for the client state."""
import pytest

from restaurant_staff.client.filters import FilterCriteria
from restaurant_staff.client.state import (
    AppState, EmployeeAdded, EmployeeRemoved, EmployeeReplaced, EmployeesLoaded, ErrorCleared,
    ErrorShown, FieldErrorsShown, FiltersChanged, ModalClosed, ModalOpened, NotificationDismissed,
    NotificationShown, SetLoading, Store, reduce
)

CHEF = {"_id": "1", "name": "A", "position": "chef", "status": "active", "shift": "morning"}
WAITER = {"_id": "2", "name": "B", "position": "waiter", "status": "active", "shift": "night"}


def loaded(*employees, **filters):
    state = AppState(filters=FilterCriteria(**filters))
    return reduce(EmployeesLoaded(tuple(employees)), state)


def test_load_replaces_list_wholesale():
    state = loaded(CHEF)
    state = reduce(EmployeesLoaded((WAITER,)), state)
    assert state.employees == (WAITER,)
    assert state.filtered == (WAITER,)


def test_load_applies_current_filters():
    state = loaded(CHEF, WAITER, position="chef")
    assert state.filtered == (CHEF,)


def test_added_employee_is_filtered_like_the_rest():
    state = loaded(CHEF, position="chef")
    state = reduce(EmployeeAdded(WAITER), state)
    assert state.employees == (CHEF, WAITER)
    assert state.filtered == (CHEF,)


def test_replace_by_id():
    promoted = dict(CHEF, position="manager")
    state = reduce(EmployeeReplaced("1", promoted), loaded(CHEF, WAITER))
    assert state.employees == (promoted, WAITER)


def test_remove_by_id():
    state = reduce(EmployeeRemoved("1"), loaded(CHEF, WAITER))
    assert state.employees == (WAITER,)
    assert state.filtered == (WAITER,)


def test_changing_filters_recomputes_view():
    state = reduce(FiltersChanged(FilterCriteria(shift="night")), loaded(CHEF, WAITER))
    assert state.filtered == (WAITER,)
    assert state.employees == (CHEF, WAITER)


def test_modal_tracks_current_employee_and_clears_field_errors():
    state = reduce(FieldErrorsShown({"email": "taken"}), AppState())
    state = reduce(ModalOpened(CHEF), state)
    assert state.modal_open and state.current_employee == CHEF
    assert state.field_errors == {}

    state = reduce(ModalClosed(), reduce(FieldErrorsShown({"age": "bad"}), state))
    assert not state.modal_open
    assert state.current_employee is None
    assert state.field_errors == {}


def test_flags_errors_and_notifications():
    state = reduce(SetLoading(True), AppState())
    assert state.is_loading
    state = reduce(ErrorShown("boom"), state)
    assert state.error == "boom"
    assert reduce(ErrorCleared(), state).error is None

    state = reduce(NotificationShown("Saved", expires_at=10.0), state)
    assert state.notification.message == "Saved"
    assert reduce(NotificationDismissed(), state).notification is None


def test_reducer_does_not_mutate_previous_state():
    before = loaded(CHEF)
    after = reduce(EmployeeAdded(WAITER), before)
    assert before.employees == (CHEF,)
    assert after is not before


def test_unknown_action_is_rejected():
    with pytest.raises(TypeError):
        reduce(object(), AppState())


def test_store_notifies_subscribers():
    store = Store()
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.dispatch(SetLoading(True))
    unsubscribe()
    store.dispatch(SetLoading(False))

    assert len(seen) == 1
    assert seen[0].is_loading
    assert store.state.is_loading is False
