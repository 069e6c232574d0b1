"""
Client application state and the reducer that evolves it.

State is never mutated in place: every change is an action dispatched to the
Store, which replaces its AppState with ``reduce(state, action)`` and tells
its subscribers.
"""
from dataclasses import dataclass, field, replace
from functools import singledispatch
from typing import Any, Callable, Dict, List, Optional, Tuple

from restaurant_staff.client.filters import FilterCriteria, apply_filters

Employee = Dict[str, Any]


def employee_key(employee: Employee) -> Optional[str]:
    """The server-side identifier of a record."""
    return employee.get("_id") or employee.get("id")


@dataclass(frozen=True)
class Notification:
    message: str
    expires_at: float


@dataclass(frozen=True)
class AppState:
    employees: Tuple[Employee, ...] = ()
    filtered: Tuple[Employee, ...] = ()
    filters: FilterCriteria = FilterCriteria()
    is_loading: bool = False
    is_submitting: bool = False
    current_employee: Optional[Employee] = None
    modal_open: bool = False
    error: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)
    notification: Optional[Notification] = None


# Actions

@dataclass(frozen=True)
class SetLoading:
    value: bool


@dataclass(frozen=True)
class SetSubmitting:
    value: bool


@dataclass(frozen=True)
class EmployeesLoaded:
    employees: Tuple[Employee, ...]


@dataclass(frozen=True)
class EmployeeAdded:
    employee: Employee


@dataclass(frozen=True)
class EmployeeReplaced:
    employee_id: str
    employee: Employee


@dataclass(frozen=True)
class EmployeeRemoved:
    employee_id: str


@dataclass(frozen=True)
class FiltersChanged:
    filters: FilterCriteria


@dataclass(frozen=True)
class ModalOpened:
    employee: Optional[Employee] = None


@dataclass(frozen=True)
class ModalClosed:
    pass


@dataclass(frozen=True)
class ErrorShown:
    message: str


@dataclass(frozen=True)
class ErrorCleared:
    pass


@dataclass(frozen=True)
class FieldErrorsShown:
    errors: Dict[str, str]


@dataclass(frozen=True)
class NotificationShown:
    message: str
    expires_at: float


@dataclass(frozen=True)
class NotificationDismissed:
    pass


def _with_employees(state: AppState, employees) -> AppState:
    employees = tuple(employees)
    return replace(state, employees=employees, filtered=tuple(apply_filters(employees, state.filters)))


@singledispatch
def reduce(action, state: AppState) -> AppState:
    raise TypeError(f"Unknown action: {action!r}")


@reduce.register
def _(action: SetLoading, state: AppState) -> AppState:
    return replace(state, is_loading=action.value)


@reduce.register
def _(action: SetSubmitting, state: AppState) -> AppState:
    return replace(state, is_submitting=action.value)


@reduce.register
def _(action: EmployeesLoaded, state: AppState) -> AppState:
    return _with_employees(state, action.employees)


@reduce.register
def _(action: EmployeeAdded, state: AppState) -> AppState:
    return _with_employees(state, state.employees + (action.employee,))


@reduce.register
def _(action: EmployeeReplaced, state: AppState) -> AppState:
    employees = [
        action.employee if employee_key(e) == action.employee_id else e
        for e in state.employees
    ]
    return _with_employees(state, employees)


@reduce.register
def _(action: EmployeeRemoved, state: AppState) -> AppState:
    return _with_employees(state, (e for e in state.employees if employee_key(e) != action.employee_id))


@reduce.register
def _(action: FiltersChanged, state: AppState) -> AppState:
    state = replace(state, filters=action.filters)
    return _with_employees(state, state.employees)


@reduce.register
def _(action: ModalOpened, state: AppState) -> AppState:
    return replace(state, modal_open=True, current_employee=action.employee, field_errors={})


@reduce.register
def _(action: ModalClosed, state: AppState) -> AppState:
    return replace(state, modal_open=False, current_employee=None, field_errors={})


@reduce.register
def _(action: ErrorShown, state: AppState) -> AppState:
    return replace(state, error=action.message)


@reduce.register
def _(action: ErrorCleared, state: AppState) -> AppState:
    return replace(state, error=None)


@reduce.register
def _(action: FieldErrorsShown, state: AppState) -> AppState:
    return replace(state, field_errors=dict(action.errors))


@reduce.register
def _(action: NotificationShown, state: AppState) -> AppState:
    return replace(state, notification=Notification(action.message, action.expires_at))


@reduce.register
def _(action: NotificationDismissed, state: AppState) -> AppState:
    return replace(state, notification=None)


Listener = Callable[[AppState], None]


class Store:
    """Holds the current AppState and notifies subscribers after each dispatch."""

    def __init__(self, state: Optional[AppState] = None):
        self.state = state or AppState()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action) -> AppState:
        self.state = reduce(action, self.state)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state
