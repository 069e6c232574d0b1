"""
Employee manager: drives API calls and keeps the client state in sync.
"""
import asyncio
import logging
import time
from dataclasses import replace
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from restaurant_staff.client.api import ApiError, EmployeeApiClient, NetworkError
from restaurant_staff.client.forms import validate_form
from restaurant_staff.client.state import (
    AppState, EmployeeAdded, EmployeeRemoved, EmployeeReplaced, EmployeesLoaded,
    ErrorCleared, ErrorShown, FieldErrorsShown, FiltersChanged, ModalClosed, ModalOpened,
    NotificationDismissed, NotificationShown, SetLoading, SetSubmitting, Store, employee_key
)

logger = logging.getLogger(__name__)

# Extra attempts after the first failed list load, waiting 1s then 2s
LOAD_RETRIES = 2
RETRY_DELAY_SECONDS = 1.0
NOTIFICATION_SECONDS = 3.0

DUPLICATE_EMAIL_MESSAGE = "An employee with this email already exists."


class EmployeeManager:
    """
    Runs the load, create, update and delete flows against the API.

    All state lives in ``store``; the manager only dispatches actions to it.
    """

    def __init__(self, api: EmployeeApiClient, store: Optional[Store] = None,
                 sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            api: Client for the employee endpoints
            store: State container; a fresh one when omitted
            sleep: Coroutine used to wait between retries
            clock: Monotonic time source for notification expiry
        """
        self.api = api
        self.store = store or Store()
        self.sleep = sleep
        self.clock = clock

    @property
    def state(self) -> AppState:
        return self.store.state

    def dispatch(self, action) -> AppState:
        return self.store.dispatch(action)

    async def initialize(self) -> bool:
        """
        Check the server, then load the full list.

        Returns:
            True if both steps succeeded
        """
        try:
            health = await self.api.health()
            logger.info(f"Server health check: {health}")
        except (ApiError, NetworkError) as e:
            logger.error(f"Health check failed: {e}")
            self.dispatch(ErrorShown("Failed to connect to server. Please ensure the backend is running."))
            return False

        return await self.load_employees()

    async def load_employees(self) -> bool:
        """
        Replace the local list with the server's.

        Network failures are retried with a growing delay; HTTP errors are not.

        Returns:
            True if the list was loaded
        """
        self.dispatch(SetLoading(True))
        self.dispatch(ErrorCleared())
        try:
            for attempt in range(LOAD_RETRIES + 1):
                try:
                    employees = await self.api.list_employees()
                except NetworkError as e:
                    if attempt < LOAD_RETRIES:
                        delay = RETRY_DELAY_SECONDS * (attempt + 1)
                        logger.info(f"Retrying connection in {delay:g}s... Attempt {attempt + 1}")
                        await self.sleep(delay)
                        continue
                    self.dispatch(ErrorShown(f"Failed to load employees: {e}"))
                    return False
                except ApiError as e:
                    self.dispatch(ErrorShown(f"Failed to load employees: {e.message}"))
                    return False

                self.dispatch(EmployeesLoaded(tuple(employees)))
                return True
            return False
        finally:
            self.dispatch(SetLoading(False))

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        self.dispatch(SetSubmitting(True))
        try:
            employee = await self.api.create_employee(employee_data)
            self.dispatch(EmployeeAdded(employee))
            self._succeed("Employee created successfully!")
            return employee
        except (ApiError, NetworkError) as e:
            self._handle_api_error(e)
            raise
        finally:
            self.dispatch(SetSubmitting(False))

    async def update_employee(self, employee_id: str, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        self.dispatch(SetSubmitting(True))
        try:
            employee = await self.api.update_employee(employee_id, employee_data)
            self.dispatch(EmployeeReplaced(employee_id, employee))
            self._succeed("Employee updated successfully!")
            return employee
        except (ApiError, NetworkError) as e:
            self._handle_api_error(e)
            raise
        finally:
            self.dispatch(SetSubmitting(False))

    async def update_status(self, employee_id: str, status: str) -> Dict[str, Any]:
        self.dispatch(SetSubmitting(True))
        try:
            employee = await self.api.update_status(employee_id, status)
            self.dispatch(EmployeeReplaced(employee_id, employee))
            self._succeed("Employee status updated!")
            return employee
        except (ApiError, NetworkError) as e:
            self._handle_api_error(e)
            raise
        finally:
            self.dispatch(SetSubmitting(False))

    async def delete_employee(self, employee_id: str) -> None:
        self.dispatch(SetLoading(True))
        try:
            await self.api.delete_employee(employee_id)
            self.dispatch(EmployeeRemoved(employee_id))
            self._succeed("Employee deleted successfully!")
        except (ApiError, NetworkError) as e:
            self.dispatch(ErrorShown(f"Failed to delete employee: {e}"))
            raise
        finally:
            self.dispatch(SetLoading(False))

    async def submit_form(self, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Validate the form and create or update depending on the open modal.

        Returns:
            The saved employee, or None if validation or the request failed
        """
        if self.state.is_submitting:
            return None

        result = validate_form(values)
        self.dispatch(FieldErrorsShown(result.errors))
        if not result.is_valid:
            return None

        current = self.state.current_employee
        try:
            if current:
                return await self.update_employee(employee_key(current), result.data)
            return await self.create_employee(result.data)
        except (ApiError, NetworkError) as e:
            logger.error(f"Form submission error: {e}")
            return None

    def open_modal(self, employee: Optional[Dict[str, Any]] = None) -> None:
        self.dispatch(ModalOpened(employee))

    def close_modal(self) -> None:
        self.dispatch(ModalClosed())

    def set_filters(self, **changes: str) -> None:
        """Change one or more of position, status, shift and search."""
        self.dispatch(FiltersChanged(replace(self.state.filters, **changes)))

    def dismiss_expired(self) -> None:
        """Drop the success notification once it has been shown long enough."""
        notification = self.state.notification
        if notification and self.clock() >= notification.expires_at:
            self.dispatch(NotificationDismissed())

    def _succeed(self, message: str) -> None:
        self.dispatch(ModalClosed())
        self.dispatch(NotificationShown(message, self.clock() + NOTIFICATION_SECONDS))
        try:
            asyncio.get_running_loop().call_later(NOTIFICATION_SECONDS, self.dismiss_expired)
        except RuntimeError:
            # No loop running; dismiss_expired() is left to the caller
            pass

    def _handle_api_error(self, error: Exception) -> None:
        if isinstance(error, ApiError) and error.is_duplicate_email:
            self.dispatch(FieldErrorsShown({**self.state.field_errors, "email": DUPLICATE_EMAIL_MESSAGE}))
            return
        self.dispatch(ErrorShown(str(error)))
