"""
Employee service for business logic.
"""
import logging
from typing import Any, Dict, List, Optional

from restaurant_staff.core.exceptions import NotFoundError, ValidationError, duplicate_error
from restaurant_staff.domains.employees.repository import EmployeeRepository
from restaurant_staff.models.employee import EmployeeStatus, POSITIONS
from restaurant_staff.utils.datetime_handler import DateTimeHandler
from restaurant_staff.utils.id_handler import IdHandler

logger = logging.getLogger(__name__)

LIST_FILTER_FIELDS = ("status", "position", "shift")


def build_employee_filter(**params: Optional[str]) -> Dict[str, Any]:
    """
    Compose an equality filter from the optional list parameters.

    Parameters that are missing or empty are left out of the filter rather
    than matching nothing.
    """
    return {
        field: params[field]
        for field in LIST_FILTER_FIELDS
        if params.get(field)
    }


class EmployeeService:
    """
    Service for employee-related business logic.
    """

    def __init__(self, employee_repo: Optional[EmployeeRepository] = None):
        """
        Initialize with employee repository.

        Args:
            employee_repo: Optional employee repository instance
        """
        self.employee_repo = employee_repo or EmployeeRepository()

    async def prepare(self) -> None:
        """Make sure the employee id sequence exists before serving requests."""
        await self.employee_repo.ensure_counter()

    async def get_employees(
            self,
            status: Optional[str] = None,
            position: Optional[str] = None,
            shift: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Get employees with optional filtering, newest first.

        Args:
            status: Filter by employment status
            position: Filter by position
            shift: Filter by shift

        Returns:
            List of employee documents
        """
        query = build_employee_filter(status=status, position=position, shift=shift)
        return await self.employee_repo.find_many(query, sort_by="createdAt", sort_desc=True)

    async def get_employees_by_position(self, position_type: str) -> List[Dict[str, Any]]:
        """
        Get employees holding a position.

        Args:
            position_type: One of the restaurant positions

        Returns:
            List of employee documents

        Raises:
            ValidationError: If the position is not a known one
        """
        if position_type not in POSITIONS:
            raise ValidationError("Invalid position type", field="positionType")

        return await self.employee_repo.find_by_position(position_type)

    async def get_stats(self) -> Dict[str, Any]:
        """
        Summarize active staff.

        Returns:
            Total active employees plus counts by position and by shift
        """
        active = {"status": EmployeeStatus.ACTIVE.value}

        total = await self.employee_repo.count(active)
        by_position = await self.employee_repo.count_by("position", active)
        by_shift = await self.employee_repo.count_by("shift", active)

        return {
            "totalEmployees": total,
            "byPosition": by_position,
            "byShift": by_shift
        }

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new employee.

        Args:
            employee_data: Validated employee data keyed by stored field names

        Returns:
            Created employee document

        Raises:
            ValidationError: If the email or employee id is already taken
        """
        await self._check_unique(employee_data)

        # Drawn after the uniqueness check so a rejected record does not burn a number
        if not employee_data.get("employeeId"):
            employee_data["employeeId"] = await self.employee_repo.next_employee_id()

        if not employee_data.get("hireDate"):
            employee_data["hireDate"] = DateTimeHandler.get_current_datetime()

        created_employee = await self.employee_repo.create(employee_data)
        logger.info(f"Employee {created_employee.get('employeeId')} created")
        return created_employee

    async def update_employee(self, employee_id: str, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Overwrite fields of an existing employee.

        Args:
            employee_id: Employee document ID
            employee_data: Fields to overwrite

        Returns:
            Updated employee document

        Raises:
            NotFoundError: If no employee has this ID
            ValidationError: If the new email or employee id is already taken
        """
        current = await self.employee_repo.find_by_id(employee_id)
        if not current:
            raise NotFoundError("Employee not found")

        # Compare against the stored id, not the path spelling of it
        await self._check_unique(employee_data, exclude_id=current["_id"])

        updated_employee = await self.employee_repo.update(employee_id, employee_data)
        if not updated_employee:
            raise NotFoundError("Employee not found")

        logger.info(f"Employee {employee_id} updated")
        return updated_employee

    async def update_status(self, employee_id: str, status: str) -> Dict[str, Any]:
        """
        Change only the employment status.

        Args:
            employee_id: Employee document ID
            status: New status

        Returns:
            Updated employee document
        """
        updated_employee = await self.employee_repo.update(employee_id, {"status": status})
        if not updated_employee:
            raise NotFoundError("Employee not found")

        logger.info(f"Employee {employee_id} status set to {status}")
        return updated_employee

    async def delete_employee(self, employee_id: str) -> Dict[str, Any]:
        """
        Delete an employee.

        Args:
            employee_id: Employee document ID

        Returns:
            The employee as it was before deletion

        Raises:
            NotFoundError: If no employee has this ID
        """
        deleted_employee = await self.employee_repo.delete(employee_id)
        if not deleted_employee:
            raise NotFoundError("Employee not found")

        logger.info(f"Employee {employee_id} deleted")
        return deleted_employee

    async def _check_unique(self, employee_data: Dict[str, Any], exclude_id: Optional[str] = None) -> None:
        """Reject data whose email or employee id belongs to another record."""
        if exclude_id is not None:
            exclude_id = str(IdHandler.ensure_object_id(exclude_id) or exclude_id)
        lookups = (
            ("email", self.employee_repo.find_by_email),
            ("employeeId", self.employee_repo.find_by_employee_id),
        )
        for field, finder in lookups:
            value = employee_data.get(field)
            if not value:
                continue
            existing = await finder(value)
            if existing and existing.get("_id") != exclude_id:
                raise duplicate_error(field, value)


# Create service instance
employee_service = EmployeeService()
