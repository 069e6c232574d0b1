"""
Employee API routes for employee management.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, status

from restaurant_staff.core.config import settings
from restaurant_staff.core.exceptions import AppError, StoreError, ValidationError
from restaurant_staff.domains.employees.service import employee_service
from restaurant_staff.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeStats, EmployeeStatusUpdate, EmployeeUpdate
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Literal envelope keys older clients still read
SAVED_KEY = "Data saved"
UPDATED_KEY = "Data updated"
DELETED_KEY = "Data deleted successfully"


def serialize_employee(employee: Dict[str, Any]) -> Dict[str, Any]:
    """Render a stored employee document in its JSON wire shape."""
    return EmployeeResponse.model_validate(employee).model_dump(mode="json", by_alias=True)


def envelope(key: str, employee: Dict[str, Any]) -> Dict[str, Any]:
    """
    Wrap a written record for the response.

    Args:
        key: Literal key used by the legacy envelope
        employee: Stored employee document

    Returns:
        {key: record} in legacy mode, {"data": record, "error": None} in standard mode
    """
    record = serialize_employee(employee)
    if settings.RESPONSE_ENVELOPE == "standard":
        return {"data": record, "error": None}
    return {key: record}


def store_failure(action: str, error: Exception) -> StoreError:
    logger.error(f"Error {action}: {str(error)}", exc_info=True)
    return StoreError(str(error))


@router.get("", response_model=List[EmployeeResponse])
async def get_employees(
    status: Optional[str] = None,
    position: Optional[str] = None,
    shift: Optional[str] = None
):
    """
    Get all employees, newest first.

    Args:
        status: Filter by employment status
        position: Filter by position
        shift: Filter by shift

    Returns:
        List of employees matching every filter given
    """
    try:
        return await employee_service.get_employees(status=status, position=position, shift=shift)
    except AppError:
        raise
    except Exception as e:
        raise store_failure("fetching employees", e)


@router.get("/stats/summary", response_model=EmployeeStats)
async def get_employee_stats():
    """
    Get counts of active employees overall, by position and by shift.
    """
    try:
        return await employee_service.get_stats()
    except AppError:
        raise
    except Exception as e:
        raise store_failure("computing employee stats", e)


@router.get("/{position_type}", response_model=List[EmployeeResponse])
async def get_employees_by_position(position_type: str):
    """
    Get employees by position.

    Args:
        position_type: Position name, e.g. "chef"

    Returns:
        List of employees in that position
    """
    try:
        return await employee_service.get_employees_by_position(position_type)
    except AppError:
        raise
    except Exception as e:
        raise store_failure("fetching employees by position", e)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_employee(employee_data: EmployeeCreate):
    """
    Create new employee.

    Args:
        employee_data: Employee creation data

    Returns:
        Created employee wrapped in the write envelope
    """
    try:
        employee = await employee_service.create_employee(
            employee_data.model_dump(by_alias=True, exclude_none=True)
        )
        return envelope(SAVED_KEY, employee)
    except ValidationError:
        raise
    except AppError as e:
        # Create reports every failure as a bad request
        raise ValidationError(e.message, kind=e.kind, field=e.field)
    except Exception as e:
        logger.error(f"Error creating employee: {str(e)}", exc_info=True)
        raise ValidationError(str(e), kind="store")


@router.put("/{employee_id}")
async def update_employee(employee_id: str, employee_data: EmployeeUpdate):
    """
    Update existing employee.

    Args:
        employee_id: Employee ID
        employee_data: Fields to overwrite

    Returns:
        Updated employee wrapped in the write envelope
    """
    try:
        updated_employee = await employee_service.update_employee(
            employee_id=employee_id,
            employee_data=employee_data.model_dump(by_alias=True, exclude_unset=True)
        )
        return envelope(UPDATED_KEY, updated_employee)
    except AppError:
        raise
    except Exception as e:
        raise store_failure("updating employee", e)


@router.patch("/{employee_id}/status", response_model=EmployeeResponse)
async def update_employee_status(employee_id: str, status_data: EmployeeStatusUpdate):
    """
    Update only the employment status.

    Args:
        employee_id: Employee ID
        status_data: New status

    Returns:
        Updated employee
    """
    try:
        return await employee_service.update_status(employee_id, status_data.status)
    except StoreError as e:
        raise ValidationError(e.message, kind=e.kind)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error updating employee status: {str(e)}", exc_info=True)
        raise ValidationError(str(e), kind="store")


@router.delete("/{employee_id}")
async def delete_employee(employee_id: str):
    """
    Delete employee.

    Args:
        employee_id: Employee ID

    Returns:
        The deleted employee's last state wrapped in the write envelope
    """
    try:
        deleted_employee = await employee_service.delete_employee(employee_id)
        return envelope(DELETED_KEY, deleted_employee)
    except AppError:
        raise
    except Exception as e:
        raise store_failure("deleting employee", e)
