"""
Employee schema models for validation.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from restaurant_staff.models.employee import (
    EmergencyContact, EmployeeModel, EmployeeStatus, Position, Shift
)

REQUIRED_FIELDS = ("name", "age", "position", "mobile", "email", "address", "salary")


class EmployeeBase(BaseModel):
    """Base employee schema with common fields."""
    name: str
    age: int
    position: Position
    mobile: str
    email: EmailStr
    address: str
    salary: float
    status: EmployeeStatus = EmployeeStatus.ACTIVE.value
    shift: Shift = Shift.FLEXIBLE.value
    emergency_contact: Optional[EmergencyContact] = Field(default=None, alias="emergencyContact")

    @field_validator('salary')
    @classmethod
    def validate_salary(cls, v):
        if v < 0:
            raise ValueError('Salary must not be negative')
        return v

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
        "extra": "ignore"
    }


class EmployeeCreate(EmployeeBase):
    """Schema for creating employees."""
    hire_date: Optional[datetime] = Field(default=None, alias="hireDate")
    employee_id: Optional[str] = Field(default=None, alias="employeeId")


class EmployeeUpdate(BaseModel):
    """
    Schema for updating employees.
    Every field may be overwritten, including the system-assigned ones.
    """
    name: Optional[str] = None
    age: Optional[int] = None
    position: Optional[Position] = None
    mobile: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    salary: Optional[float] = None
    hire_date: Optional[datetime] = Field(default=None, alias="hireDate")
    employee_id: Optional[str] = Field(default=None, alias="employeeId")
    status: Optional[EmployeeStatus] = None
    shift: Optional[Shift] = None
    emergency_contact: Optional[EmergencyContact] = Field(default=None, alias="emergencyContact")

    @field_validator(*REQUIRED_FIELDS, 'status', 'shift')
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        # Only runs for values the caller actually sent
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v

    @field_validator('salary')
    @classmethod
    def validate_salary(cls, v):
        if v is not None and v < 0:
            raise ValueError('Salary must not be negative')
        return v

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
        "extra": "ignore"
    }


class EmployeeStatusUpdate(BaseModel):
    """Schema for the status-only update."""
    status: EmployeeStatus

    model_config = {
        "use_enum_values": True,
        "extra": "ignore"
    }


class EmployeeResponse(EmployeeModel):
    """Schema for employee responses."""
    id: str = Field(..., alias="_id")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore"
    }


class GroupCount(BaseModel):
    """One bucket of a count-by aggregation."""
    id: Optional[str] = Field(default=None, alias="_id")
    count: int

    model_config = {"populate_by_name": True}


class EmployeeStats(BaseModel):
    """Schema for the active-staff summary."""
    total_employees: int = Field(..., alias="totalEmployees")
    by_position: List[GroupCount] = Field(default_factory=list, alias="byPosition")
    by_shift: List[GroupCount] = Field(default_factory=list, alias="byShift")

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    """Schema for the health check."""
    status: str
    timestamp: str
    mongodb: str
    service: str
