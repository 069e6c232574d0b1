# restaurant_staff/models/employee.py
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Position(str, Enum):
    """Restaurant roles an employee can hold"""
    WAITER = "waiter"
    CHEF = "chef"
    MANAGER = "manager"
    BARTENDER = "bartender"
    HOST = "host"
    DISHWASHER = "dishwasher"


class EmployeeStatus(str, Enum):
    """Employment status"""
    ACTIVE = "active"
    ON_LEAVE = "on-leave"
    TERMINATED = "terminated"


class Shift(str, Enum):
    """Working shift"""
    MORNING = "morning"
    EVENING = "evening"
    NIGHT = "night"
    FLEXIBLE = "flexible"


POSITIONS: List[str] = [p.value for p in Position]
STATUSES: List[str] = [s.value for s in EmployeeStatus]
SHIFTS: List[str] = [s.value for s in Shift]


class EmergencyContact(BaseModel):
    """Person to call in an emergency"""
    name: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None


class EmployeeModel(BaseModel):
    """Database model for employees, as stored in the employees collection"""
    id: Optional[str] = Field(default=None, alias="_id")
    name: str
    age: int
    position: str
    mobile: str
    email: str
    address: str
    salary: float
    hire_date: Optional[datetime] = Field(default=None, alias="hireDate")
    employee_id: Optional[str] = Field(default=None, alias="employeeId")
    status: str = EmployeeStatus.ACTIVE.value
    shift: str = Shift.FLEXIBLE.value
    emergency_contact: Optional[EmergencyContact] = Field(default=None, alias="emergencyContact")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "name": "Maria Lopez",
                "age": 29,
                "position": "chef",
                "mobile": "555-123-4567",
                "email": "maria.lopez@bistro.com",
                "address": "12 Harbor Street",
                "salary": 52000,
                "employeeId": "EMP0001",
                "status": "active",
                "shift": "evening",
                "emergencyContact": {
                    "name": "Carlos Lopez",
                    "phone": "555-987-6543",
                    "relationship": "brother"
                }
            }
        }
    }
