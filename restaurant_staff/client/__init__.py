"""
Client for the Restaurant Staff Manager API: HTTP access, local state and rendering.
"""
from restaurant_staff.client.api import ApiError, EmployeeApiClient, NetworkError
from restaurant_staff.client.filters import FilterCriteria, apply_filters
from restaurant_staff.client.forms import validate_form
from restaurant_staff.client.manager import EmployeeManager
from restaurant_staff.client.state import AppState, Store

__all__ = [
    "ApiError",
    "AppState",
    "EmployeeApiClient",
    "EmployeeManager",
    "FilterCriteria",
    "NetworkError",
    "Store",
    "apply_filters",
    "validate_form",
]
