#!/usr/bin/env python3
# scripts/seed_employees.py

import asyncio
from datetime import datetime, timedelta

from restaurant_staff.core.exceptions import AppError
from restaurant_staff.db.mongodb import mongodb
from restaurant_staff.domains.employees.service import employee_service
from restaurant_staff.schemas.employee import EmployeeCreate

NOW = datetime.utcnow()

# Sample roster for a single restaurant
EMPLOYEES = [
    {"name": "Maria Lopez", "age": 34, "position": "manager", "mobile": "555-0101",
     "email": "maria.lopez@bistro.com", "address": "12 Harbor Street", "salary": 62000,
     "shift": "flexible", "hireDate": NOW - timedelta(days=900),
     "emergencyContact": {"name": "Carlos Lopez", "phone": "555-0199", "relationship": "brother"}},
    {"name": "Kenji Sato", "age": 41, "position": "chef", "mobile": "555-0102",
     "email": "kenji.sato@bistro.com", "address": "88 Mill Road", "salary": 58000,
     "shift": "evening", "hireDate": NOW - timedelta(days=700)},
    {"name": "Aisha Bello", "age": 27, "position": "chef", "mobile": "555-0103",
     "email": "aisha.bello@bistro.com", "address": "4 Orchard Lane", "salary": 47000,
     "shift": "morning", "hireDate": NOW - timedelta(days=300)},
    {"name": "Tom Walsh", "age": 23, "position": "waiter", "mobile": "555-0104",
     "email": "tom.walsh@bistro.com", "address": "230 Canal Street", "salary": 31000,
     "shift": "evening"},
    {"name": "Priya Nair", "age": 29, "position": "bartender", "mobile": "555-0105",
     "email": "priya.nair@bistro.com", "address": "19 Elm Court", "salary": 36000,
     "shift": "night"},
    {"name": "Lucas Moreau", "age": 21, "position": "host", "mobile": "555-0106",
     "email": "lucas.moreau@bistro.com", "address": "7 Station Road", "salary": 29000,
     "shift": "morning", "status": "on-leave"},
    {"name": "Ben Okafor", "age": 19, "position": "dishwasher", "mobile": "555-0107",
     "email": "ben.okafor@bistro.com", "address": "51 Bridge Street", "salary": 26000,
     "shift": "night"},
]


async def seed_employees():
    """Create the sample roster through the service so ids and defaults match the API"""
    await mongodb.ensure_indexes()
    await employee_service.prepare()

    created = []
    for raw in EMPLOYEES:
        employee_data = EmployeeCreate.model_validate(raw).model_dump(by_alias=True, exclude_none=True)
        try:
            employee = await employee_service.create_employee(employee_data)
        except AppError as e:
            print(f"Skipped {raw['email']}: {e.message}")
            continue
        print(f"Created {employee['employeeId']} {employee['name']} ({employee['position']})")
        created.append(employee)

    return created


async def main():
    """Main function to seed the employees collection"""
    try:
        print("Seeding employees...")
        created = await seed_employees()
        print(f"\nSummary:\n  - Employees created: {len(created)}")
    finally:
        await mongodb.close_mongodb_connection()


if __name__ == "__main__":
    asyncio.run(main())
