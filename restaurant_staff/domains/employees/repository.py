"""
Employee repository for database operations.
"""
import logging
import re
from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from restaurant_staff.db.base_repository import BaseRepository
from restaurant_staff.db.mongodb import get_counters_collection, get_employees_collection

logger = logging.getLogger(__name__)

EMPLOYEE_ID_PREFIX = "EMP"
EMPLOYEE_ID_WIDTH = 4
EMPLOYEE_ID_COUNTER = "employeeId"
EMPLOYEE_ID_PATTERN = re.compile(rf"^{EMPLOYEE_ID_PREFIX}(\d+)$")


def format_employee_id(sequence: int) -> str:
    """Render a sequence number as EMP0001, EMP0002, ..."""
    return f"{EMPLOYEE_ID_PREFIX}{sequence:0{EMPLOYEE_ID_WIDTH}d}"


class EmployeeRepository(BaseRepository):
    """
    Repository for employee data access.
    Extends BaseRepository with employee-specific lookups and the id sequence.
    """

    def __init__(self, collection=None, counters_collection=None):
        """
        Initialize with the employees and counters collections.

        Args:
            collection: Optional employees collection (resolved lazily when omitted)
            counters_collection: Optional counters collection
        """
        super().__init__(collection, collection_getter=get_employees_collection)
        self._counters = counters_collection

    @property
    def counters(self):
        if self._counters is None:
            self._counters = get_counters_collection()
        return self._counters

    async def find_by_position(self, position: str) -> List[Dict[str, Any]]:
        """
        Find employees holding exactly the given position.

        Args:
            position: Position name

        Returns:
            List of employee documents
        """
        return await self.find_many({"position": position})

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"email": email})

    async def find_by_employee_id(self, employee_id: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"employeeId": employee_id})

    async def highest_employee_number(self) -> int:
        """
        Largest sequence number among stored EMP ids, 0 when there are none.

        Compared numerically, since EMP10000 sorts before EMP9999 as text.
        """
        cursor = self.collection.find(
            {"employeeId": {"$regex": EMPLOYEE_ID_PATTERN.pattern}},
            {"employeeId": 1},
        )
        documents = await cursor.to_list(length=None)
        numbers = [
            int(match.group(1))
            for match in (EMPLOYEE_ID_PATTERN.match(doc.get("employeeId") or "") for doc in documents)
            if match
        ]
        return max(numbers, default=0)

    async def ensure_counter(self) -> None:
        """
        Seed the employee id counter from the highest id already stored.

        Only runs when the counter does not exist yet, so records created
        before the counter was introduced keep their place in the sequence
        even when some of them have since been deleted.
        """
        try:
            existing = await self.counters.find_one({"_id": EMPLOYEE_ID_COUNTER})
            if existing:
                return
            current = await self.highest_employee_number()
            await self.counters.insert_one({"_id": EMPLOYEE_ID_COUNTER, "seq": current})
            logger.info(f"Seeded employee id counter at {current}")
        except DuplicateKeyError:
            # Another process seeded it first
            return
        except PyMongoError as e:
            raise self._translate_error(e) from e

    async def next_employee_id(self) -> str:
        """
        Draw the next employee id from the atomic counter.

        Returns:
            Formatted employee id, e.g. EMP0007
        """
        try:
            counter = await self.counters.find_one_and_update(
                {"_id": EMPLOYEE_ID_COUNTER},
                {"$inc": {"seq": 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._translate_error(e) from e
        return format_employee_id(counter["seq"])
