"""In-memory test doubles for the employee repository."""
import copy
import itertools
from datetime import datetime, timedelta

from bson import ObjectId

from restaurant_staff.core.exceptions import duplicate_error
from restaurant_staff.domains.employees.repository import format_employee_id
from restaurant_staff.utils.id_handler import IdHandler

BASE_TIME = datetime(2024, 1, 1, 9, 0, 0)


class FakeEmployeeRepository:
    """
    In-memory stand-in for EmployeeRepository.

    Mirrors the unique indexes on email and employeeId, and hands out
    strictly increasing createdAt values so ordering is deterministic.
    """

    def __init__(self):
        self.documents = {}
        self.seq = 0
        self._clock = itertools.count(1)
        self.fail_with = None

    def _check_failure(self):
        if self.fail_with:
            raise self.fail_with

    def _check_unique(self, data, exclude_id=None):
        for field in ("email", "employeeId"):
            value = data.get(field)
            if value is None:
                continue
            for doc_id, doc in self.documents.items():
                if doc_id != exclude_id and doc.get(field) == value:
                    raise duplicate_error(field, value)

    @staticmethod
    def _key(id_value):
        # Stored ids are lowercase hex, as str(ObjectId) renders them
        obj_id = IdHandler.ensure_object_id(id_value)
        return str(obj_id) if obj_id else None

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(k) == v for k, v in (query or {}).items())

    async def ensure_counter(self):
        return None

    async def next_employee_id(self):
        self.seq += 1
        return format_employee_id(self.seq)

    async def find_by_id(self, id_value):
        self._check_failure()
        doc = self.documents.get(self._key(id_value))
        return copy.deepcopy(doc) if doc else None

    async def find_one(self, query):
        self._check_failure()
        for doc in self.documents.values():
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def find_by_email(self, email):
        return await self.find_one({"email": email})

    async def find_by_employee_id(self, employee_id):
        return await self.find_one({"employeeId": employee_id})

    async def find_many(self, query=None, skip=0, limit=0, sort_by=None, sort_desc=False):
        self._check_failure()
        docs = [copy.deepcopy(d) for d in self.documents.values() if self._matches(d, query)]
        if sort_by:
            docs.sort(key=lambda d: d.get(sort_by), reverse=sort_desc)
        return docs

    async def find_by_position(self, position):
        return await self.find_many({"position": position})

    async def count(self, query=None):
        self._check_failure()
        return len([d for d in self.documents.values() if self._matches(d, query)])

    async def count_by(self, field, query=None):
        self._check_failure()
        counts = {}
        for doc in self.documents.values():
            if self._matches(doc, query):
                counts[doc.get(field)] = counts.get(doc.get(field), 0) + 1
        return [{"_id": key, "count": value} for key, value in counts.items()]

    async def create(self, data):
        self._check_failure()
        self._check_unique(data)
        stamp = BASE_TIME + timedelta(seconds=next(self._clock))
        doc = dict(data)
        doc["_id"] = str(ObjectId())
        doc.setdefault("createdAt", stamp)
        doc.setdefault("updatedAt", stamp)
        self.documents[doc["_id"]] = doc
        return copy.deepcopy(doc)

    async def update(self, id_value, data):
        self._check_failure()
        key = self._key(id_value)
        if key not in self.documents:
            return None
        self._check_unique(data, exclude_id=key)
        doc = self.documents[key]
        doc.update({k: v for k, v in data.items() if k != "_id"})
        doc["updatedAt"] = BASE_TIME + timedelta(seconds=next(self._clock))
        return copy.deepcopy(doc)

    async def delete(self, id_value):
        self._check_failure()
        doc = self.documents.pop(self._key(id_value), None)
        return copy.deepcopy(doc) if doc else None


def make_employee(**overrides):
    """A valid create payload, with fields overridden as needed."""
    payload = {
        "name": "Maria Lopez",
        "age": 29,
        "position": "chef",
        "mobile": "555-0101",
        "email": "maria.lopez@bistro.com",
        "address": "12 Harbor Street",
        "salary": 52000,
    }
    payload.update(overrides)
    return payload


