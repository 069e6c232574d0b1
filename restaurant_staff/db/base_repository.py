"""
Base repository pattern implementation for MongoDB collections.
"""
from typing import Any, Callable, Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from restaurant_staff.core.exceptions import StoreError, duplicate_error
from restaurant_staff.utils.datetime_handler import DateTimeHandler
from restaurant_staff.utils.id_handler import IdHandler


class BaseRepository:
    """
    Base repository class that implements standard CRUD operations for MongoDB collections.
    Handles ID conversions, timestamps and translation of driver errors.
    """

    def __init__(self, collection=None, collection_getter: Optional[Callable[[], Any]] = None):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
            collection_getter: Callable returning the collection, resolved on first use
        """
        self._collection = collection
        self._collection_getter = collection_getter

    @property
    def collection(self):
        if self._collection is None and self._collection_getter is not None:
            self._collection = self._collection_getter()
        return self._collection

    @staticmethod
    def _translate_error(error: Exception) -> Exception:
        """
        Map a driver exception onto the application error taxonomy.

        Args:
            error: Exception raised by Motor/PyMongo

        Returns:
            ValidationError for unique index violations, StoreError otherwise
        """
        if isinstance(error, DuplicateKeyError):
            details = error.details or {}
            key_pattern = details.get("keyPattern") or {}
            key_value = details.get("keyValue") or {}
            field = next(iter(key_pattern), None) or next(iter(key_value), None) or "key"
            return duplicate_error(field, key_value.get(field))
        return StoreError(str(error))

    async def find_by_id(self, id_value: Any) -> Optional[Dict[str, Any]]:
        """
        Find a document by ID.

        Args:
            id_value: ID to look for (string or ObjectId)

        Returns:
            Document dict with formatted IDs or None if not found
        """
        try:
            document, _ = await IdHandler.find_document_by_id(self.collection, id_value)
        except PyMongoError as e:
            raise self._translate_error(e) from e
        if document:
            return IdHandler.format_object_ids(document)
        return None

    async def find_many(self,
                        query: Dict[str, Any] = None,
                        skip: int = 0,
                        limit: int = 0,
                        sort_by: str = None,
                        sort_desc: bool = False) -> List[Dict[str, Any]]:
        """
        Find documents matching query.

        Args:
            query: MongoDB query dictionary
            skip: Number of documents to skip
            limit: Maximum number of documents to return (0 for no limit)
            sort_by: Field to sort by
            sort_desc: If True, sort in descending order

        Returns:
            List of documents with formatted IDs
        """
        if query is None:
            query = {}

        cursor = self.collection.find(query)

        # Sort before paginating so skip/limit apply to the ordered result
        if sort_by:
            direction = -1 if sort_desc else 1
            cursor = cursor.sort(sort_by, direction)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)

        try:
            documents = await cursor.to_list(length=limit or None)
        except PyMongoError as e:
            raise self._translate_error(e) from e
        return IdHandler.format_object_ids(documents)

    async def count(self, query: Dict[str, Any] = None) -> int:
        """
        Count documents matching query.

        Args:
            query: MongoDB query dictionary

        Returns:
            Count of matching documents
        """
        if query is None:
            query = {}
        try:
            return await self.collection.count_documents(query)
        except PyMongoError as e:
            raise self._translate_error(e) from e

    async def count_by(self, field: str, query: Dict[str, Any] = None) -> List[Dict[str, Any]]:
        """
        Group matching documents by a field and count each group.

        Args:
            field: Field to group on
            query: Optional MongoDB query applied before grouping

        Returns:
            List of {"_id": value, "count": n}
        """
        pipeline = []
        if query:
            pipeline.append({"$match": query})
        pipeline.append({"$group": {"_id": f"${field}", "count": {"$sum": 1}}})

        try:
            cursor = self.collection.aggregate(pipeline)
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._translate_error(e) from e

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document.

        Args:
            data: Document data

        Returns:
            Created document with formatted IDs

        Raises:
            ValidationError: If a unique index rejects the document
            StoreError: If the insert fails for any other reason
        """
        now = DateTimeHandler.get_current_datetime()
        data.setdefault("createdAt", now)
        data.setdefault("updatedAt", now)

        try:
            result = await self.collection.insert_one(data)
        except PyMongoError as e:
            raise self._translate_error(e) from e

        created_doc = await self.find_by_id(result.inserted_id)
        if not created_doc:
            raise StoreError("Document was created but could not be retrieved")

        return created_doc

    async def update(self, id_value: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update a document by ID.

        Args:
            id_value: ID of document to update
            data: New field values

        Returns:
            Updated document with formatted IDs or None if not found
        """
        obj_id = IdHandler.ensure_object_id(id_value)
        if obj_id is None:
            return None

        update_data = {k: v for k, v in data.items() if k != "_id"}
        update_data["updatedAt"] = DateTimeHandler.get_current_datetime()

        try:
            updated_doc = await self.collection.find_one_and_update(
                {"_id": obj_id},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._translate_error(e) from e

        return IdHandler.format_object_ids(updated_doc)

    async def delete(self, id_value: Any) -> Optional[Dict[str, Any]]:
        """
        Delete a document by ID.

        Args:
            id_value: ID of document to delete

        Returns:
            The document as it was before deletion, or None if not found
        """
        obj_id = IdHandler.ensure_object_id(id_value)
        if obj_id is None:
            return None

        try:
            deleted_doc = await self.collection.find_one_and_delete({"_id": obj_id})
        except PyMongoError as e:
            raise self._translate_error(e) from e

        return IdHandler.format_object_ids(deleted_doc)

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find a single document matching query.

        Args:
            query: MongoDB query dictionary

        Returns:
            Document dict with formatted IDs or None if not found
        """
        try:
            document = await self.collection.find_one(query)
        except PyMongoError as e:
            raise self._translate_error(e) from e
        if document:
            return IdHandler.format_object_ids(document)
        return None
