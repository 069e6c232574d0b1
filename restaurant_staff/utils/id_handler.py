"""
ObjectId helpers shared by the repositories.
"""
from typing import Any, Optional, Tuple

from bson import ObjectId


class IdHandler:
    """
    Converts between the string ids the API speaks and stored ObjectIds.
    """

    @staticmethod
    def ensure_object_id(id_value: Any) -> Optional[ObjectId]:
        """
        Parse an id coming from a URL or a document.

        Args:
            id_value: ObjectId or its 24-character hex string

        Returns:
            The ObjectId, or None when the value cannot be one
        """
        if isinstance(id_value, ObjectId):
            return id_value
        if isinstance(id_value, str) and ObjectId.is_valid(id_value):
            return ObjectId(id_value)
        return None

    @staticmethod
    def format_object_ids(data: Any) -> Any:
        """Stringify every ObjectId in a document, list of documents or nested value."""
        if isinstance(data, ObjectId):
            return str(data)
        if isinstance(data, list):
            return [IdHandler.format_object_ids(item) for item in data]
        if isinstance(data, dict):
            return {key: IdHandler.format_object_ids(value) for key, value in data.items()}
        return data

    @staticmethod
    async def find_document_by_id(collection, doc_id: Any) -> Tuple[Optional[dict], Optional[ObjectId]]:
        """
        Fetch one document by id.

        Malformed ids cannot match a stored record, so they come back as
        (None, None) instead of raising.
        """
        obj_id = IdHandler.ensure_object_id(doc_id)
        if obj_id is None:
            return None, None

        document = await collection.find_one({"_id": obj_id})
        return (document, obj_id) if document else (None, None)
