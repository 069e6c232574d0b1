"""
MongoDB connection management.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from restaurant_staff.core.config import settings

logger = logging.getLogger(__name__)

EMPLOYEES_COLLECTION = "employees"
COUNTERS_COLLECTION = "counters"


class MongoDB:
    """
    MongoDB connection manager.
    Holds the single client shared by every request and hands out collections.
    """

    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None

    @classmethod
    def get_mongodb_url(cls) -> str:
        """
        Get MongoDB connection URL from settings.

        Returns:
            MongoDB connection URL

        Raises:
            RuntimeError: If MONGODB_URL is not configured
        """
        if not settings.MONGODB_URL:
            raise RuntimeError("MONGODB_URL environment variable is not set")
        return settings.MONGODB_URL

    @classmethod
    def get_database_name(cls) -> str:
        return settings.MONGODB_DB

    @classmethod
    def connect_to_mongodb(cls):
        """
        Create the client if not already connected.
        Motor connects lazily, so this does not block on the network.
        """
        if cls.client is None:
            mongodb_url = cls.get_mongodb_url()
            database_name = cls.get_database_name()

            logger.info(f"Connecting to MongoDB (database: {database_name})")

            cls.client = AsyncIOMotorClient(mongodb_url)
            cls.db = cls.client[database_name]

    @classmethod
    async def close_mongodb_connection(cls):
        """
        Close MongoDB connection if open.
        """
        if cls.client is not None:
            cls.client.close()
            cls.client = None
            cls.db = None
            logger.info("Closed MongoDB connection")

    @classmethod
    def get_database(cls) -> AsyncIOMotorDatabase:
        """
        Get database instance, connecting on demand.

        Returns:
            AsyncIOMotorDatabase instance
        """
        if cls.db is None:
            cls.connect_to_mongodb()
        return cls.db

    @classmethod
    def get_collection(cls, collection_name: str):
        """
        Get collection by name.

        Args:
            collection_name: Name of collection

        Returns:
            AsyncIOMotorCollection instance
        """
        return cls.get_database()[collection_name]

    @classmethod
    async def ping(cls) -> bool:
        """
        Check that the server answers.

        Returns:
            True if the ping command succeeded
        """
        try:
            await cls.get_database().command("ping")
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {str(e)}")
            return False

    @classmethod
    async def ensure_indexes(cls):
        """Create the unique and sort indexes the employees collection relies on."""
        employees = cls.get_collection(EMPLOYEES_COLLECTION)
        await employees.create_index([("email", ASCENDING)], unique=True)
        # Sparse so records inserted before ids existed do not collide on null
        await employees.create_index([("employeeId", ASCENDING)], unique=True, sparse=True)
        await employees.create_index([("createdAt", DESCENDING)])
        logger.info("MongoDB indexes ensured")


mongodb = MongoDB()


def get_employees_collection():
    return mongodb.get_collection(EMPLOYEES_COLLECTION)


def get_counters_collection():
    return mongodb.get_collection(COUNTERS_COLLECTION)
