# sales_dashboard/config/database.py
from pymongo import MongoClient, ASCENDING, TEXT
from pymongo.errors import ConnectionFailure, PyMongoError, ServerSelectionTimeoutError
from loguru import logger

from .setting import settings

# Indexes backing the filter/sort fields the dashboard uses most
TRANSACTION_INDEXES = [
    ([("transactionID", ASCENDING)], {"unique": True}),
    ([("date", ASCENDING)], {}),
    ([("phone", ASCENDING)], {}),
    ([("region", ASCENDING)], {}),
    ([("status", ASCENDING)], {}),
    ([("productCategory", ASCENDING)], {}),
    ([("paymentMethod", ASCENDING)], {}),
    ([("region", ASCENDING), ("status", ASCENDING)], {}),
    ([("productCategory", ASCENDING), ("paymentMethod", ASCENDING)], {}),
    ([("customerName", TEXT), ("productName", TEXT)], {}),
]


class DatabaseConnection:
    """MongoDB connection manager"""

    def __init__(self):
        self._client = None
        self._db = None

    def connect(self):
        """Establish database connection"""
        try:
            self._client = MongoClient(
                settings.MONGODB_URI,
                serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
                connectTimeoutMS=settings.MONGO_TIMEOUT_MS,
                maxPoolSize=settings.MONGO_MAX_POOL_SIZE,
                tz_aware=True
            )

            self._client.admin.command('ping')
            self._db = self._client[settings.DATABASE_NAME]

            logger.info(f"Connected to MongoDB: {settings.DATABASE_NAME}")
            return True

        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            return False
        except PyMongoError as e:
            logger.error(f"Unexpected database error: {e}")
            return False

    def disconnect(self):
        """Close database connection"""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("Disconnected from MongoDB")

    def get_database(self):
        """Get database instance"""
        if self._db is None:
            self.connect()
        return self._db

    def get_collection(self, name: str = None):
        """Get a collection, the transactions collection by default"""
        db = self.get_database()
        if db is None:
            raise ConnectionFailure("MongoDB is not connected")
        return db[name or settings.TRANSACTIONS_COLLECTION]

    def ensure_indexes(self) -> int:
        """Create the transaction indexes; returns how many were applied"""
        collection = self.get_collection()
        created = 0
        for keys, options in TRANSACTION_INDEXES:
            try:
                collection.create_index(keys, **options)
                created += 1
            except PyMongoError as e:
                logger.warning(f"Could not create index {keys}: {e}")
        logger.info(f"Ensured {created}/{len(TRANSACTION_INDEXES)} transaction indexes")
        return created

    def health_check(self) -> bool:
        """Check database health"""
        try:
            if self._client is None:
                return False
            self._client.admin.command('ping')
            return True
        except PyMongoError:
            return False


# Global connection
db_connection = DatabaseConnection()

def get_transactions_collection():
    """Dependency to get the transactions collection"""
    return db_connection.get_collection()
