# driver_api/database.py
import logging
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from driver_api.config import Settings
from driver_api.models.driver import DriverStore

logger = logging.getLogger(__name__)

DRIVERS_COLLECTION = "drivers"

SAMPLE_DRIVERS = [
    {"name": "Alice Brown", "idNumber": "ID-1002345", "email": "alice.brown@example.com", "phoneNumber": "+1-555-0101"},
    {"name": "Charlie Davis", "idNumber": "ID-2006789", "email": "charlie.davis@example.com", "phoneNumber": "+1-555-0102"},
    {"name": "Eva White", "idNumber": "ID-3002468", "email": "eva.white@example.com", "phoneNumber": "+1-555-0103"},
]

class Database:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        self.client = AsyncIOMotorClient(
            self.settings.MONGODB_URI,
            serverSelectionTimeoutMS=self.settings.MONGODB_TIMEOUT_MS
        )
        self.db = self.client[self.settings.MONGODB_DB_NAME]
        logger.info("Connected to MongoDB: %s", self.settings.MONGODB_DB_NAME)

    async def close(self):
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Closed MongoDB connection")

    def driver_store(self) -> DriverStore:
        return DriverStore(self.db[DRIVERS_COLLECTION])

async def init_db(database: Database) -> bool:
    try:
        collections = await database.db.list_collection_names()
        if DRIVERS_COLLECTION not in collections:
            await database.db.create_collection(DRIVERS_COLLECTION)

        # Lookup index only, identity numbers are not unique
        await database.db[DRIVERS_COLLECTION].create_index([("idNumber", ASCENDING)])

        logger.info("Database initialized successfully")
        return True
    except PyMongoError:
        logger.exception("Database initialization failed")
        return False

async def insert_sample_data(database: Database) -> bool:
    try:
        if await database.db[DRIVERS_COLLECTION].count_documents({}) > 0:
            logger.info("Sample data already exists. Skipping insertion.")
            return False

        await database.db[DRIVERS_COLLECTION].insert_many([dict(driver) for driver in SAMPLE_DRIVERS])
        logger.info("Inserted %d sample drivers", len(SAMPLE_DRIVERS))
        return True
    except PyMongoError:
        logger.exception("Failed to insert sample data")
        return False

def get_driver_store(request: Request) -> DriverStore:
    return request.app.state.driver_store
