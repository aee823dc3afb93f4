from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from codeschool import config


class MongoManager:
    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self, mongo_url: str = None, db_name: str = None):
        self.client = AsyncIOMotorClient(mongo_url or config.MONGO_URL)
        self.db = self.client[db_name or config.MONGO_DB_NAME]

    async def disconnect(self):
        if self.client:
            self.client.close()
        self.client = None
        self.db = None


manager = MongoManager()


async def create_indexes(db: AsyncIOMotorDatabase):
    """Create MongoDB indexes used by the API routes"""
    await db.submissions.create_index([("repo_name", 1), ("created_at", -1)])
    await db.user_preferences.create_index("user_id", unique=True)
    await db.repositories.create_index([("user_id", 1), ("course_id", 1)], unique=True)
