from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional


async def get_latest_submission(db: AsyncIOMotorDatabase, repo_name: str) -> Optional[dict]:
    """Newest submission for a learner repository (logstream id only)"""
    return await db.submissions.find_one(
        {"repo_name": repo_name},
        sort=[("created_at", -1)],
        projection={"logstream_id": 1},
    )
