import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from codeschool.dependencies import get_db
from codeschool.submissions.database import get_latest_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/submission", tags=["Submissions"])


@router.get("/latest")
async def latest_submission(
    repo_name: str = None,
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """Logstream id of the newest submission for a repository"""
    if not repo_name:
        return JSONResponse({"error": "repo_name parameter is required"}, status_code=400)

    try:
        submission = await get_latest_submission(db, repo_name)
    except PyMongoError:
        logger.exception("Error fetching latest submission for %s", repo_name)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    if not submission:
        return JSONResponse(
            {"error": "No submission found for the given repository"},
            status_code=404
        )

    return {"logstream_id": submission.get("logstream_id")}
