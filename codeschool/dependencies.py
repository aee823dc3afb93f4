from fastapi import Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from codeschool.auth.auth_utils import verify_token
from codeschool.courses.cms import ContentfulClient
from codeschool.db.mongo import manager

# ==================== DEPENDENCY FUNCTIONS ====================

async def get_db() -> AsyncIOMotorDatabase:
    """Database dependency"""
    if manager.db is None:
        raise HTTPException(status_code=503, detail="Database not connected")
    return manager.db


async def get_current_user_id(payload: dict = Depends(verify_token)) -> str:
    """User id from the verified token ('sub', falling back to 'email')"""
    user_id = payload.get("sub") or payload.get("email")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token has no subject")
    return user_id


def get_cms() -> ContentfulClient:
    return ContentfulClient()
