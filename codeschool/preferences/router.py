from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List

from codeschool.dependencies import get_db, get_current_user_id
from codeschool.preferences import database as service
from codeschool.preferences.models import CourseReminder, CourseRemindersUpdate, NotificationPreferences

router = APIRouter(prefix="/api", tags=["Preferences"])

# ==================== NOTIFICATION PREFERENCES ====================

@router.get("/user-preferences", response_model=NotificationPreferences)
async def get_user_preferences(
    db: AsyncIOMotorDatabase = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return await service.get_notification_preferences(db, user_id)


@router.put("/user-preferences", response_model=NotificationPreferences)
async def update_user_preferences(
    preferences: NotificationPreferences,
    db: AsyncIOMotorDatabase = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    await service.save_notification_preferences(db, user_id, preferences)
    return preferences

# ==================== COURSE REMINDERS ====================

@router.get("/user-repositories", response_model=List[CourseReminder])
async def get_user_repositories(
    db: AsyncIOMotorDatabase = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Practice reminder settings for every course the user has started"""
    return await service.get_course_reminders(db, user_id)


@router.put("/user-repositories")
async def update_user_repositories(
    body: CourseRemindersUpdate,
    db: AsyncIOMotorDatabase = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    updated = await service.save_course_reminders(db, user_id, body.course_reminders)
    return {"success": True, "updated": updated}
