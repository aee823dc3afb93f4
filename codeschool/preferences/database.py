import logging
from motor.motor_asyncio import AsyncIOMotorDatabase
from datetime import datetime
from typing import List

from codeschool.preferences.models import CourseReminder, NotificationPreferences, PracticeFrequency

logger = logging.getLogger(__name__)

# ==================== NOTIFICATION PREFERENCES ====================

async def get_notification_preferences(db: AsyncIOMotorDatabase, user_id: str) -> NotificationPreferences:
    """Stored preferences, or all-off defaults for a new user"""
    record = await db.user_preferences.find_one({"user_id": user_id})
    if not record:
        return NotificationPreferences()

    return NotificationPreferences(
        milestone_alerts=record.get("milestone_alerts", False),
        new_course_alerts=record.get("new_course_alerts", False),
    )

async def save_notification_preferences(
    db: AsyncIOMotorDatabase, user_id: str, preferences: NotificationPreferences
) -> bool:
    result = await db.user_preferences.update_one(
        {"user_id": user_id},
        {"$set": {
            "milestone_alerts": preferences.milestone_alerts,
            "new_course_alerts": preferences.new_course_alerts,
            "updated_at": datetime.utcnow()
        }},
        upsert=True
    )
    return result.acknowledged

# ==================== COURSE REMINDERS ====================

async def get_course_reminders(db: AsyncIOMotorDatabase, user_id: str) -> List[CourseReminder]:
    """One reminder per course repository the user has started"""
    cursor = db.repositories.find({"user_id": user_id}).sort("course_name", 1)
    repositories = await cursor.to_list(length=100)

    reminders = []
    for repo in repositories:
        course_id = repo.get("course_id")
        if not course_id:
            logger.warning("Skipping repository %s without course_id", repo.get("_id"))
            continue

        reminder = repo.get("reminder") or {}
        reminders.append(CourseReminder(
            course_id=course_id,
            course_name=repo.get("course_name", ""),
            enabled=bool(reminder.get("enabled", False)),
            frequency=_stored_frequency(reminder.get("frequency")),
        ))
    return reminders

def _stored_frequency(value) -> PracticeFrequency:
    try:
        return PracticeFrequency(value)
    except ValueError:
        return PracticeFrequency.WEEKLY

async def save_course_reminders(
    db: AsyncIOMotorDatabase, user_id: str, reminders: List[CourseReminder]
) -> int:
    """Update reminder settings on existing repositories; returns how many matched"""
    matched = 0
    for reminder in reminders:
        result = await db.repositories.update_one(
            {"user_id": user_id, "course_id": reminder.course_id},
            {"$set": {
                "reminder": {
                    "enabled": reminder.enabled,
                    "frequency": reminder.frequency.value,
                },
                "updated_at": datetime.utcnow()
            }}
        )
        matched += result.matched_count
    return matched
