from pydantic import BaseModel, ConfigDict, Field
from typing import List
from enum import Enum

# ==================== ENUMS ====================

class PracticeFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

# ==================== PREFERENCE MODELS ====================

class NotificationPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    milestone_alerts: bool = Field(False, alias="milestoneAlerts")
    new_course_alerts: bool = Field(False, alias="newCourseAlerts")

class CourseReminder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(alias="courseId")
    course_name: str = Field("", alias="courseName")
    enabled: bool = False
    frequency: PracticeFrequency = PracticeFrequency.WEEKLY

class CourseRemindersUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_reminders: List[CourseReminder] = Field(default_factory=list, alias="courseReminders")
