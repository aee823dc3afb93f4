"""
Lesson Navigator
Previous/next lesson links across course -> section -> lesson.

Indices are 0-based; rendered paths are 1-based:
    <course>/section/<n>/lesson/<m>
"""

import logging
from typing import Optional

from codeschool.courses.models import Navigation

logger = logging.getLogger(__name__)


def lesson_path(course: str, section_number: int, lesson_number: int) -> str:
    return f"{course}/section/{section_number}/lesson/{lesson_number}"


def get_previous_navigation(
    course: str,
    section_index: int,
    lesson_index: int,
    current_section_lesson_total: Optional[int],
    previous_section_lesson_total: Optional[int] = None,
) -> Optional[str]:
    if not current_section_lesson_total:
        return None

    if lesson_index > 0:
        return lesson_path(course, section_index + 1, lesson_index)

    if section_index > 0:
        # Last lesson of the previous section
        previous_total = previous_section_lesson_total or 0
        if previous_total == 0:
            logger.warning(
                "Unknown lesson total for %s section %d; previous link points at lesson 0",
                course, section_index,
            )
        return lesson_path(course, section_index, previous_total)

    return None


def get_next_navigation(
    course: str,
    section_index: int,
    lesson_index: int,
    current_section_lesson_total: Optional[int],
    course_section_total: Optional[int] = None,
) -> Optional[str]:
    if not current_section_lesson_total:
        return None

    if lesson_index < current_section_lesson_total - 1:
        return lesson_path(course, section_index + 1, lesson_index + 2)

    if section_index < (course_section_total or 0) - 1:
        return lesson_path(course, section_index + 2, 1)

    return None


def compute_navigation(
    course: str,
    section_index: int,
    lesson_index: int,
    current_section_lesson_total: Optional[int],
    previous_section_lesson_total: Optional[int],
    course_section_total: Optional[int],
) -> Navigation:
    """Combine already-resolved counts into prev/next links (no I/O)"""
    return Navigation(
        prev=get_previous_navigation(
            course, section_index, lesson_index,
            current_section_lesson_total, previous_section_lesson_total,
        ),
        next=get_next_navigation(
            course, section_index, lesson_index,
            current_section_lesson_total, course_section_total,
        ),
    )
