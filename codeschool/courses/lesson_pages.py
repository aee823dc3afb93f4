"""
Lesson page assembly
Everything the lesson view needs: content, editor files, solution,
feedback link and prev/next navigation.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional
from urllib.parse import quote

from codeschool import config
from codeschool.courses.models import EditorFile, LessonPageData, Navigation
from codeschool.courses.navigation import compute_navigation
from codeschool.courses.solution_matcher import language_from_file_name

FetchCode = Callable[[str], Awaitable[str]]


def parse_position(segment: str) -> int:
    """1-based path segment -> 0-based index"""
    number = int(segment)
    if number < 1:
        raise ValueError(f"Position must be 1 or greater, got {segment}")
    return number - 1


def _collection_items(lesson: Dict[str, Any], collection: str) -> Optional[List[dict]]:
    """Items of files.<collection>, or None when the collection is absent"""
    collection_data = (lesson.get("files") or {}).get(collection)
    if not collection_data:
        return None
    return collection_data.get("items") or []


async def _to_editor_files(items: List[Optional[dict]], fetch: FetchCode) -> List[EditorFile]:
    assets = [item or {} for item in items]

    async def load(asset: dict) -> str:
        url = asset.get("url")
        return await fetch(url) if url else ""

    codes = await asyncio.gather(*(load(asset) for asset in assets))

    files = []
    for asset, code in zip(assets, codes):
        asset_file_name = asset.get("fileName")
        files.append(EditorFile(
            file_name=asset.get("title") or "",
            code=code,
            language=language_from_file_name(asset_file_name) if asset_file_name else config.DEFAULT_FILE_LANGUAGE,
        ))
    return files


async def get_starting_files(lesson: Dict[str, Any], fetch: FetchCode) -> List[EditorFile]:
    """Source files when the lesson has them, otherwise the template"""
    items = _collection_items(lesson, "sourceCollection")
    if items is None:
        items = _collection_items(lesson, "templateCollection") or []
    return await _to_editor_files(items, fetch)


async def get_solution_files(lesson: Dict[str, Any], fetch: FetchCode) -> List[EditorFile]:
    items = _collection_items(lesson, "solutionCollection") or []
    return await _to_editor_files(items, fetch)


def construct_feedback_url(github_url: str, section: str, lesson: str, lesson_title: str) -> str:
    title = f"{config.SITE_NAME} Suggestion: Feedback for Section {section} - Lesson {lesson}: {lesson_title}"
    # Same escaping as JS encodeURIComponent
    encoded_title = quote(title, safe="-_.!~*'()")
    return (
        f"{github_url.rstrip('/')}/issues/new"
        f"?assignees=&labels=feedback&template=feedback.md&title={encoded_title}"
    )


def _total(record: Optional[Dict[str, Any]], collection: str) -> Optional[int]:
    if not record:
        return None
    return (record.get(collection) or {}).get("total")


async def get_navigation(
    cms,
    course: str,
    section_index: int,
    lesson_index: int,
    section_data: Optional[Dict[str, Any]],
    course_data: Optional[Dict[str, Any]],
) -> Navigation:
    previous_section = None
    if section_index > 0:
        previous_section = await cms.get_section_data(course, section_index - 1)

    return compute_navigation(
        course,
        section_index,
        lesson_index,
        _total(section_data, "lessonsCollection"),
        _total(previous_section, "lessonsCollection"),
        _total(course_data, "sectionsCollection"),
    )


async def get_lesson_page_data(cms, course: str, section: str, lesson: str) -> LessonPageData:
    """
    Raises:
        ValueError: section/lesson are not positive integers
        LookupError: course or lesson does not exist
        CMSError: Contentful failure
    """
    section_index = parse_position(section)
    lesson_index = parse_position(lesson)

    course_data = await cms.get_course_data(course)
    if not course_data:
        raise LookupError(f"Course not found: {course}")

    section_data = await cms.get_section_data(course, section_index)
    lesson_data = await cms.get_lesson_data(course, section_index, lesson_index)
    if not lesson_data:
        raise LookupError(f"Lesson not found: {course} section {section} lesson {lesson}")

    starting_files, solution = await asyncio.gather(
        get_starting_files(lesson_data, cms.fetch_file_code),
        get_solution_files(lesson_data, cms.fetch_file_code),
    )

    feedback_url = construct_feedback_url(
        course_data.get("githubUrl") or config.DEFAULT_GITHUB_URL,
        section,
        lesson,
        lesson_data.get("title") or "",
    )

    navigation = await get_navigation(cms, course, section_index, lesson_index, section_data, course_data)
    sections = await cms.get_all_sections(course)

    return LessonPageData(
        lesson_data=lesson_data,
        starting_files=starting_files,
        solution=solution,
        read_only=len(solution) == 0,
        feedback_url=feedback_url,
        prev=navigation.prev,
        next=navigation.next,
        sections=sections,
    )
