from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import RedirectResponse
from typing import List, Dict, Any

from codeschool.courses.cms import CMSError, ContentfulClient
from codeschool.courses.lesson_pages import get_lesson_page_data, get_solution_files, parse_position
from codeschool.courses.models import CheckAnswerRequest, LessonPageData, MatchResult
from codeschool.courses.solution_matcher import match_files
from codeschool.dependencies import get_cms

router = APIRouter(tags=["Courses"])

# ==================== COURSE LISTING ====================

@router.get("", response_model=List[Dict[str, Any]])
async def list_courses(cms: ContentfulClient = Depends(get_cms)):
    """All course modules published in the CMS"""
    try:
        return await cms.get_content_by_type("courseModule")
    except CMSError as e:
        raise HTTPException(status_code=502, detail=str(e))

# ==================== LESSON PAGES ====================

@router.get("/{course}/section/{section}/lesson/{lesson}", response_model=LessonPageData)
async def get_lesson_page(
    course: str,
    section: str,
    lesson: str,
    cms: ContentfulClient = Depends(get_cms)
):
    """Lesson content, editor files, solution, feedback link and prev/next links"""
    try:
        return await get_lesson_page_data(cms, course, section, lesson)
    except (ValueError, LookupError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CMSError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/{course}/section/{section}/lesson/{lesson}/check", response_model=MatchResult)
async def check_answer(
    course: str,
    section: str,
    lesson: str,
    body: CheckAnswerRequest,
    cms: ContentfulClient = Depends(get_cms)
):
    """
    Compare the learner's files against the lesson solution.
    Comments and whitespace are ignored; files without a solution counterpart pass.
    """
    try:
        lesson_data = await cms.get_lesson_data(course, parse_position(section), parse_position(lesson))
        if not lesson_data:
            raise LookupError(f"Lesson not found: {course} section {section} lesson {lesson}")
        solution = await get_solution_files(lesson_data, cms.fetch_file_code)
    except (ValueError, LookupError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CMSError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return match_files(body.editor_content, solution)

# ==================== LEGACY URLS ====================

@router.get("/{course}/lesson/{lesson}/chapter/{chapter}")
async def legacy_lesson_redirect(course: str, lesson: str, chapter: str):
    """Old lesson/chapter URLs moved to section/lesson"""
    return RedirectResponse(
        url=f"/courses/{course}/section/{lesson}/lesson/{chapter}",
        status_code=308
    )
