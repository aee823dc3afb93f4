import logging

from codeschool.courses.models import Navigation
from codeschool.courses.navigation import (
    compute_navigation,
    get_next_navigation,
    get_previous_navigation,
    lesson_path,
)

COURSE = "rust-state-machine"


def test_lesson_path_format() -> None:
    assert lesson_path(COURSE, 2, 3) == "rust-state-machine/section/2/lesson/3"


def test_last_lesson_of_section_advances_to_next_section() -> None:
    nav = compute_navigation(COURSE, 0, 2, 3, None, 5)
    assert nav.next == "rust-state-machine/section/2/lesson/1"
    assert nav.prev == "rust-state-machine/section/1/lesson/2"


def test_first_lesson_of_first_section_has_no_prev() -> None:
    nav = compute_navigation(COURSE, 0, 0, 3, None, 5)
    assert nav.prev is None
    assert nav.next == "rust-state-machine/section/1/lesson/2"


def test_middle_lesson_links_within_section() -> None:
    nav = compute_navigation(COURSE, 1, 1, 4, 3, 3)
    assert nav == Navigation(
        prev="rust-state-machine/section/2/lesson/1",
        next="rust-state-machine/section/2/lesson/3",
    )


def test_first_lesson_links_to_last_lesson_of_previous_section() -> None:
    nav = compute_navigation(COURSE, 2, 0, 2, 4, 3)
    assert nav.prev == "rust-state-machine/section/2/lesson/4"


def test_last_lesson_of_course_has_no_next() -> None:
    nav = compute_navigation(COURSE, 2, 1, 2, 4, 3)
    assert nav.next is None
    assert nav.prev == "rust-state-machine/section/3/lesson/1"


def test_unknown_course_total_means_no_next_section() -> None:
    assert get_next_navigation(COURSE, 0, 2, 3, None) is None
    assert get_next_navigation(COURSE, 0, 2, 3, 0) is None


def test_empty_section_has_no_navigation() -> None:
    for total in (0, None):
        assert compute_navigation(COURSE, 1, 1, total, 3, 5) == Navigation()


def test_unknown_previous_section_total_links_to_lesson_zero(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="codeschool.courses.navigation"):
        prev = get_previous_navigation(COURSE, 1, 0, 3, None)
    assert prev == "rust-state-machine/section/1/lesson/0"
    assert "lesson 0" in caplog.text


def test_navigation_is_deterministic() -> None:
    args = (COURSE, 1, 0, 2, 3, 4)
    assert compute_navigation(*args) == compute_navigation(*args)
