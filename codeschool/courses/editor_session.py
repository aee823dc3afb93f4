from typing import List, Optional

from codeschool.courses.models import EditorFile, MatchResult
from codeschool.courses.solution_matcher import match_files


class EditorSession:
    """
    Editor state for one learner on one lesson.

    Holds the editable files plus UI flags. Checking the answer replaces the
    stored result with a fresh snapshot from match_files.
    """

    def __init__(
        self,
        initial_content: List[EditorFile],
        solution: List[EditorFile],
        tab_index: int = 0,
        show_diff: bool = False,
        is_answer_open: bool = False,
    ):
        self.editor_content: List[EditorFile] = [f.model_copy() for f in initial_content]
        self.solution: List[EditorFile] = list(solution)
        self.tab_index = tab_index
        self.show_diff = show_diff
        self.is_answer_open = is_answer_open
        self.does_answer_match = False
        self.incorrect_files: List[EditorFile] = []
        self.last_result: Optional[MatchResult] = None

    def update_file(self, file_name: str, code: str):
        for index, file in enumerate(self.editor_content):
            if file.file_name == file_name:
                self.editor_content[index] = file.model_copy(update={"code": code})
                return
        raise KeyError(file_name)

    def check_answer(self) -> MatchResult:
        result = match_files(self.editor_content, self.solution)
        self.does_answer_match = result.all_match
        self.incorrect_files = list(result.incorrect_files)
        self.last_result = result
        return result

    def toggle_answer(self) -> bool:
        self.is_answer_open = not self.is_answer_open
        return self.is_answer_open

    def toggle_diff(self) -> bool:
        """Show/hide the diff tab (always the last tab)"""
        self.show_diff = not self.show_diff
        last_index = len(self.editor_content) - 1

        if self.show_diff:
            if last_index != -1:
                self.tab_index = last_index
        elif self.tab_index == last_index:
            if last_index - 1 != -1:
                self.tab_index = last_index - 1

        return self.show_diff
