from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any

# ==================== EDITOR MODELS ====================

class EditorFile(BaseModel):
    """One source file shown in the editor (user content or reference solution)"""
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    code: str = ""
    language: str = ""

class MatchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    all_match: bool = Field(alias="allMatch")
    incorrect_files: List[EditorFile] = Field(default_factory=list, alias="incorrectFiles")

class CheckAnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    editor_content: List[EditorFile] = Field(default_factory=list, alias="editorContent")

# ==================== NAVIGATION MODELS ====================

class Navigation(BaseModel):
    prev: Optional[str] = None
    next: Optional[str] = None

# ==================== LESSON PAGE MODELS ====================

class LessonPageData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lesson_data: Dict[str, Any] = Field(alias="lessonData")
    starting_files: List[EditorFile] = Field(default_factory=list, alias="startingFiles")
    solution: List[EditorFile] = Field(default_factory=list)
    read_only: bool = Field(alias="readOnly")
    feedback_url: str = Field(alias="feedbackUrl")
    prev: Optional[str] = None
    next: Optional[str] = None
    sections: List[Dict[str, Any]] = Field(default_factory=list)
