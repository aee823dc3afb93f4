from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from codeschool.dependencies import get_cms, get_current_user_id, get_db
from codeschool.main import app

# ==================== IN-MEMORY MONGO ====================


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, docs: list[dict]):
        self.docs = docs

    def sort(self, key, direction=1):
        self.docs = sorted(self.docs, key=lambda d: d.get(key), reverse=direction == -1)
        return self

    async def to_list(self, length=None):
        docs = self.docs if length is None else self.docs[:length]
        return [dict(d) for d in docs]


class FakeCollection:
    """Just enough of a motor collection for the API routes."""

    def __init__(self):
        self.docs: list[dict] = []
        self.fail_with: Exception | None = None

    async def insert_one(self, doc: dict):
        doc = dict(doc)
        doc.setdefault("_id", len(self.docs) + 1)
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"], acknowledged=True)

    async def find_one(self, query: dict, sort=None, projection=None):
        if self.fail_with is not None:
            raise self.fail_with
        docs = [d for d in self.docs if _matches(d, query)]
        for key, direction in reversed(sort or []):
            docs.sort(key=lambda d: d.get(key), reverse=direction == -1)
        if not docs:
            return None
        doc = dict(docs[0])
        if projection:
            keep = {k for k, v in projection.items() if v} | {"_id"}
            doc = {k: v for k, v in doc.items() if k in keep}
        return doc

    def find(self, query: dict):
        return FakeCursor([d for d in self.docs if _matches(d, query)])

    async def update_one(self, filter: dict, update: dict, upsert: bool = False):
        changes = update.get("$set", {})
        for doc in self.docs:
            if _matches(doc, filter):
                doc.update(changes)
                return SimpleNamespace(matched_count=1, modified_count=1, upserted_id=None, acknowledged=True)
        if upsert:
            result = await self.insert_one({**filter, **changes})
            return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=result.inserted_id, acknowledged=True)
        return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=None, acknowledged=True)

    async def create_index(self, *args, **kwargs):
        return "index"


class FakeDatabase:
    def __init__(self):
        self._collections: dict[str, FakeCollection] = {}

    def __getattr__(self, name: str) -> FakeCollection:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._collections.setdefault(name, FakeCollection())

    def __getitem__(self, name: str) -> FakeCollection:
        return self.__getattr__(name)

# ==================== FAKE CMS ====================

COURSE_SLUG = "rust-state-machine"

SOURCE_MAIN = "fn main() {\n    todo!()\n}\n"
SOLUTION_MAIN = 'fn main() {\n    // print a greeting\n    println!("hi");\n}\n'
TEMPLATE_LIB = "pub mod balances;\n"


def _asset(title: str, url: str) -> dict:
    return {"title": title, "fileName": title, "url": url}


class FakeCMS:
    """Three sections holding 3, 2 and 1 lessons."""

    def __init__(self):
        self.course = {
            "title": "Rust State Machine",
            "slug": COURSE_SLUG,
            "githubUrl": "https://github.com/example/rust-state-machine",
            "sectionsCollection": {"total": 3},
        }
        self.sections = [
            {"title": "Introduction", "lessonsCollection": {"total": 3}},
            {"title": "Balances Pallet", "lessonsCollection": {"total": 2}},
            {"title": "Runtime", "lessonsCollection": {"total": 1}},
        ]
        self.lessons = {
            (0, 0): {
                "title": "Hello Runtime",
                "content": "# Hello",
                "files": {
                    "sourceCollection": {"items": [_asset("main.rs", "https://assets.test/source/main.rs")]},
                    "templateCollection": {"items": [_asset("lib.rs", "https://assets.test/template/lib.rs")]},
                    "solutionCollection": {"items": [_asset("main.rs", "https://assets.test/solution/main.rs")]},
                },
            },
            (1, 0): {
                "title": "Balances",
                "content": "# Balances",
                "files": {
                    "templateCollection": {"items": [_asset("lib.rs", "https://assets.test/template/lib.rs")]},
                    "solutionCollection": {"items": []},
                },
            },
        }
        self.assets = {
            "https://assets.test/source/main.rs": SOURCE_MAIN,
            "https://assets.test/solution/main.rs": SOLUTION_MAIN,
            "https://assets.test/template/lib.rs": TEMPLATE_LIB,
        }
        self.section_requests: list[int] = []

    async def get_content_by_type(self, content_type):
        return [{"title": self.course["title"], "slug": self.course["slug"]}]

    async def get_course_data(self, course_slug):
        return self.course if course_slug == COURSE_SLUG else None

    async def get_section_data(self, course_slug, section_index):
        self.section_requests.append(section_index)
        if course_slug != COURSE_SLUG or not 0 <= section_index < len(self.sections):
            return None
        return self.sections[section_index]

    async def get_all_sections(self, course_slug):
        return list(self.sections) if course_slug == COURSE_SLUG else []

    async def get_lesson_data(self, course_slug, section_index, lesson_index):
        if course_slug != COURSE_SLUG:
            return None
        return self.lessons.get((section_index, lesson_index))

    async def fetch_file_code(self, url):
        return self.assets[url]

# ==================== FIXTURES ====================


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def fake_cms() -> FakeCMS:
    return FakeCMS()


@pytest.fixture
def client(fake_db, fake_cms):
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_current_user_id] = lambda: "user-1"
    app.dependency_overrides[get_cms] = lambda: fake_cms
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
