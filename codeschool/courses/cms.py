"""
Contentful client
Course, section and lesson content for the lesson pages
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from codeschool import config
from codeschool.courses.queries import (
    QUERY_ALL_SECTIONS,
    QUERY_COURSE_INFORMATION,
    QUERY_LESSON_INFORMATION,
    QUERY_SECTION_INFORMATION,
)

logger = logging.getLogger(__name__)


class CMSError(Exception):
    """Raised when Contentful is unreachable or returns an error"""


def resolve_path(data: Any, path: str) -> Any:
    """
    Walk a dotted path like 'items.0.sectionsCollection'.
    Numeric segments index into lists. Missing segments give None.
    """
    current = data
    for segment in path.split(".") if path else []:
        if isinstance(current, list):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return None
        elif isinstance(current, dict):
            current = current.get(segment)
        else:
            return None
        if current is None:
            return None
    return current


class ContentfulClient:
    def __init__(
        self,
        space_id: str = config.CONTENTFUL_SPACE_ID,
        access_token: str = config.CONTENTFUL_ACCESS_TOKEN,
        environment: str = config.CONTENTFUL_ENVIRONMENT,
        timeout: float = config.CMS_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.space_id = space_id
        self.access_token = access_token
        self.environment = environment
        self.timeout = timeout
        self._transport = transport

    @property
    def graphql_url(self) -> str:
        return f"{config.CONTENTFUL_GRAPHQL_URL}/spaces/{self.space_id}/environments/{self.environment}"

    @property
    def entries_url(self) -> str:
        return f"{config.CONTENTFUL_CDN_URL}/spaces/{self.space_id}/environments/{self.environment}/entries"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            headers={"Authorization": f"Bearer {self.access_token}"},
        )

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Contentful request to %s failed: %s", url, e)
            raise CMSError(f"Contentful unreachable: {e}") from e

        if response.status_code >= 400:
            logger.error("Contentful returned %s for %s", response.status_code, url)
            raise CMSError(f"Contentful returned {response.status_code}")
        return response

    # ==================== GENERIC ACCESS ====================

    async def get_contentful_data(
        self,
        query: str,
        collection: str,
        variables: Optional[Dict[str, Any]] = None,
        path: str = "",
    ) -> Any:
        """Run a GraphQL query and return data[collection] walked down to path"""
        response = await self._request(
            "POST",
            self.graphql_url,
            json={"query": query, "variables": variables or {}},
        )
        payload = response.json()

        if payload.get("errors"):
            messages = "; ".join(e.get("message", "unknown error") for e in payload["errors"])
            logger.error("Contentful query for %s failed: %s", collection, messages)
            raise CMSError(messages)

        data = (payload.get("data") or {}).get(collection)
        return resolve_path(data, path)

    async def get_content_by_type(self, content_type: str) -> List[Dict[str, Any]]:
        """List entry fields of one content type (REST delivery API)"""
        response = await self._request(
            "GET",
            self.entries_url,
            params={"content_type": content_type},
        )
        return [item.get("fields", {}) for item in response.json().get("items", [])]

    async def fetch_file_code(self, url: str) -> str:
        """Download an asset's text (asset URLs may be protocol-relative)"""
        if url.startswith("//"):
            url = f"https:{url}"
        response = await self._request("GET", url)
        return response.text

    # ==================== COURSE CONTENT ====================

    async def get_course_data(self, course_slug: str) -> Optional[Dict[str, Any]]:
        return await self.get_contentful_data(
            QUERY_COURSE_INFORMATION,
            "courseModuleCollection",
            {"courseSlug": course_slug},
            "items.0",
        )

    async def get_section_data(self, course_slug: str, section_index: int) -> Optional[Dict[str, Any]]:
        return await self.get_contentful_data(
            QUERY_SECTION_INFORMATION,
            "courseModuleCollection",
            {"courseSlug": course_slug, "sectionIndex": section_index},
            "items.0.sectionsCollection.items.0",
        )

    async def get_all_sections(self, course_slug: str) -> List[Dict[str, Any]]:
        sections = await self.get_contentful_data(
            QUERY_ALL_SECTIONS,
            "courseModuleCollection",
            {"courseSlug": course_slug},
            "items.0.sectionsCollection.items",
        )
        return sections or []

    async def get_lesson_data(
        self, course_slug: str, section_index: int, lesson_index: int
    ) -> Optional[Dict[str, Any]]:
        return await self.get_contentful_data(
            QUERY_LESSON_INFORMATION,
            "courseModuleCollection",
            {"courseSlug": course_slug, "sectionIndex": section_index, "lessonIndex": lesson_index},
            "items.0.sectionsCollection.items.0.lessonsCollection.items.0",
        )
