"""
Async Supabase REST (PostgREST) client.
Talks to {SUPABASE_URL}/rest/v1 over httpx; tables stand in for document collections.
"""
from typing import Any, Dict, List, Optional, Tuple

import httpx

from core.log import get_logger
from core.settings import Settings

logger = get_logger(__name__)

# (document id, field map); ids keep the type the table stores them as
Document = Tuple[Any, Dict[str, Any]]

# hosted Supabase caps every response at 1000 rows
DEFAULT_PAGE_SIZE = 1000


class QueryBuilder:
    """Minimal select builder: query("careers").select("*").order("id").range(0, 999).execute()"""

    def __init__(self, http: httpx.AsyncClient, table: str):
        self._http = http
        self._table = table
        self._params: Dict[str, str] = {"select": "*"}
        self._headers: Dict[str, str] = {}

    def select(self, columns: str = "*") -> "QueryBuilder":
        self._params["select"] = columns.replace(" ", "")
        return self

    def order(self, column: str, desc: bool = False) -> "QueryBuilder":
        self._params["order"] = f"{column}.{'desc' if desc else 'asc'}"
        return self

    def range(self, start: int, end: int) -> "QueryBuilder":
        """Rows start..end inclusive, as PostgREST's Range header counts them."""
        self._headers["Range-Unit"] = "items"
        self._headers["Range"] = f"{start}-{end}"
        return self

    async def execute(self) -> Dict[str, Any]:
        response = await self._http.get(f"/{self._table}", params=self._params, headers=self._headers)
        response.raise_for_status()
        return {"data": response.json(), "status": response.status_code}


class SupabaseClient:
    """
    Created once at process start and reused read-only.
    Use as an async context manager or call aclose() on shutdown.
    """

    def __init__(
        self,
        url: str,
        key: str,
        timeout: float = 10.0,
        page_size: int = DEFAULT_PAGE_SIZE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.page_size = page_size
        self._http = httpx.AsyncClient(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseClient":
        url, key = settings.require_supabase()
        return cls(url, key, timeout=settings.supabase_timeout)

    def query(self, table: str) -> QueryBuilder:
        return QueryBuilder(self._http, table)

    async def fetch_all(self, collection: str) -> List[Document]:
        """
        Every row of a table as (id, row), read page by page until a short page.

        Pages are ordered by id so they do not overlap. Rows without an id
        are a store fault.
        """
        rows: List[Dict[str, Any]] = []
        start = 0
        while True:
            try:
                result = await (
                    self.query(collection)
                    .select("*")
                    .order("id")
                    .range(start, start + self.page_size - 1)
                    .execute()
                )
            except httpx.HTTPStatusError as e:
                # 416: the previous page ended exactly at the last row
                if start > 0 and e.response.status_code == 416:
                    break
                raise
            page = result.get("data") or []
            rows.extend(page)
            if len(page) < self.page_size:
                break
            start += self.page_size

        documents = []
        for row in rows:
            if "id" not in row:
                raise ValueError(f"Row in '{collection}' has no id column")
            documents.append((row["id"], row))

        logger.debug("Fetched %d documents from %s", len(documents), collection)
        return documents

    async def aclose(self):
        await self._http.aclose()

    async def __aenter__(self) -> "SupabaseClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
