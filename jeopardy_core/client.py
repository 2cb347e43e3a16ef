from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .config import DEFAULT_API_BASE
from .errors import DataFetchError

logger = logging.getLogger(__name__)


class JeopardyClient:
    """Thin blocking client for the remote category/clue service."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        timeout_s: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout_s)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DataFetchError(f"GET {path} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise DataFetchError(f"GET {path} returned invalid JSON") from e

    def fetch_categories(self, count: int) -> List[Dict[str, Any]]:
        """Candidate pool: a list of {id, title, clues_count, ...}."""
        data = self._get("categories", {"count": count})
        if not isinstance(data, list):
            raise DataFetchError("categories response is not a list")
        for item in data:
            if not isinstance(item, dict) or "id" not in item:
                raise DataFetchError("categories response has an entry without an id")
        return data

    def fetch_category(self, category_id: Any) -> Dict[str, Any]:
        """Raw category detail: {title, clues: [{question, answer, ...}]}."""
        data = self._get("category", {"id": category_id})
        if not isinstance(data, dict):
            raise DataFetchError(f"category {category_id} response is not an object")
        return data
