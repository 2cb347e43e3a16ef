from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Sequence

from .clue import Category, Clue, RevealState
from .errors import DataFetchError

logger = logging.getLogger(__name__)


def normalize_category(raw: Dict[str, Any]) -> Category:
    """Keeps title, question and answer from a raw category payload; every clue starts HIDDEN."""
    title = raw.get("title") if isinstance(raw, dict) else None
    clues = raw.get("clues") if isinstance(raw, dict) else None
    if not isinstance(title, str):
        raise DataFetchError("category payload is missing a title")
    if not isinstance(clues, list):
        raise DataFetchError(f"category {title!r} is missing its clues")
    out: List[Clue] = []
    for i, item in enumerate(clues):
        if not isinstance(item, dict) or item.get("question") is None or item.get("answer") is None:
            raise DataFetchError(f"clue {i} of {title!r} has no question/answer")
        out.append(Clue(question=str(item["question"]), answer=str(item["answer"]), reveal=RevealState.HIDDEN))
    return Category(title=title, clues=tuple(out))


class CategoryAssembler:
    """Fetches categories by id and turns them into Category values."""

    def __init__(self, client, concurrent: bool = True):
        self.client = client
        self.concurrent = concurrent

    async def assemble(self, category_id: Any) -> Category:
        # The client blocks on HTTP; run it off the event loop.
        raw = await asyncio.to_thread(self.client.fetch_category, category_id)
        category = normalize_category(raw)
        logger.debug("assembled category %s: %r (%d clues)", category_id, category.title, len(category.clues))
        return category

    async def assemble_all(self, ids: Sequence[Any]) -> List[Category]:
        """Assembles every id in order. Any single failure fails the whole batch."""
        if not self.concurrent:
            return [await self.assemble(cid) for cid in ids]
        tasks = [asyncio.ensure_future(self.assemble(cid)) for cid in ids]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for t in tasks:
                t.cancel()
            # Drain cancelled tasks so nothing is left un-awaited.
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
