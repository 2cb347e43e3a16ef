from __future__ import annotations

import asyncio
import functools
import logging
import random
import threading
from typing import Any, Callable, Dict, Optional, Tuple

from .assemble import CategoryAssembler
from .board import BoardModel
from .clue import RevealState, style_hint
from .config import NUM_CATEGORIES, POOL_SIZE
from .selector import select_ids

logger = logging.getLogger(__name__)

ClickHandler = Callable[[int, int], Tuple[RevealState, str]]


class BoardController:
    """
    Drives one game at a time: fetch the pool, pick categories, assemble them,
    build a BoardModel, render it and wire up the click handler.

    Every start() takes a new generation number; a sequence that is no longer
    the latest drops its results instead of publishing them.
    """

    def __init__(
        self,
        client,
        presenter,
        num_categories: int = NUM_CATEGORIES,
        pool_size: int = POOL_SIZE,
        rng: Optional[random.Random] = None,
        concurrent: bool = True,
    ):
        self.client = client
        self.presenter = presenter
        self.num_categories = num_categories
        self.pool_size = pool_size
        self.rng = rng or random.Random()
        self.assembler = CategoryAssembler(client, concurrent=concurrent)
        self.board: Optional[BoardModel] = None
        self._handler: Optional[ClickHandler] = None
        self._generation = 0
        # Flask serves requests on several threads; guards board, handler and presenter.
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def has_handler(self) -> bool:
        return self._handler is not None

    def teardown(self) -> None:
        """Drops the current board and its click handler."""
        self.board = None
        self._handler = None

    def _is_current(self, gen: int) -> bool:
        return gen == self._generation

    def snapshot(self) -> Dict[str, Any]:
        """Presenter view as JSON, read under the controller lock."""
        with self._lock:
            return self.presenter.to_json()

    async def start(self) -> Optional[BoardModel]:
        """
        Builds and publishes a fresh board. Returns None when a newer start()
        superseded this one. Any failure is shown through the presenter and
        re-raised.

        The lock only covers the synchronous steps; it is never held across an
        await, so a newer start() can begin while an older one is fetching.
        """
        with self._lock:
            self._generation += 1
            gen = self._generation
            self.teardown()
            self.presenter.show_loading()
        logger.info("start #%d: fetching %d-category pool", gen, self.pool_size)
        try:
            pool = await asyncio.to_thread(self.client.fetch_categories, self.pool_size)
            if not self._is_current(gen):
                logger.info("start #%d: superseded after pool fetch", gen)
                return None
            ids = select_ids(pool, self.num_categories, self.rng)
            logger.info("start #%d: selected ids %s", gen, ids)
            categories = await self.assembler.assemble_all(ids)
            board = BoardModel(categories)
        except Exception as e:
            with self._lock:
                stale = not self._is_current(gen)
                if not stale:
                    self.teardown()
                    self.presenter.hide_loading()
                    self.presenter.show_error(str(e))
            if stale:
                logger.info("start #%d: superseded, ignoring %s", gen, e)
                return None
            logger.warning("start #%d failed: %s", gen, e)
            raise

        with self._lock:
            if not self._is_current(gen):
                logger.info("start #%d: superseded after assembly", gen)
                return None
            self.board = board
            self.presenter.render_board(board)
            self._handler = functools.partial(self._reveal, board)
            self.presenter.hide_loading()
        logger.info("start #%d: board ready (%d x %d)", gen, board.column_count, board.row_count)
        return board

    def _reveal(self, board: BoardModel, col: int, row: int) -> Tuple[RevealState, str]:
        before = board.clue_at(col, row).reveal
        state, text = board.advance_reveal(col, row)
        self.presenter.render_cell_update(col, row, text, style_hint(before, state))
        return state, text

    def click(self, col: int, row: int) -> Optional[Tuple[RevealState, str]]:
        """Dispatches a cell click. Without a board this does nothing and returns None."""
        with self._lock:
            if self._handler is None:
                return None
            return self._handler(col, row)
