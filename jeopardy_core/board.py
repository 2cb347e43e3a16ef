from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from .clue import Category, Clue, RevealState, next_reveal
from .errors import InconsistentBoardError

Cell = Tuple[int, int]  # (col, row)


class BoardModel:
    """The grid of categories x clues for one game. Built fresh for every game."""

    def __init__(self, categories: Iterable[Category]):
        cats: Tuple[Category, ...] = tuple(categories)
        if not cats:
            raise InconsistentBoardError("a board needs at least one category")
        rows = len(cats[0].clues)
        for col, cat in enumerate(cats):
            if len(cat.clues) != rows:
                raise InconsistentBoardError(
                    f"category {col} ({cat.title!r}) has {len(cat.clues)} clues, expected {rows}"
                )
        self._categories = cats

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    @property
    def column_count(self) -> int:
        return len(self._categories)

    @property
    def row_count(self) -> int:
        return len(self._categories[0].clues)

    def titles(self) -> List[str]:
        return [c.title for c in self._categories]

    def category_at(self, col: int) -> Category:
        if not 0 <= col < self.column_count:
            raise IndexError(f"column {col} out of range")
        return self._categories[col]

    def clue_at(self, col: int, row: int) -> Clue:
        cat = self.category_at(col)
        if not 0 <= row < self.row_count:
            raise IndexError(f"row {row} out of range")
        return cat.clues[row]

    def cells(self) -> Iterator[Cell]:
        """Iterates (col, row) in display order, row by row."""
        for row in range(self.row_count):
            for col in range(self.column_count):
                yield (col, row)

    def advance_reveal(self, col: int, row: int) -> Tuple[RevealState, str]:
        """Moves one clue to its next reveal state and returns (state, display text)."""
        clue = self.clue_at(col, row)
        state, text = next_reveal(clue.reveal, clue)
        clue.reveal = state
        return state, text

    def rows(self) -> List[Sequence[Clue]]:
        return [[cat.clues[r] for cat in self._categories] for r in range(self.row_count)]
