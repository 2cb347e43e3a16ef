from __future__ import annotations

from typing import Any, Dict, List, Optional

from .board import BoardModel
from .clue import ANSWERED_STYLE, RevealState


class ViewState:
    """
    Presenter that keeps a JSON-ready snapshot of what the page shows.

    It is only ever written through the render/loading calls made by the
    controller; the board model stays the source of truth.
    """

    def __init__(self) -> None:
        self.loading = False
        self.error: Optional[str] = None
        self.button = "start"
        self.headers: List[str] = []
        self.cells: List[List[Dict[str, Optional[str]]]] = []

    def show_loading(self) -> None:
        self.loading = True
        self.error = None
        self.button = "loading..."
        self.headers = []
        self.cells = []

    def hide_loading(self) -> None:
        self.loading = False
        self.button = "restart"

    def show_error(self, message: str) -> None:
        self.error = message
        self.button = "start"
        self.headers = []
        self.cells = []

    def render_board(self, board: BoardModel) -> None:
        self.headers = board.titles()
        self.cells = [
            [
                {
                    "text": clue.display(),
                    "style": ANSWERED_STYLE if clue.reveal is RevealState.ANSWER else None,
                }
                for clue in row
            ]
            for row in board.rows()
        ]

    def render_cell_update(self, col: int, row: int, text: str, style: Optional[str]) -> None:
        cell = self.cells[row][col]
        cell["text"] = text
        if style is not None:
            cell["style"] = style

    def to_json(self) -> Dict[str, Any]:
        return {
            "loading": self.loading,
            "error": self.error,
            "button": self.button,
            "headers": list(self.headers),
            "cells": [[dict(c) for c in row] for row in self.cells],
        }

    def pretty(self, width: int = 18) -> str:
        """Plain-text table of the current view."""
        if self.error:
            return f"error: {self.error}"
        if self.loading:
            return "loading..."
        if not self.headers:
            return "(no board)"

        def fit(s: str) -> str:
            s = " ".join(s.split())
            return s if len(s) <= width else s[: width - 1] + "~"

        lines: List[str] = []
        lines.append(" | ".join(fit(h).ljust(width) for h in self.headers))
        lines.append("-+-".join("-" * width for _ in self.headers))
        for row in self.cells:
            marks = []
            for c in row:
                text = fit(c["text"] or "")
                if c.get("style") == ANSWERED_STYLE:
                    text = fit("* " + text)
                marks.append(text.ljust(width))
            lines.append(" | ".join(marks))
        return "\n".join(lines)
