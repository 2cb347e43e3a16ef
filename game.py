from __future__ import annotations

# Facade module that re-exports Jeopardy core functionality.
# The Flask app and tests import from here; single-responsibility modules
# live under jeopardy_core/*.

from jeopardy_core.assemble import CategoryAssembler, normalize_category
from jeopardy_core.board import BoardModel
from jeopardy_core.client import JeopardyClient
from jeopardy_core.clue import (
    ANSWERED_STYLE,
    PLACEHOLDER,
    Category,
    Clue,
    RevealState,
    coerce_reveal,
    next_reveal,
    style_hint,
)
from jeopardy_core.config import Settings, load_settings
from jeopardy_core.controller import BoardController
from jeopardy_core.errors import (
    DataFetchError,
    InconsistentBoardError,
    InsufficientPoolError,
    JeopardyError,
)
from jeopardy_core.selector import select_ids
from jeopardy_core.view import ViewState

__all__ = [
    "ANSWERED_STYLE",
    "PLACEHOLDER",
    "BoardController",
    "BoardModel",
    "Category",
    "CategoryAssembler",
    "Clue",
    "DataFetchError",
    "InconsistentBoardError",
    "InsufficientPoolError",
    "JeopardyClient",
    "JeopardyError",
    "RevealState",
    "Settings",
    "ViewState",
    "coerce_reveal",
    "load_settings",
    "next_reveal",
    "normalize_category",
    "select_ids",
    "style_hint",
]


def main() -> None:
    # CLI driver delegated to jeopardy_core.cli
    from jeopardy_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
