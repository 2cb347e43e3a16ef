"""
Jeopardy core Python package.

This package holds the board data structures and the pure-logic helpers
behind the web app and the CLI, kept separate from app.py for testability.
Modules:
- errors.py: JeopardyError and its subclasses
- clue.py: RevealState, Clue, Category, next_reveal
- board.py: BoardModel
- selector.py: select_ids
- client.py: JeopardyClient (remote category service)
- assemble.py: CategoryAssembler
- view.py: ViewState presenter
- controller.py: BoardController
- config.py: Settings loaded from the environment
"""
