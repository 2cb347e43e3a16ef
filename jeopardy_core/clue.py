from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

PLACEHOLDER = "?"
ANSWERED_STYLE = "answered"


class RevealState(Enum):
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    """A question/answer pair and how far it has been revealed."""
    question: str
    answer: str
    reveal: RevealState = RevealState.HIDDEN

    def display(self) -> str:
        """Text the cell currently shows for this clue."""
        if self.reveal is RevealState.QUESTION:
            return self.question
        if self.reveal is RevealState.ANSWER:
            return self.answer
        return PLACEHOLDER


@dataclass(frozen=True)
class Category:
    """A titled column of clues. The clue tuple never changes length after assembly."""
    title: str
    clues: Tuple[Clue, ...] = field(default_factory=tuple)


def coerce_reveal(value: Any) -> RevealState:
    """Maps a raw reveal tag to a RevealState; anything unrecognised is HIDDEN."""
    if isinstance(value, RevealState):
        return value
    if isinstance(value, str):
        try:
            return RevealState(value.strip().lower())
        except ValueError:
            return RevealState.HIDDEN
    return RevealState.HIDDEN


def next_reveal(current: Any, clue: Clue) -> Tuple[RevealState, str]:
    """
    Computes what a cell shows after one more click.

    HIDDEN -> QUESTION shows the question, QUESTION -> ANSWER shows the answer,
    and ANSWER stays ANSWER. The clue itself is not modified.
    """
    state = coerce_reveal(current)
    if state is RevealState.HIDDEN:
        return RevealState.QUESTION, clue.question
    return RevealState.ANSWER, clue.answer


def style_hint(before: RevealState, after: RevealState) -> Optional[str]:
    """Only the QUESTION -> ANSWER transition marks the cell as answered."""
    if before is RevealState.QUESTION and after is RevealState.ANSWER:
        return ANSWERED_STYLE
    return None
