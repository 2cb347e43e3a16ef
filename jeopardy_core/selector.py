from __future__ import annotations

import random
from typing import Any, List, Mapping, Optional, Sequence

from .errors import InsufficientPoolError


def _ref_id(ref: Any) -> Any:
    if isinstance(ref, Mapping):
        return ref["id"]
    return getattr(ref, "id", ref)


def select_ids(pool: Sequence[Any], count: int, rng: Optional[random.Random] = None) -> List[Any]:
    """
    Picks `count` category ids from `pool` in uniformly random order.

    Runs a Fisher-Yates shuffle over a copy of the pool, so the caller's
    sequence is left untouched. Entries may be dicts with an "id" key,
    objects with an `id` attribute, or bare ids.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if not pool:
        raise InsufficientPoolError("candidate pool is empty")
    if count > len(pool):
        raise InsufficientPoolError(f"need {count} categories, pool has only {len(pool)}")
    rng = rng or random.Random()
    deck = list(pool)
    remaining = len(deck)
    while remaining > 0:
        # Pick from the unshuffled prefix [0, remaining) and park it at the end.
        idx = rng.randrange(remaining)
        remaining -= 1
        deck[remaining], deck[idx] = deck[idx], deck[remaining]
    return [_ref_id(ref) for ref in deck[:count]]
