# plugboard.py
from __future__ import annotations

from collections.abc import Sequence
from debug import Debug
from utilities import ALPHABET

debug = Debug()

MAX_PAIRS = len(ALPHABET) // 2
_LETTERS = frozenset(ALPHABET)


def plugboard_swap(letter: str, pairs: Sequence[tuple[str, str]]) -> str:
    """Return *letter*'s partner, or *letter* itself when it is unplugged.

    The first pair containing *letter* wins.
    """
    for a, b in pairs:
        if letter == a:
            return b
        if letter == b:
            return a
    return letter


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Sequence[str | tuple[str, str]] = ()) -> None:
        if len(pairs) > MAX_PAIRS:
            raise ValueError(f"Too many plugboard pairs ({len(pairs)}, max {MAX_PAIRS})")

        normalised: list[tuple[str, str]] = []
        used: set[str] = set()

        for raw in pairs:
            # normalise to (a, b)
            if not isinstance(raw, (str, tuple, list)) or len(raw) != 2:
                raise ValueError(f"Pair {raw!r} must be exactly 2 letters")
            a, b = (str(ch).upper() for ch in raw)

            if a == b:
                raise ValueError(f"Plugboard cannot map a letter to itself: {a}")
            if a not in _LETTERS or b not in _LETTERS:
                bad = a if a not in _LETTERS else b
                raise ValueError(f"Symbol {bad!r} not in alphabet")
            if a in used or b in used:
                dup = a if a in used else b
                raise ValueError(f"Letter {dup!r} already used in plugboard")

            normalised.append((a, b))
            used.update((a, b))

        self.pairs: tuple[tuple[str, str], ...] = tuple(normalised)

    def swap(self, letter: str) -> str:
        mapped = plugboard_swap(letter, self.pairs)
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(a + b for a, b in self.pairs)}>"
