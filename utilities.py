# utilities.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# ────────────────────────────────────────────────────────────────────────
#  0. Alphabet & arithmetic helpers
# ────────────────────────────────────────────────────────────────────────

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE = len(ALPHABET)


def mod(n: int, m: int) -> int:
    """Non-negative residue of *n* in ``[0, m)``."""
    return ((n % m) + m) % m


def index_of(letter: str) -> int:
    return ALPHABET.index(letter)


def preprocess_message(msg: str) -> str:
    """Upper-case only; anything outside the alphabet is kept as-is."""
    return msg.upper()


# ────────────────────────────────────────────────────────────────────────
#  1. Wheel database
# ────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RotorSpec:
    name: str
    wiring: str
    notch: str


ROTORS: Tuple[RotorSpec, ...] = (
    RotorSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    RotorSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
)

# reflector B
REFLECTOR = "YRUHQSLDPXNGOKMIEBFZCWVJAT"


def rotor_spec(selector: int | str) -> RotorSpec:
    """Look a built-in rotor up by index (0, 1, 2) or by name (I, II, III)."""
    if isinstance(selector, bool):
        raise KeyError(f"Unknown rotor {selector!r}")
    if isinstance(selector, int):
        if 0 <= selector < len(ROTORS):
            return ROTORS[selector]
        raise KeyError(f"Unknown rotor {selector!r}. Expected 0–{len(ROTORS) - 1}")
    if isinstance(selector, str):
        wanted = selector.strip().upper()
        for spec in ROTORS:
            if spec.name == wanted:
                return spec
    raise KeyError(f"Unknown rotor {selector!r}. Expected one of {[s.name for s in ROTORS]}")


__all__ = [
    "ALPHABET",
    "REFLECTOR",
    "ROTORS",
    "RotorSpec",
    "index_of",
    "mod",
    "preprocess_message",
    "rotor_spec",
]
