# rotor_and_reflector.py
from __future__ import annotations
from debug import Debug
from utilities import ALPHABET, SIZE, RotorSpec, index_of, mod

debug = Debug()


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        ring_setting: int = 0,
        position: int = 0,
    ) -> None:
        if sorted(wiring) != sorted(ALPHABET):
            raise ValueError("wiring must be a permutation of alphabet")
        if len(notch) != 1 or notch not in ALPHABET:
            raise ValueError(f"Notch {notch!r} must be a single alphabet letter")

        self.wiring = wiring
        self.notch = notch
        self.ring_setting = mod(ring_setting, SIZE)
        self.position = mod(position, SIZE)

    @classmethod
    def from_spec(cls, spec: RotorSpec, ring_setting: int = 0, position: int = 0) -> "Rotor":
        return cls(spec.wiring, spec.notch, ring_setting, position)

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = mod(self.position + 1, SIZE)
        debug.log("rotor", f"step -> pos {self.position}")

    def at_notch(self) -> bool:
        return self.position == index_of(self.notch)

    # ── signal paths ---------------------------------------------
    def forward(self, letter: str) -> str:
        shift = mod(index_of(letter) + self.position - self.ring_setting, SIZE)
        mapped = self.wiring[shift]
        return ALPHABET[mod(index_of(mapped) - self.position + self.ring_setting, SIZE)]

    def backward(self, letter: str) -> str:
        # reverse lookup: find the contact whose wire lands on `shift`
        shift = mod(index_of(letter) + self.position - self.ring_setting, SIZE)
        mapped = self.wiring.index(ALPHABET[shift])
        return ALPHABET[mod(mapped - self.position + self.ring_setting, SIZE)]

    def __repr__(self) -> str:
        return f"<Rotor notch={self.notch} pos={self.position} ring={self.ring_setting}>"


class Reflector:
    def __init__(self, wiring: str) -> None:
        if len(wiring) != SIZE:
            raise ValueError("Reflector wiring length must match alphabet length")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            if c not in ALPHABET:
                raise ValueError(f"Reflector symbol {c!r} not in alphabet")
            j = index_of(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ValueError("Reflector wiring must be an involution with no fixed points")

        self.wiring = wiring

    def reflect(self, letter: str) -> str:
        mapped = self.wiring[index_of(letter)]
        debug.log("reflector", f"{letter}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
