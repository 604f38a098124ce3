# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from plugboard import Plugboard
from rotor_and_reflector import Reflector, Rotor
from utilities import ALPHABET, REFLECTOR, SIZE, preprocess_message, rotor_spec

debug = Debug()

ROTOR_COUNT = 3

# one shared, read-only reflector for every machine
_REFLECTOR = Reflector(REFLECTOR)


class EnigmaConfigError(ValueError):
    """Raised when a machine cannot be built from the given settings."""


def _check_settings(name: str, values: Sequence[int]) -> list[int]:
    if len(values) != ROTOR_COUNT:
        raise EnigmaConfigError(f"{name} needs exactly {ROTOR_COUNT} values, got {len(values)}")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise EnigmaConfigError(f"{name} must be integers, got {v!r}")
        if not 0 <= v < SIZE:
            raise EnigmaConfigError(f"{name} value {v} out of range 0–{SIZE - 1}")
    return list(values)


class Enigma:
    """Three-rotor machine: plugboard, rotors I–III in any order, reflector B.

    Enciphering is self-inverse, so a message is decrypted by feeding the
    ciphertext to a *fresh* machine built with the same settings. Rotor
    positions advance as a side effect of every letter; callers sharing one
    machine between threads must serialise access themselves.
    """

    def __init__(
        self,
        rotor_selectors: Sequence[int | str],
        positions: Sequence[int],
        ring_settings: Sequence[int],
        plugboard_pairs: Sequence[str | tuple[str, str]] = (),
    ) -> None:
        if len(rotor_selectors) != ROTOR_COUNT:
            raise EnigmaConfigError(
                f"Need exactly {ROTOR_COUNT} rotors, got {len(rotor_selectors)}"
            )
        try:
            specs = [rotor_spec(sel) for sel in rotor_selectors]
        except KeyError as exc:
            raise EnigmaConfigError(exc.args[0]) from exc

        positions = _check_settings("positions", positions)
        ring_settings = _check_settings("ring settings", ring_settings)

        try:
            self.plugboard = Plugboard(plugboard_pairs)
        except ValueError as exc:
            raise EnigmaConfigError(str(exc)) from exc

        # left, middle, right
        self.rotors: list[Rotor] = [
            Rotor.from_spec(spec, ring, pos)
            for spec, pos, ring in zip(specs, positions, ring_settings)
        ]
        self.reflector = _REFLECTOR

        debug.log(
            "config",
            f"rotors={[s.name for s in specs]} pos={positions} "
            f"rings={ring_settings} {self.plugboard!r}",
        )

    @property
    def plugboard_pairs(self) -> list[tuple[str, str]]:
        return list(self.plugboard.pairs)

    @property
    def positions(self) -> tuple[int, int, int]:
        left, middle, right = self.rotors
        return left.position, middle.position, right.position

    # ── stepping logic  ─────────────────────────────────────────

    def step_rotors(self) -> None:
        """Advance rotors for one key-press.

        The middle rotor only *triggers* the left one from its notch; it does
        not double-step itself.
        """
        left, middle, right = self.rotors

        if right.at_notch():
            middle.step()
        if middle.at_notch():
            left.step()
        right.step()

        debug.log("stepping", f"Rotor pos {list(self.positions)}")

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, letter: str) -> str:
        if len(letter) != 1 or letter not in ALPHABET:
            return letter

        self.step_rotors()

        signal = self.plugboard.swap(letter)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        out_ch = self.plugboard.swap(signal)
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def process(self, text: str) -> str:
        return "".join(self.encrypt_char(ch) for ch in preprocess_message(text))

    encrypt = process
    decrypt = process

    def __repr__(self) -> str:
        return f"<Enigma pos={list(self.positions)} {self.plugboard!r}>"
