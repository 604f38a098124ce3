# main.py
from __future__ import annotations

import argparse, json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Sequence

from debug import Debug
from enigma import Enigma
from plugboard import MAX_PAIRS, Plugboard
from utilities import ALPHABET, ROTORS, SIZE, rotor_spec

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


def _to_index(value: int | str) -> int:
    """Accept a window letter ("A") or a plain 0-based integer."""
    if isinstance(value, str):
        value = value.strip().upper()
        if value.isdigit():
            return int(value)
        if len(value) == 1 and value in ALPHABET:
            return ALPHABET.index(value)
        raise ValueError(f"Cannot read {value!r} as a rotor setting")
    return value


@dataclass(slots=True)
class Config:
    """Machine settings plus display switches."""

    rotors: List[int | str] = field(default_factory=lambda: [0, 1, 2])
    positions: List[int] = field(default_factory=lambda: [0, 0, 0])
    rings: List[int] = field(default_factory=lambda: [0, 0, 0])
    plugs: List[str] = field(default_factory=list)
    block: int = 0                  # display block size, 0 = ungrouped

    def build(self) -> Enigma:
        """Return a freshly keyed machine; never reuse one across messages."""
        return Enigma(self.rotors, self.positions, self.rings, self.plugs)


def load_config(path: str | Path) -> Config:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")
    required = {"rotors", "positions", "rings"}
    missing = required - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
    for key in ("rotors", "positions", "rings", "plugs"):
        if key in data and not isinstance(data[key], list):
            raise ValueError(f"Config key {key!r} must be a list, got {data[key]!r}")
    if not isinstance(data.get("block", 0), int):
        raise ValueError(f"Config key 'block' must be an integer, got {data['block']!r}")

    cfg = Config(
        rotors=list(data["rotors"]),
        positions=[_to_index(v) for v in data["positions"]],
        rings=[_to_index(v) for v in data["rings"]],
        plugs=list(data.get("plugs", [])),
        block=int(data.get("block", 0)),
    )
    debug.log("config", f"loaded {path}: {cfg}")
    return cfg


# ────────────────────────────────────────────────────────────────────────
#  1. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def ask(prompt: str, reader: Callable[[str], str] = input) -> str:
    """Read & normalise an operator’s response (uppercase, trimmed)."""
    return reader(prompt).strip().upper()


def get_rotor_selection(reader: Callable[[str], str] = input) -> List[str]:
    names = [spec.name for spec in ROTORS]
    print("\nAvailable Rotors:", " ".join(names))
    while True:
        sel = ask("Select 3 rotors, left to right: ", reader).split()
        if len(sel) == 3 and all(r in names for r in sel):
            return sel
        print(f"❌  Need exactly 3 rotor names from {' '.join(names)}.")


def get_settings_triplet(what: str, reader: Callable[[str], str] = input) -> List[int]:
    while True:
        raw = ask(f"3 {what} (A-Z or 0-{SIZE - 1}): ", reader).split()
        try:
            values = [_to_index(item) for item in raw]
        except ValueError:
            values = []
        if len(values) == 3 and all(0 <= v < SIZE for v in values):
            return values
        print(f"❌  Need exactly 3 letters or numbers in 0–{SIZE - 1}.")


def get_plugboard(reader: Callable[[str], str] = input) -> List[str]:
    """Return a list of *validated* plugboard pairs (e.g. ["AB", "CD"])."""
    print(f"\nPlugboard pairs (≤{MAX_PAIRS}, e.g. AB CD EF):")
    while True:
        raw = ask("Pairs (Enter for none): ", reader)
        if not raw:
            return []
        pairs = raw.split()
        try:
            Plugboard(pairs)
        except ValueError as exc:
            print(f"❌  {exc}")
            continue
        return pairs


def get_settings(reader: Callable[[str], str] = input) -> Config:
    """Collect every machine setting from the operator."""
    return Config(
        rotors=get_rotor_selection(reader),
        positions=get_settings_triplet("start positions", reader),
        rings=get_settings_triplet("ring settings", reader),
        plugs=get_plugboard(reader),
    )


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def format_blocks(text: str, block: int) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON.")
    p.add_argument("--rotors", nargs=3, metavar="R", help="Rotors left to right, by name (I II III) or index (0 1 2).")
    p.add_argument("--positions", nargs=3, metavar="P", help="Start positions as letters or 0-25.")
    p.add_argument("--rings", nargs=3, metavar="N", help="Ring settings as letters or 0-25.")
    p.add_argument("--plugs", nargs="*", metavar="AB", help="Plugboard pairs, e.g. AB CD.")
    p.add_argument("--block", type=int, help="Group output into blocks of this size.")
    p.add_argument("--interactive", action="store_true", help="Ignore other settings and run the prompt chain.")
    p.add_argument("-v", "--verbose", action="store_true", help="Trace every machine component.")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    cfg = load_config(args.config) if args.config else Config()

    if args.rotors:
        cfg.rotors = [int(r) if r.isdigit() else r for r in args.rotors]
    if args.positions:
        cfg.positions = [_to_index(v) for v in args.positions]
    if args.rings:
        cfg.rings = [_to_index(v) for v in args.rings]
    if args.plugs is not None:
        cfg.plugs = list(args.plugs)
    if args.block is not None:
        cfg.block = args.block
    return cfg


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        debug.enable_all()

    try:
        cfg = get_settings() if args.interactive else config_from_args(args)
        cfg.build()                     # fail fast on bad settings
    except (ValueError, OSError) as exc:
        raise SystemExit(f"❌  Bad machine settings: {exc}")

    names = [rotor_spec(r).name for r in cfg.rotors]

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(format_blocks(cfg.build().process(args.message), cfg.block))
        return

    # interactive REPL ---------------------------------------------------
    print(f"\nRotors {' '.join(names)} ready. Type blank line to quit.\n")
    while True:
        txt = input("\nMessage: ")
        if not txt.strip():
            break
        print("\nResult:", format_blocks(cfg.build().process(txt), cfg.block))


if __name__ == "__main__":
    main()
