# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List, Sequence

from plugboard import MAX_PAIRS
from utilities import ALPHABET, ROTORS

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_config(rng: Random | SystemRandom, n_pairs: int = 10) -> Dict:
    """One day's key sheet, in the shape `main.load_config` reads."""
    names = [spec.name for spec in ROTORS]
    return {
        "rotors": rng.sample(names, len(names)),
        "positions": [rng.choice(ALPHABET) for _ in names],
        "rings": [rng.randrange(len(ALPHABET)) for _ in names],
        "plugs": choose_pairs(n_pairs, rng),
    }


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma key sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=10, help=f"Plugboard pairs, 0-{MAX_PAIRS} (default: 10)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    cfg = generate_config(build_rng(args.seed), args.pairs)

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg['rotors']}\n"
        f"   positions   : {cfg['positions']}\n"
        f"   rings       : {cfg['rings']}\n"
        f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
