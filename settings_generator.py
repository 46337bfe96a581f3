# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List

from keyboard_and_plugboard import ALPHABET, MAX_PAIRS
from rotor_and_reflector import REFLECTOR_LABELS, ROTOR_LABELS
from utilities import ROTOR_COUNT

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs (never more than the board holds)."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(rng: Random | SystemRandom, pairs: int = MAX_PAIRS) -> Dict:
    """A complete daily key in the JSON shape `main.load_config` reads."""
    return {
        "rotors": rng.choices(ROTOR_LABELS, k=ROTOR_COUNT),
        "reflector": rng.choice(REFLECTOR_LABELS),
        "plugs": choose_pairs(pairs, rng),
        "dials": rng.choices(ALPHABET, k=ROTOR_COUNT),
    }


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma daily key")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=MAX_PAIRS,
        help=f"Number of plugboard pairs, 0–{MAX_PAIRS} (default: {MAX_PAIRS})",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    cfg = generate_settings(build_rng(args.seed), args.pairs)

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {' '.join(cfg['rotors'])}\n"
        f"   reflector   : {cfg['reflector']}\n"
        f"   dials       : {' '.join(cfg['dials'])}\n"
        f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
