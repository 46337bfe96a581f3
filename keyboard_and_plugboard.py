# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Sequence
from debug import Debug
from errors import InvalidCharacter, InvalidConfiguration

debug = Debug()
debug.disable("plugboard")

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)
LETTERS = frozenset(ALPHABET)
MAX_PAIRS = 10


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            signal = self.alpha_to_index[letter]
        except KeyError:
            raise InvalidCharacter(
                f"Invalid character {letter!r}; only A-Z can be typed."
            ) from None
        debug.log("keyboard", f"{letter}->{signal}")
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise InvalidCharacter(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]


# ── Plugboard ─────────────────────────────────────────────────────
PairSpec = str | Sequence[str | tuple[str, str]]


def _split_pairs(pairs: PairSpec) -> list[str | tuple[str, str]]:
    if isinstance(pairs, str):
        return pairs.split()
    if not isinstance(pairs, Sequence):
        raise InvalidConfiguration(f"Plug pairs must be a string or a list, got {pairs!r}")
    return list(pairs)


class Plugboard:
    """Static swap table; every plugged pair is wired in both directions."""

    def __init__(self, pairs: PairSpec = ()) -> None:
        self.table: list[int] = list(range(SIZE))
        self.configure(pairs)

    def configure(self, pairs: PairSpec) -> None:
        """Rebuild from identity; on error the old table stays in place."""
        tokens = _split_pairs(pairs)
        if len(tokens) > MAX_PAIRS:
            raise InvalidConfiguration(
                f"Too many plugboard pairs: {len(tokens)} (max {MAX_PAIRS})"
            )

        table = list(range(SIZE))
        used: set[str] = set()

        for raw in tokens:
            # normalise to (a, b)
            if not isinstance(raw, Sequence) or len(raw) != 2:
                raise InvalidConfiguration(f"Pair {raw!r} must be exactly 2 letters")
            a, b = (str(ch).upper() for ch in raw)

            if a not in LETTERS or b not in LETTERS:
                bad = a if a not in LETTERS else b
                raise InvalidConfiguration(f"Symbol {bad!r} in pair {raw!r} is not a letter A-Z")
            if a == b:
                raise InvalidConfiguration(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise InvalidConfiguration(f"Letter {dup!r} already used in plugboard")

            ia, ib = ALPHABET.index(a), ALPHABET.index(b)
            table[ia], table[ib] = ib, ia
            used.update((a, b))

        # passed validation → commit
        self.table = table
        debug.log("plugboard", f"configured {self!r}")

    def exchange(self, signal: int) -> int:
        mapped = self.table[signal]
        debug.log("plugboard", f"{ALPHABET[signal]}->{ALPHABET[mapped]}")
        return mapped

    @property
    def pairs(self) -> list[str]:
        return [
            ALPHABET[a] + ALPHABET[b]
            for a, b in enumerate(self.table)
            if a < b
        ]

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
