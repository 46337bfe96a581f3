# rotor_and_reflector.py
from __future__ import annotations

from debug import Debug
from errors import OutOfRange
from keyboard_and_plugboard import ALPHABET, SIZE

debug = Debug()
debug.disable("stepping")

# ── wheel database ────────────────────────────────────────────────
#  (label, wiring, notch letter)
ROTOR_WIRINGS: tuple[tuple[str, str, str], ...] = (
    ("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    ("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    ("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    ("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    ("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
)

REFLECTOR_WIRINGS: tuple[tuple[str, str], ...] = (
    ("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    ("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
)

ROTOR_LABELS = tuple(label for label, _, _ in ROTOR_WIRINGS)
REFLECTOR_LABELS = tuple(label for label, _ in REFLECTOR_WIRINGS)


class Rotor:
    def __init__(self, index: int) -> None:
        if not isinstance(index, int) or index not in range(len(ROTOR_WIRINGS)):
            raise OutOfRange(
                f"Rotor number {index!r} out of range 0–{len(ROTOR_WIRINGS) - 1}"
            )

        self.index = index
        self.label, wiring, notch = ROTOR_WIRINGS[index]

        # integer lookup tables
        self._fwd = tuple(ALPHABET.index(c) for c in wiring)
        self._rev = tuple(wiring.index(c) for c in ALPHABET)

        self.notch = ALPHABET.index(notch)
        self.dial = 0

    # ── dial & notch helpers ──────────────────────────────────────
    def set_dial(self, position: int) -> "Rotor":
        self.dial = position % SIZE
        return self

    @property
    def at_notch(self) -> bool:
        return self.dial == self.notch

    @property
    def window(self) -> str:
        """Letter currently showing through the machine's window."""
        return ALPHABET[self.dial]

    # ── stepping --------------------------------------------------
    def step(self) -> bool:
        """Advance one and return True on *turnover* (new dial == notch)."""
        self.dial = (self.dial + 1) % SIZE
        hit = self.at_notch
        debug.log("stepping", f"Rotor {self.label} dial {self.dial}, notch_hit={hit}")
        return hit

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        out = self._fwd[(sig + self.dial) % SIZE]
        debug.log("rotor", f"{self.label} {ALPHABET[sig]}->{ALPHABET[out]}")
        return out

    def reverse(self, sig: int) -> int:
        # undo forward(): look up the contact, then take the offset back off
        out = (self._rev[sig] - self.dial) % SIZE
        debug.log("rotor", f"{self.label} {ALPHABET[out]}<-{ALPHABET[sig]}")
        return out

    def __repr__(self) -> str:
        return f"<Rotor {self.label} dial={self.dial} notch={ALPHABET[self.notch]}>"


class Reflector:
    def __init__(self, index: int) -> None:
        if not isinstance(index, int) or index not in range(len(REFLECTOR_WIRINGS)):
            raise OutOfRange(
                f"Reflector number {index!r} out of range 0–{len(REFLECTOR_WIRINGS) - 1}"
            )

        self.index = index
        self.label, wiring = REFLECTOR_WIRINGS[index]

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = ALPHABET.index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ValueError(
                    f"Reflector {self.label} wiring must be an involution with no fixed points"
                )

        self._map = tuple(ALPHABET.index(c) for c in wiring)

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{ALPHABET[sig]}<->{ALPHABET[mapped]}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.label}>"
