# utilities.py
from __future__ import annotations

from collections.abc import Sequence
from typing import Dict, List, Tuple

from errors import InvalidConfiguration, OutOfRange
from keyboard_and_plugboard import ALPHABET, LETTERS, SIZE
from rotor_and_reflector import REFLECTOR_LABELS, ROTOR_LABELS

ROTOR_COUNT = 3

# ────────────────────────────────────────────────────────────────────────
#  0. Selector & dial parsing
# ────────────────────────────────────────────────────────────────────────


def _tokens(value: str | Sequence, what: str) -> list:
    if isinstance(value, str):
        items = value.split()
    elif isinstance(value, Sequence):
        items = list(value)
    else:
        raise InvalidConfiguration(f"Expected a string or list of {what}, got {value!r}")
    if len(items) != ROTOR_COUNT:
        raise InvalidConfiguration(
            f"Expected {ROTOR_COUNT} {what}, got {len(items)}: {value!r}"
        )
    return items


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _selector(token: int | str, labels: Tuple[str, ...], what: str) -> int:
    """Map an ordinal or a label onto an index into *labels*."""
    if isinstance(token, str):
        name = token.strip().upper()
        if name in labels:
            return labels.index(name)
        if not name.isdigit():
            raise OutOfRange(f"Unknown {what} {token!r}; expected one of {', '.join(labels)}")
        token = int(name)
    elif not _is_int(token):
        raise InvalidConfiguration(f"{what.capitalize()} selector must be a label or a whole number, got {token!r}")
    if not 0 <= token < len(labels):
        raise OutOfRange(f"{what.capitalize()} number {token} out of range 0–{len(labels) - 1}")
    return token


def parse_rotor(token: int | str) -> int:
    return _selector(token, ROTOR_LABELS, "rotor")


def parse_rotors(value: str | Sequence[int | str]) -> Tuple[int, int, int]:
    """``"I II IV"`` / ``[0, 1, 3]`` → ``(0, 1, 3)``; duplicates are allowed."""
    return tuple(parse_rotor(t) for t in _tokens(value, "rotors"))


def parse_reflector(value: int | str) -> int:
    return _selector(value, REFLECTOR_LABELS, "reflector")


def parse_dial(token: int | str) -> int:
    if isinstance(token, str):
        letter = token.strip().upper()
        if letter not in LETTERS:
            raise OutOfRange(f"Dial position {token!r} is not a letter A-Z")
        return ALPHABET.index(letter)
    if not _is_int(token):
        raise InvalidConfiguration(f"Dial position must be a letter or a whole number, got {token!r}")
    return token % SIZE


def parse_dials(value: str | Sequence[int | str]) -> Tuple[int, int, int]:
    """Accepts ``"A B C"``, ``"ABC"`` or a sequence of ints / letters."""
    if isinstance(value, str):
        value = list("".join(value.split()))
    return tuple(parse_dial(t) for t in _tokens(value, "dial positions"))


def parse_plugs(value: str | Sequence[str]) -> List[str]:
    """Normalise plug pairs to upper-case tokens; validation is the plugboard's."""
    if isinstance(value, str):
        return [p.upper() for p in value.split()]
    if not isinstance(value, Sequence):
        raise InvalidConfiguration(f"Plug pairs must be a string or a list, got {value!r}")
    return [p.upper() if isinstance(p, str) else p for p in value]


def dials_to_letters(dials: Sequence[int]) -> str:
    return " ".join(ALPHABET[d % SIZE] for d in dials)


# ────────────────────────────────────────────────────────────────────────
#  1. Text preprocessing
# ────────────────────────────────────────────────────────────────────────

ESCAPES: Dict[str, str] = {
    ".": "XX",
    ",": "YY",
    "?": "ZZ",
    "!": "JC",
    ":": "JA",
    ";": "JB",
    " ": "QQ",
    "0": "QZ",
    "1": "AA",
    "2": "BB",
    "3": "CC",
    "4": "DD",
    "5": "EE",
    "6": "FF",
    "7": "GG",
    "8": "HH",
    "9": "II",
}
_UNESCAPES: Dict[str, str] = {pair: ch for ch, pair in ESCAPES.items()}


def escape(text: str) -> str:
    """Spell punctuation, spaces and digits as letter pairs (``.`` → ``XX``)."""
    return "".join(ESCAPES.get(ch, ch) for ch in text.upper())


def unescape(text: str) -> str:
    """Best-effort inverse of :func:`escape`.

    Lossy: a genuine double letter in the plaintext that happens to be an
    escape code (``BOOKKEEPER`` contains ``EE``) comes back as punctuation.
    """
    out: List[str] = []
    i = 0
    while i < len(text):
        pair = text[i : i + 2]
        if pair in _UNESCAPES:
            out.append(_UNESCAPES[pair])
            i += 2
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def preprocess_message(msg: str) -> str:
    """Upper‑case and drop everything the keyboard cannot type."""
    return "".join(ch for ch in msg.upper() if ch in LETTERS)


def blocks(text: str, size: int = 5) -> str:
    """Group ciphertext for display: ``ABCDEFG`` → ``ABCDE  FG``."""
    return "  ".join(text[i : i + size] for i in range(0, len(text), size))
