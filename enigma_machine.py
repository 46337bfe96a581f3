# enigma_machine.py  ─────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from keyboard_and_plugboard import Keyboard, PairSpec, Plugboard
from rotor_and_reflector import Reflector, Rotor
from utilities import dials_to_letters, parse_dials, parse_reflector, parse_rotors

debug = Debug()
debug.disable("encipher")

RotorSpec = str | Sequence[int | str]
DialSpec = str | Sequence[int | str]


class EnigmaMachine:
    """Three-rotor machine with a single-step cascade (no double stepping).

    ``rotors[0]`` is the fast wheel next to the plugboard, ``rotors[2]`` sits
    next to the reflector. Encryption and decryption are the same operation;
    restoring the start position before decrypting is left to the caller
    (see :meth:`reset`).
    """

    def __init__(
        self,
        rotors: RotorSpec = (0, 1, 2),
        reflector: int | str = "B",
        plugs: PairSpec = (),
        dials: DialSpec = (0, 0, 0),
    ) -> None:
        self.kb = Keyboard()
        self.configure(rotors, reflector, plugs, dials)

    # ── configuration ──────────────────────────────────────────

    def configure(
        self,
        rotors: RotorSpec,
        reflector: int | str,
        plugs: PairSpec,
        dials: DialSpec,
    ) -> None:
        """Build every component first, then swap them in together."""
        new_rotors = self._build_rotors(rotors)
        new_reflector = Reflector(parse_reflector(reflector))
        new_pb = Plugboard(plugs)
        start = parse_dials(dials)

        self.rotors = new_rotors
        self.reflector = new_reflector
        self.pb = new_pb
        self.initial_dials = start
        self.reset()

    @staticmethod
    def _build_rotors(rotors: RotorSpec) -> list[Rotor]:
        return [Rotor(i) for i in parse_rotors(rotors)]

    def set_rotors(self, rotors: RotorSpec) -> None:
        """Fit fresh wheels and turn them to the stored start position."""
        self.rotors = self._build_rotors(rotors)
        self.reset()

    def set_reflector(self, reflector: int | str) -> None:
        self.reflector = Reflector(parse_reflector(reflector))

    def set_plugboard(self, plugs: PairSpec) -> None:
        self.pb = Plugboard(plugs)

    def set_dials(self, dials: DialSpec) -> None:
        """Store a new start position and turn the rotors to it."""
        self.initial_dials = parse_dials(dials)
        self.reset()

    def reset(self) -> None:
        """Turn every rotor back to the stored start position."""
        for rotor, dial in zip(self.rotors, self.initial_dials):
            rotor.set_dial(dial)

    # ── introspection ──────────────────────────────────────────

    @property
    def dials(self) -> tuple[int, ...]:
        return tuple(r.dial for r in self.rotors)

    @property
    def window(self) -> str:
        return dials_to_letters(self.dials)

    @property
    def settings(self) -> dict:
        """The start configuration in the same shape the JSON config uses."""
        return {
            "rotors": [r.label for r in self.rotors],
            "reflector": self.reflector.label,
            "plugs": self.pb.pairs,
            "dials": dials_to_letters(self.initial_dials).split(),
        }

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Odometer cascade: a wheel landing on its notch carries to the next."""
        carry = True
        for rotor in self.rotors:
            if not carry:
                break
            carry = rotor.step()

    # ── encipher one symbol  ────────────────────────────────────

    def process(self, signal: int) -> int:
        """Step, then run *signal* through the full circuit and back."""
        self._step_rotors()
        debug.log("stepping", f"Rotor dials {list(self.dials)}")

        signal = self.pb.exchange(signal)

        for rotor in self.rotors:
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.reverse(signal)

        return self.pb.exchange(signal)

    def process_char(self, letter: str) -> str:
        return self._encipher(letter, self.kb.forward(letter))

    def _encipher(self, letter: str, signal: int) -> str:
        out_ch = self.kb.backward(self.process(signal))
        debug.log("encipher", f"{letter}->{out_ch} at {self.window}")
        return out_ch

    def encrypt(self, text: str) -> str:
        # every key is checked before the first rotor moves
        signals = [self.kb.forward(ch) for ch in text]
        return "".join(self._encipher(ch, sig) for ch, sig in zip(text, signals))

    # reciprocal: the same circuit undoes itself
    decrypt = encrypt

    def __repr__(self) -> str:
        names = " ".join(r.label for r in self.rotors)
        return (
            f"<EnigmaMachine rotors={names} reflector={self.reflector.label} "
            f"window={self.window} {self.pb!r}>"
        )

