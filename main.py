# main.py
from __future__ import annotations

import argparse, json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from debug import COMPONENTS, Debug, enable_everywhere
from enigma_machine import EnigmaMachine
from errors import EnigmaError, InvalidConfiguration
from utilities import blocks, escape, parse_plugs, preprocess_message, unescape

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()
debug.toggle_global(False)

KEY_TYPES = {
    "rotors": (str, list),
    "reflector": (str, int),
    "plugs": (str, list),
    "dials": (str, list),
}
REQUIRED_KEYS = set(KEY_TYPES)


@dataclass(slots=True)
class Config:
    """Runtime switches that influence the text pipeline."""

    escape: bool = True             # spell punctuation/digits as letter pairs
    block: int = 5                  # display block size


@dataclass(slots=True)
class MachineSettings:
    """Everything needed to put a machine into its start position."""

    rotors: List[str] | str = field(default_factory=lambda: ["I", "II", "III"])
    reflector: str = "B"
    plugs: List[str] | str = field(default_factory=list)
    dials: List[str] | str = field(default_factory=lambda: ["A", "A", "A"])

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise InvalidConfiguration(f"Missing keys in config: {', '.join(sorted(missing))}")
        for key, kinds in KEY_TYPES.items():
            if not isinstance(data[key], kinds) or isinstance(data[key], bool):
                names = " or ".join(k.__name__ for k in kinds)
                raise InvalidConfiguration(f"Config key {key!r} must be {names}, got {data[key]!r}")
        return cls(
            rotors=data["rotors"],
            reflector=data["reflector"],
            plugs=parse_plugs(data["plugs"]),
            dials=data["dials"],
        )

    def build(self) -> EnigmaMachine:
        return EnigmaMachine(self.rotors, self.reflector, self.plugs, self.dials)


# ────────────────────────────────────────────────────────────────────────
#  1. JSON loading helpers
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> MachineSettings:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{path}: expected a JSON object")
    return MachineSettings.from_dict(data)


# ────────────────────────────────────────────────────────────────────────
#  2. CipherPipeline – the high‑level encrypt/decrypt API
# ────────────────────────────────────────────────────────────────────────


class CipherPipeline:
    """Encrypt / decrypt free text, always starting from the key's dials."""

    def __init__(self, machine: EnigmaMachine, cfg: Config) -> None:
        self.machine = machine
        self.cfg = cfg

    def _prepare(self, msg: str) -> str:
        text = escape(msg) if self.cfg.escape else msg
        return preprocess_message(text)

    def encrypt(self, msg: str) -> str:
        self.machine.reset()
        cipher = self.machine.encrypt(self._prepare(msg))
        debug.log("encipher", f"{len(cipher)} letters at {self.machine.window}")
        return cipher

    def decrypt(self, cipher: str) -> str:
        self.machine.reset()
        plain = self.machine.decrypt(preprocess_message(cipher))
        return unescape(plain) if self.cfg.escape else plain


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive REPL starts.")
    p.add_argument("--rotors", default="I II III", help='Three rotors, fast wheel first (I–V or 0–4). Default: "I II III"')
    p.add_argument("--reflector", default="B", help="Reflector B or C. Default: B")
    p.add_argument("--plugs", default="", help='Up to 10 plug pairs, e.g. "SZ GT DV". Default: none')
    p.add_argument("--dials", default="A A A", help='Three start positions, e.g. "A B C". Default: "A A A"')
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the flags above.")
    p.add_argument("--escape", choices=["on", "off"], default="on", help="Spell punctuation and digits as letter pairs. Default: on")
    p.add_argument("--decrypt", action="store_true", help="Treat --message as ciphertext and only decrypt it.")
    p.add_argument("--debug", nargs="+", metavar="COMPONENT", choices=COMPONENTS, default=[], help=f"Trace components: {', '.join(COMPONENTS)}")
    p.add_argument("--log-file", metavar="FILE", help="Also write debug traces to FILE.")
    return p


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    if args.config:
        return load_config(args.config)
    return MachineSettings(
        rotors=args.rotors,
        reflector=args.reflector,
        plugs=parse_plugs(args.plugs),
        dials=args.dials,
    )


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        Debug.configure(log_to=args.log_file)
        debug.toggle_global(True)
        debug.enable(*args.debug)
        enable_everywhere(*args.debug)

    try:
        machine = settings_from_args(args).build()
    except (EnigmaError, OSError) as exc:
        parser.error(str(exc))

    cfg = Config(escape=(args.escape == "on"))
    crypto = CipherPipeline(machine, cfg)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        if args.decrypt:
            print("Decrypted:", crypto.decrypt(args.message))
            return
        cipher = crypto.encrypt(args.message)
        print("Encrypted:", blocks(cipher, cfg.block))
        print("Decrypted:", crypto.decrypt(cipher))
        return

    # interactive REPL ---------------------------------------------------
    print(f"\n{machine!r}")
    print("Type blank line to quit.\n")
    while True:
        txt = input("\nMessage to encrypt: ")
        if not txt.strip():
            break
        cipher = crypto.encrypt(txt)
        print("\nEncrypted:", blocks(cipher, cfg.block))
        print("\nDecrypted:", crypto.decrypt(cipher))


if __name__ == "__main__":
    main()
