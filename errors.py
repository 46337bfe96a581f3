# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for everything the machine refuses to accept."""


class InvalidConfiguration(EnigmaError):
    """Wrong cardinality or malformed rotor / dial / plugboard input."""


class OutOfRange(InvalidConfiguration):
    """A rotor or reflector selector outside its fixed set."""


class InvalidCharacter(EnigmaError):
    """A symbol that cannot be typed on the 26-key keyboard."""
