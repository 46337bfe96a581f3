# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher")
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"


class Debug:
    """Per-component tracer for the signal path.

    Every module keeps its own instance; all of them write to the same
    ``ENIGMA`` logger at DEBUG level, prefixed with the component name.
    Nothing is printed until :meth:`configure` installs handlers.
    """

    _handlers_installed: bool = False

    def __init__(self, name: str = "ENIGMA") -> None:
        self.logger = logging.getLogger(name)
        self.enabled = True
        self.active: set[str] = set()

    @classmethod
    def configure(cls, *, level: int = logging.DEBUG, log_to: str | None = None) -> None:
        """Send traces to stderr, plus *log_to* when given. Runs once per process."""
        if cls._handlers_installed:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", handlers=handlers)
        cls._handlers_installed = True

    def log(self, component: str, message: str) -> None:
        if self.enabled and component in self.active:
            self.logger.debug("[%s] %s", component.upper(), message)

    def enable(self, *components: str) -> None:
        self.active.update(self._checked(components))

    def disable(self, *components: str) -> None:
        self.active.difference_update(self._checked(components))

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        return {c: c in self.active for c in COMPONENTS}

    @staticmethod
    def _checked(components: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [c for c in components if c not in COMPONENTS]
        if unknown:
            raise ValueError(f"No such component: {unknown[0]!r}")
        return components

    def __repr__(self) -> str:
        return f"<Debug enabled={self.enabled} active={sorted(self.active)}>"


def enable_everywhere(*components: str) -> None:
    """Turn components on in every module-level ``debug`` instance."""
    import enigma_machine
    import keyboard_and_plugboard
    import rotor_and_reflector

    for module in (keyboard_and_plugboard, rotor_and_reflector, enigma_machine):
        module.debug.enable(*components)
