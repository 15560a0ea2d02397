"""
Drone entity base shared by every reconnaissance unit.
Concrete units supply their own flight pattern; take-off and landing are common.
"""

from abc import ABC, abstractmethod
from typing import Callable

# --- Errors ---

class InvalidArgument(ValueError):
    """Raised when a unit or mission is built from invalid input."""

# --- Drone Base Class ---

Emitter = Callable[[str], None]

class Drone(ABC):
    """
    Abstract drone.
    Holds the callsign and narrates shared behaviour through an emitter
    (print by default, so every action is one line on stdout).
    """
    __slots__ = ("_callsign", "_emit")

    def __init__(self, callsign: str, emit: Emitter = print):
        if not isinstance(callsign, str) or not callsign.strip():
            raise InvalidArgument(f"Callsign must be a non-empty string, got {callsign!r}")
        self._callsign = callsign
        self._emit = emit

    @property
    def callsign(self) -> str:
        return self._callsign

    def get_callsign(self) -> str:
        """Return the callsign assigned at construction."""
        return self._callsign

    def emit(self, line: str) -> None:
        """Narrate one line through this unit's emitter."""
        self._emit(line)

    def take_off(self) -> None:
        # All drones take off the same way
        self.emit(f"{self._callsign} is taking off.")

    def land(self) -> None:
        self.emit(f"{self._callsign} is landing.")

    @abstractmethod
    def fly(self) -> None:
        """Describe this unit's flight pattern."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} callsign={self._callsign!r}>"
