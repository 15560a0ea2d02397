"""
QuadCopter - short-range hovering unit with an optical camera
"""

from ..core.drone import Drone
from ..core.capabilities import VisualRecon

class QuadCopter(Drone, VisualRecon):
    """Four-rotor drone. Uses the default 4K recording behaviour."""
    __slots__ = ()

    def fly(self) -> None:
        self.emit(f"{self.get_callsign()} is hovering with four rotors.")

    def take_picture(self) -> None:
        self.emit(f"{self.get_callsign()} takes a picture with its {self.SENSOR_TYPE}")

# Factory function for composition
def create_quadcopter(callsign: str, emit=print) -> QuadCopter:
    return QuadCopter(callsign, emit=emit)
