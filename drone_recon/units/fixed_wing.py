"""
Fixed-wing drone - high altitude unit with visual and signal reconnaissance
"""

from ..core.drone import Drone
from ..core.capabilities import AdvancedRecon

class FixedWingDrone(Drone, AdvancedRecon):
    """
    Long-endurance fixed-wing platform.
    Satisfies VisualRecon and SignalIntel through AdvancedRecon and
    replaces the default 4K recording with its gimbal rig.
    """
    __slots__ = ()

    def fly(self) -> None:
        self.emit(f"{self.get_callsign()} is cruising at high altitude.")

    def take_picture(self) -> None:
        self.emit(f"{self.get_callsign()} captures high-resolution satellite imagery.")

    def intercept_signal(self) -> None:
        self.emit(f"{self.get_callsign()} intercepts and analyzes radio frequencies.")

    def record_4k_video(self) -> None:
        # Gimbal rig message carries no callsign
        self.emit("Engaging gimbal-stabilized 4K video recording.")

# Factory function for composition
def create_fixed_wing_drone(callsign: str, emit=print) -> FixedWingDrone:
    return FixedWingDrone(callsign, emit=emit)
