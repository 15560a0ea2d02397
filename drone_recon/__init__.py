"""
drone_recon - reconnaissance drone units composed from capability contracts.
"""

from .core.drone import Drone, InvalidArgument
from .core.capabilities import (
    SENSOR_TYPE, VisualRecon, SignalIntel, AdvancedRecon,
    standard_lens_type, capabilities_of,
)
from .units import QuadCopter, FixedWingDrone, get_unit, list_available_units

__version__ = "0.3.0"
