"""
Unit registry and factory (composition-based)
"""

# Registry of available unit types
_UNITS = {}

def register_unit(name: str, unit_factory):
    """Register a unit factory. The name becomes a valid unit type in mission configs."""
    _UNITS[name] = unit_factory

def get_unit(name: str, callsign: str, emit=print):
    """Build a unit by type name - passes callsign and emitter to factory"""
    if name not in _UNITS:
        raise ValueError(f"Unknown unit type: {name}")
    return _UNITS[name](callsign, emit=emit)

def list_available_units():
    """List all registered unit types"""
    return list(_UNITS.keys())

# Auto-register units using factory functions
from .quadcopter import QuadCopter, create_quadcopter
from .fixed_wing import FixedWingDrone, create_fixed_wing_drone

register_unit('quadcopter', create_quadcopter)
register_unit('fixed_wing', create_fixed_wing_drone)
