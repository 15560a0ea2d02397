"""
Capability contracts for reconnaissance units.

VisualRecon   - camera payload (constant, abstract, default and static members)
SignalIntel   - radio interception
AdvancedRecon - both of the above, nothing added
"""
from abc import ABC, ABCMeta, abstractmethod
from typing import Final, Tuple

SENSOR_TYPE: Final = "High-Resolution Optical Camera"
STANDARD_LENS_TYPE: Final = "50mm Standard Lens"

DEFAULT_VIDEO_MESSAGE: Final = "Recording 4K video using default settings."


def standard_lens_type() -> str:
    """Contract-level utility; needs no unit instance."""
    return STANDARD_LENS_TYPE


def default_record_4k_video(emit) -> None:
    """Default 4K recording behaviour. Implementers may delegate here or bypass it."""
    emit(DEFAULT_VIDEO_MESSAGE)

# --- Contracts ---

# Shared constants: fixed on the contract and every implementing class
CONTRACT_CONSTANTS = ("SENSOR_TYPE",)


class ContractMeta(ABCMeta):
    """ABCMeta that refuses to rebind or delete contract constants."""

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)
        for const in CONTRACT_CONSTANTS:
            if const in namespace and any(hasattr(base, const) for base in bases):
                raise TypeError(f"{name} cannot redefine contract constant {const}")

    def __setattr__(cls, name, value):
        if name in CONTRACT_CONSTANTS:
            raise AttributeError(f"{cls.__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(cls, name):
        if name in CONTRACT_CONSTANTS:
            raise AttributeError(f"{cls.__name__}.{name} is read-only")
        super().__delattr__(name)


class VisualRecon(ABC, metaclass=ContractMeta):
    """
    Interface for units carrying an optical camera.
    Implementers provide emit(line); the default record_4k_video narrates through it.
    """
    __slots__ = ()

    SENSOR_TYPE: Final = SENSOR_TYPE

    @abstractmethod
    def take_picture(self) -> None:
        """Capture a still image"""
        pass

    def record_4k_video(self) -> None:
        """Record video with default settings (override for custom rigs)"""
        default_record_4k_video(self.emit)

    @staticmethod
    def standard_lens_type() -> str:
        return standard_lens_type()


class SignalIntel(ABC, metaclass=ContractMeta):
    """Interface for units able to intercept radio traffic"""
    __slots__ = ()

    @abstractmethod
    def intercept_signal(self) -> None:
        pass


class AdvancedRecon(VisualRecon, SignalIntel):
    """Visual + signal reconnaissance. Aggregates both contracts."""
    __slots__ = ()

# --- Introspection ---

_CONTRACTS = (
    ("VisualRecon", VisualRecon),
    ("SignalIntel", SignalIntel),
    ("AdvancedRecon", AdvancedRecon),
)

# Mission action -> contract the unit must satisfy (None = any drone)
ACTION_REQUIREMENTS = {
    "take_off": None,
    "fly": None,
    "land": None,
    "take_picture": VisualRecon,
    "record_4k_video": VisualRecon,
    "intercept_signal": SignalIntel,
}

# Actions that run against the contract namespace or the narration, not a unit
UNIT_FREE_ACTIONS = ("announce", "standard_lens_type")


def capabilities_of(unit) -> Tuple[str, ...]:
    """Names of the contracts a unit (or unit class) satisfies."""
    cls = unit if isinstance(unit, type) else type(unit)
    return tuple(name for name, contract in _CONTRACTS if issubclass(cls, contract))


def supports(unit, action: str) -> bool:
    """Check whether a unit can perform a named mission action."""
    if action in UNIT_FREE_ACTIONS:
        return True
    if action not in ACTION_REQUIREMENTS:
        return False
    contract = ACTION_REQUIREMENTS[action]
    return contract is None or isinstance(unit, contract)
