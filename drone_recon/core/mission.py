"""
Deployment mission - runs scripted unit deployments from validated settings.

Every unit is built and every step is checked against the unit's
capabilities before anything is emitted, so a bad script produces
no partial narration.
"""
from typing import List, Optional

from .drone import Drone, InvalidArgument
from .capabilities import VisualRecon, supports
from .config_models import Settings, DeploymentConfig, UnitConfig, MissionStep
from .logger import MissionLogger
from ..units import get_unit

LENS_TYPE_PREFIX = "Standard Lens Type: "


class DeploymentMission:
    """Executes each deployment in order against its unit."""

    def __init__(self, settings: Settings, emit=print, logger: Optional[MissionLogger] = None):
        self.settings = settings
        self.emit = emit
        self.logger = logger
        self.units: List[Drone] = self._build_units()

    def _log(self, message: str, level: str = "info"):
        if self.logger:
            self.logger.log(message, level)

    def _build_units(self) -> List[Drone]:
        """Construct all units and reject steps a unit cannot perform."""
        units = []
        for deployment in self.settings.deployments:
            unit_cfg = deployment.unit
            try:
                unit = get_unit(unit_cfg.type, unit_cfg.callsign, emit=self.emit)
                for step in deployment.steps:
                    if not supports(unit, step.action):
                        raise InvalidArgument(
                            f"{unit.get_callsign()} ({unit_cfg.type}) cannot perform '{step.action}'"
                        )
            except ValueError as e:
                self._log(f"Mission validation failed: {e}", "error")
                raise
            self._log(f"Validated {unit!r} with {len(deployment.steps)} step(s)")
            units.append(unit)
        return units

    def _execute(self, unit: Drone, step: MissionStep):
        if step.action == "announce":
            self.emit(step.text)
        elif step.action == "standard_lens_type":
            # Contract-level utility, called on the contract not the unit
            self.emit(LENS_TYPE_PREFIX + VisualRecon.standard_lens_type())
        else:
            getattr(unit, step.action)()
        self._log(f"{unit.get_callsign()}: {step.action}", "debug")

    def run(self) -> dict:
        """Run every deployment and return the mission summary."""
        steps_executed = 0
        for deployment, unit in zip(self.settings.deployments, self.units):
            self._log(f"Deploying {unit!r}")
            for step in deployment.steps:
                self._execute(unit, step)
                steps_executed += 1

        summary = {
            "Deployments": len(self.units),
            "Units": ", ".join(unit.get_callsign() for unit in self.units),
            "Steps executed": steps_executed,
        }
        if self.logger:
            self.logger.log_summary(summary)
        return summary


def _steps(*actions) -> List[MissionStep]:
    steps = []
    for action in actions:
        if isinstance(action, tuple):
            steps.append(MissionStep(action=action[0], text=action[1]))
        else:
            steps.append(MissionStep(action=action))
    return steps


def default_settings() -> Settings:
    """The standard two-unit recon demonstration (Bravo-1, Phoenix-7)."""
    return Settings(
        deployments=[
            DeploymentConfig(
                unit=UnitConfig(type="quadcopter", callsign="Bravo-1"),
                steps=_steps(
                    ("announce", "--- Deploying QuadCopter Unit ---"),
                    "take_off",
                    "fly",
                    ("announce", "\n--- Engaging Recon Capabilities ---"),
                    "take_picture",
                    "record_4k_video",
                    "standard_lens_type",
                    "land",
                ),
            ),
            DeploymentConfig(
                unit=UnitConfig(type="fixed_wing", callsign="Phoenix-7"),
                steps=_steps(
                    ("announce", "\n\n--- Deploying Advanced Fixed-Wing Unit ---"),
                    "take_off",
                    "fly",
                    "take_picture",
                    "intercept_signal",
                    "record_4k_video",
                    "land",
                ),
            ),
        ]
    )
