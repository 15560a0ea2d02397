"""
Pydantic models for validating the mission_config.yaml file.
"""
from typing import List, Literal
from pydantic import BaseModel, Field, field_validator

from ..units import list_available_units

# --- Logging ---

class LoggingConfig(BaseModel):
    enabled: bool = True
    log_dir: str = "logs"
    max_logs: int = 50
    echo: bool = False  # Mirror log lines to the console

# --- Units ---

class UnitConfig(BaseModel):
    type: str  # Any name in the unit registry
    callsign: str

    @field_validator("type")
    @classmethod
    def _registered_type(cls, value: str) -> str:
        if value not in list_available_units():
            raise ValueError(f"Unknown unit type: {value}")
        return value

# --- Mission Script ---

class MissionStep(BaseModel):
    """One scripted action. 'announce' emits text verbatim."""
    action: Literal[
        "announce",
        "take_off",
        "fly",
        "take_picture",
        "record_4k_video",
        "intercept_signal",
        "standard_lens_type",
        "land",
    ]
    text: str = ""

class DeploymentConfig(BaseModel):
    unit: UnitConfig
    steps: List[MissionStep] = Field(default_factory=list)

# --- Top-Level Settings Model ---

class Settings(BaseModel):
    """The root model for the entire mission_config.yaml."""
    mission_id: str = "recon"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    deployments: List[DeploymentConfig]
