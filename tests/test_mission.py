"""
Test the deployment mission, including the full two-unit recon narration.
"""
import pytest

from drone_recon.core.config_models import Settings, DeploymentConfig, UnitConfig, MissionStep
from drone_recon.core.drone import InvalidArgument
from drone_recon.core.logger import MissionLogger
from drone_recon.core.mission import DeploymentMission, default_settings

EXPECTED_NARRATION = """\
--- Deploying QuadCopter Unit ---
Bravo-1 is taking off.
Bravo-1 is hovering with four rotors.

--- Engaging Recon Capabilities ---
Bravo-1 takes a picture with its High-Resolution Optical Camera
Recording 4K video using default settings.
Standard Lens Type: 50mm Standard Lens
Bravo-1 is landing.


--- Deploying Advanced Fixed-Wing Unit ---
Phoenix-7 is taking off.
Phoenix-7 is cruising at high altitude.
Phoenix-7 captures high-resolution satellite imagery.
Phoenix-7 intercepts and analyzes radio frequencies.
Engaging gimbal-stabilized 4K video recording.
Phoenix-7 is landing.
"""


def _deployment(unit_type, callsign, *actions):
    return DeploymentConfig(
        unit=UnitConfig(type=unit_type, callsign=callsign),
        steps=[MissionStep(action=a) for a in actions],
    )


def test_default_mission_narration(capsys):
    DeploymentMission(default_settings()).run()
    out = capsys.readouterr().out
    assert out == EXPECTED_NARRATION
    assert len([line for line in out.splitlines() if line]) == 15


def test_default_mission_with_collected_lines():
    lines = []
    DeploymentMission(default_settings(), emit=lines.append).run()
    assert "\n".join(lines) + "\n" == EXPECTED_NARRATION


def test_run_returns_summary():
    summary = DeploymentMission(default_settings(), emit=lambda line: None).run()
    assert summary == {
        "Deployments": 2,
        "Units": "Bravo-1, Phoenix-7",
        "Steps executed": 15,
    }


def test_unsupported_step_rejected_before_output(capsys):
    settings = Settings(deployments=[
        _deployment("fixed_wing", "Phoenix-7", "take_off", "land"),
        _deployment("quadcopter", "Bravo-1", "take_off", "intercept_signal"),
    ])
    with pytest.raises(InvalidArgument, match="intercept_signal"):
        DeploymentMission(settings)
    assert capsys.readouterr().out == ""


def test_empty_callsign_rejected():
    settings = Settings(deployments=[_deployment("quadcopter", "", "take_off")])
    with pytest.raises(InvalidArgument):
        DeploymentMission(settings)


def test_lens_type_step_needs_no_visual_unit():
    """The lens utility step is called on the contract, not the unit"""
    lines = []
    settings = Settings(deployments=[_deployment("quadcopter", "Bravo-1", "standard_lens_type")])
    DeploymentMission(settings, emit=lines.append).run()
    assert lines == ["Standard Lens Type: 50mm Standard Lens"]


def test_mission_writes_log(tmp_path):
    logger = MissionLogger(log_dir=str(tmp_path), mission_id="test")
    DeploymentMission(default_settings(), emit=lambda line: None, logger=logger).run()
    text = logger.get_log_path().read_text()
    assert "[INFO] Validated <QuadCopter callsign='Bravo-1'> with 8 step(s)" in text
    assert "[DEBUG] Phoenix-7: intercept_signal" in text
    assert "Steps executed: 15" in text
    index = (tmp_path / "test_mission_index.txt").read_text()
    assert "Deployments: 2" in index


def test_failed_validation_is_logged(tmp_path):
    logger = MissionLogger(log_dir=str(tmp_path), mission_id="bad")
    settings = Settings(deployments=[_deployment("quadcopter", "Bravo-1", "intercept_signal")])
    with pytest.raises(InvalidArgument):
        DeploymentMission(settings, logger=logger)
    assert "[ERROR] Mission validation failed" in logger.get_log_path().read_text()
