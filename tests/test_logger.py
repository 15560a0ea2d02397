"""
Test the mission logger's files, numbering, index and cleanup.
"""
from drone_recon.core.logger import MissionLogger


def test_header_and_levels(tmp_path):
    logger = MissionLogger(log_dir=str(tmp_path / "logs"), mission_id="recon")
    logger.log("Deploying Bravo-1")
    logger.log("Low battery", "warning")
    text = logger.get_log_path().read_text()
    assert "MISSION LOG (recon)" in text
    assert "[INFO] Deploying Bravo-1" in text
    assert "[WARNING] Low battery" in text


def test_mission_numbers_increment(tmp_path):
    first = MissionLogger(log_dir=str(tmp_path), mission_id="alpha_team")
    second = MissionLogger(log_dir=str(tmp_path), mission_id="alpha_team")
    assert "_mission_0001_" in first.get_log_path().name
    assert "_mission_0002_" in second.get_log_path().name


def test_old_logs_are_pruned(tmp_path):
    for _ in range(4):
        MissionLogger(log_dir=str(tmp_path), max_logs=2, mission_id="recon")
    assert len(list(tmp_path.glob("recon_mission_*.log"))) == 2


def test_summary_updates_index(tmp_path):
    logger = MissionLogger(log_dir=str(tmp_path), mission_id="recon")
    logger.log_summary({"Deployments": 2, "Steps executed": 15})
    logger.log_summary({"Deployments": 1, "Steps executed": 3})
    index = (tmp_path / "recon_mission_index.txt").read_text().splitlines()
    assert index[0] == "MISSION INDEX (recon)"
    assert "Deployments: 2 | Steps: 15" in index[-2]
    assert "Deployments: 1 | Steps: 3" in index[-1]
    assert "Steps executed: 15" in logger.get_log_path().read_text()


def test_echo_prints_to_console(tmp_path, capsys):
    quiet = MissionLogger(log_dir=str(tmp_path), mission_id="quiet")
    quiet.log("silent")
    assert capsys.readouterr().out == ""
    loud = MissionLogger(log_dir=str(tmp_path), mission_id="loud", echo=True)
    loud.log("Landing", "error")
    assert "[ERROR] Landing" in capsys.readouterr().out
