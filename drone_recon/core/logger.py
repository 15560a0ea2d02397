"""
Mission logger with incremental log files
"""

import time
from pathlib import Path
from datetime import datetime

class MissionLogger:
    """Mission logger with timestamped log files and a per-mission index"""

    def __init__(self, log_dir: str = "logs", max_logs: int = 0, mission_id: str = "recon", echo: bool = False):
        """
        Initialize logger with log directory

        Args:
            log_dir: Directory to store log files
            max_logs: Maximum number of logs to keep (0 = unlimited)
            mission_id: Prefix for log and index file names
            echo: Also print log lines to the console
        """
        self.log_dir = Path(log_dir)
        self.max_logs = max_logs
        self.mission_id = mission_id
        self.echo = echo

        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        mission_number = self._get_next_mission_number()
        self.log_file = self.log_dir / f"{self.mission_id}_mission_{mission_number:04d}_{timestamp}.log"
        self.index_file = self.log_dir / f"{self.mission_id}_mission_index.txt"

        self._write_header()

        if self.max_logs > 0:
            self._cleanup_old_logs()

    def _existing_logs(self) -> list:
        return sorted(self.log_dir.glob(f"{self.mission_id}_mission_*.log"))

    def _get_next_mission_number(self) -> int:
        """Get the next sequential mission number"""
        log_files = self._existing_logs()
        if not log_files:
            return 1

        # "<mission_id>_mission_NNNN_<date>_<time>", counted from the right
        # so that mission ids containing underscores still parse
        try:
            return int(log_files[-1].stem.split('_')[-3]) + 1
        except (IndexError, ValueError):
            return 1

    def _write_header(self):
        """Write log file header with metadata"""
        header = f"""
{'='*70}
MISSION LOG ({self.mission_id})
{'='*70}
Log File: {self.log_file.name}
Start Time: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}
{'='*70}

"""
        with open(self.log_file, 'w') as f:
            f.write(header)

    def _cleanup_old_logs(self):
        """Remove old log files if we exceed max_logs"""
        log_files = self._existing_logs()
        if len(log_files) > self.max_logs:
            for old_log in log_files[:-self.max_logs]:
                old_log.unlink()

    def log(self, message: str, level: str = "info"):
        """Log a message with the specified level"""
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        log_line = f"[{timestamp}] [{level.upper()}] {message}"

        with open(self.log_file, "a") as f:
            f.write(log_line + "\n")

        if self.echo:
            colors = {
                'error': '\033[91m',    # Red
                'warning': '\033[93m',  # Yellow
                'info': '\033[0m',      # Default
                'debug': '\033[90m'     # Gray
            }
            reset = '\033[0m'
            color = colors.get(level, colors['info'])
            print(f"{color}{log_line}{reset}")

    def log_summary(self, summary_data: dict):
        """Log mission summary and update index"""
        self.log("="*70)
        self.log("MISSION SUMMARY")
        self.log("="*70)
        for key, value in summary_data.items():
            self.log(f"{key}: {value}")
        self.log("="*70)

        self._update_index(summary_data)

    def _update_index(self, summary_data: dict):
        """Update the mission index file"""
        index_line = (
            f"{datetime.now().strftime('%Y-%m-%d %H:%M:%S')} | "
            f"{self.log_file.name} | "
            f"Deployments: {summary_data.get('Deployments', 'N/A')} | "
            f"Steps: {summary_data.get('Steps executed', 'N/A')}\n"
        )

        if not self.index_file.exists():
            with open(self.index_file, 'w') as f:
                f.write(f"MISSION INDEX ({self.mission_id})\n")
                f.write("="*90 + "\n")
                f.write(f"{'Timestamp':<20} | {'Log File':<40} | {'Deployments':<14} | {'Steps':<8}\n")
                f.write("="*90 + "\n")

        with open(self.index_file, 'a') as f:
            f.write(index_line)

    def get_log_path(self) -> Path:
        """Get the current log file path"""
        return self.log_file
