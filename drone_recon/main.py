"""
Main entry point for a recon deployment run.

Loads the deployment script, validates every unit and step, then
narrates the mission on stdout.

Usage:
    drone-recon
    drone-recon --config my_mission.yaml --log-dir /tmp/recon_logs
    drone-recon --no-log
    drone-recon --list-units
"""

import sys
import yaml
import argparse
from pathlib import Path
from pydantic import ValidationError

from .core.config_models import Settings
from .core.logger import MissionLogger
from .core.mission import DeploymentMission
from .units import list_available_units

DEFAULT_CONFIG = Path(__file__).resolve().parent / "config" / "mission_config.yaml"


def load_config(config_path=DEFAULT_CONFIG) -> Settings:
    """Load and validate configuration."""
    with open(config_path, 'r') as f:
        config_data = yaml.safe_load(f)
    return Settings(**(config_data or {}))


def create_logger(settings: Settings, log_dir: str = None, enabled: bool = True):
    """Create the mission logger, or None when logging is off."""
    log_cfg = settings.logging
    if not (enabled and log_cfg.enabled):
        return None
    return MissionLogger(
        log_dir=log_dir or log_cfg.log_dir,
        max_logs=log_cfg.max_logs,
        mission_id=settings.mission_id,
        echo=log_cfg.echo,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recon drone deployment")
    parser.add_argument(
        '--config',
        type=str,
        default=str(DEFAULT_CONFIG),
        help="Path to the deployment YAML (default: bundled mission_config.yaml)"
    )
    parser.add_argument('--log-dir', type=str, default=None, help="Override logging.log_dir")
    parser.add_argument('--no-log', action='store_true', help="Do not write a mission log")
    parser.add_argument('--list-units', action='store_true', help="List unit types and exit")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_units:
        for name in list_available_units():
            print(name)
        return 0

    try:
        settings = load_config(args.config)
    except FileNotFoundError:
        print(f"FATAL: Configuration file not found at {args.config}", file=sys.stderr)
        return 1
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        print(f"FATAL: Error validating configuration file {args.config}:\n{e}", file=sys.stderr)
        return 1

    logger = create_logger(settings, log_dir=args.log_dir, enabled=not args.no_log)

    try:
        mission = DeploymentMission(settings, logger=logger)
    except ValueError as e:
        print(f"FATAL: Invalid mission: {e}", file=sys.stderr)
        return 1

    mission.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
