"""Entry point for the Double Pendulum application.

Animates a two-link hinged pendulum integrated with fixed-step RK4 and
draws the recent tip positions as a trail.
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from app_window import AppWindow
from config import GRAVITY_PRESETS, PRECISIONS, ConfigError, SimulationConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Animate a double pendulum integrated with fixed-step RK4.",
    )
    parser.add_argument(
        "--gravity",
        choices=sorted(GRAVITY_PRESETS),
        default="earth",
        help="Gravity preset (default: earth, 9.78 m/s^2)",
    )
    parser.add_argument(
        "--precision",
        choices=list(PRECISIONS),
        default="float64",
        help="Floating point precision of the integration (default: float64)",
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=0.01,
        help="Integration time step in seconds (default: 0.01)",
    )
    parser.add_argument(
        "--trail",
        type=int,
        default=1024,
        help="Number of tip positions kept in the trail (default: 1024)",
    )
    parser.add_argument(
        "--twin",
        type=float,
        default=0.0,
        metavar="OFFSET",
        help="Also animate a twin whose first angle differs by OFFSET rad",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def config_from_args(args) -> SimulationConfig:
    """Build and validate a SimulationConfig from parsed arguments."""
    config = SimulationConfig(
        dt=args.dt,
        trail_capacity=args.trail,
        precision=args.precision,
        twin_offset=args.twin,
    ).with_gravity(args.gravity)
    config.validate()
    return config


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ConfigError as exc:
        parser.error(str(exc))

    app = QApplication(sys.argv[:1])
    window = AppWindow(config)
    window.show()
    logger.info("Started with %s", config)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
