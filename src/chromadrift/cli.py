"""
Command-line entry point: run one painting and export the image.

    chromadrift --seed 3 --num-steps 200000 --output-dir output

A JSON file given with --config supplies the base parameters; any flag
given on the command line overrides it.
"""

from __future__ import annotations
import argparse
import json
import logging
import logging.handlers
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Sequence

from chromadrift.core.errors import ChromadriftError, ConfigError, ExportError
from chromadrift.core.integrator import Simulation, SimulationConfig
from chromadrift.render.export import render, output_path_for_seed

logger = logging.getLogger("chromadrift")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure the chromadrift logger with a console handler and,
    optionally, a rotating file handler.
    """
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        # Rotates at 1MB, keeps 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a JSON object of SimulationConfig fields."""
    try:
        with open(path, "r") as f:
            values = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found at {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Error decoding JSON from {path}: {exc}") from exc
    if not isinstance(values, dict):
        raise ConfigError(f"Configuration in {path} must be a JSON object")
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromadrift",
        description="Paint a canvas with colored particles drifting on a torus.",
    )
    parser.add_argument("--config", type=str, help="JSON file with simulation parameters")
    parser.add_argument("--num-particles", type=int)
    parser.add_argument("--num-perms", type=int, help="Pairing rounds per step")
    parser.add_argument("--num-steps", type=int)
    parser.add_argument("--size", type=int, help="Canvas side length in pixels")
    parser.add_argument("--g-const", type=float, help="Global force scale")
    parser.add_argument("--weight", type=float, help="Canvas drift per visit")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--record-interval", type=int, help="Record positions every N steps")
    parser.add_argument("--log-interval", type=int, help="Log progress every N steps")
    parser.add_argument("--output-dir", type=str, default=".", help="Where img-<seed>.png is written")
    parser.add_argument("--summary-plot", action="store_true",
                        help="Also save a canvas + trajectory figure")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument("--log-file", type=str, help="Optional rotating log file")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Merge --config file values with explicit flags."""
    values = load_config(args.config) if args.config else {}
    for f in fields(SimulationConfig):
        flag_value = getattr(args, f.name, None)
        if flag_value is not None:
            values[f.name] = flag_value
    return SimulationConfig.from_dict(values)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = config_from_args(args)
        simulation = Simulation(config)
        simulation.run()
        path = render(simulation, args.output_dir)

        if args.summary_plot:
            from chromadrift.viz.canvas import plot_run_summary, save_figure
            import matplotlib.pyplot as plt

            summary_path = output_path_for_seed(config.seed, args.output_dir).with_name(
                f"summary-{config.seed}.png"
            )
            fig = plot_run_summary(simulation)
            try:
                save_figure(fig, summary_path)
            except OSError as exc:
                raise ExportError(f"Could not write summary plot to {summary_path}: {exc}") from exc
            finally:
                plt.close(fig)
            logger.info("Saved summary plot to %s", summary_path)
    except ExportError as exc:
        logger.error("%s", exc)
        return 2
    except ChromadriftError as exc:
        logger.error("%s", exc)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
