# archery_teams/cli.py
"""Command line entry point: read the three rosters, search, write the team report.

Usage:
    archery-teams                       # default files in the working directory
    archery-teams --patience 50000 --seed 7 --output teams.txt
"""
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from .config import build_config, configure_logging, ensure_sample_rosters, load_config_file
from .constants import LOG_LEVELS
from .export_pdf import render_pdf
from .io import load_rosters, save_teams_csv_bytes, teams_dataframe, write_report
from .scheduler import schedule_teams
from .validation import PreconditionError, RosterInputError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 2
EXIT_OUTPUT_ERROR = 3


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Build evenly matched Compound/Recurve/Barebow teams from qualification scores",
    )
    ap.add_argument("--compound", dest="compound_file", help="Compound archers roster (default: compound_archers.txt)")
    ap.add_argument("--recurve", dest="recurve_file", help="Recurve archers roster (default: recurve_archers.txt)")
    ap.add_argument("--barebow", dest="barebow_file", help="Barebow archers roster (default: barebow_archers.txt)")
    ap.add_argument("--output", dest="output_file", help="Team report to write (default: generated_teams.txt)")
    ap.add_argument("--csv", default=None, help="Also write the teams as CSV to this path")
    ap.add_argument("--pdf", default=None, help="Also write the teams as a PDF table to this path")
    ap.add_argument("--patience", type=int, default=None, help="Non-improving trials before the search stops (default: 2000000)")
    ap.add_argument("--seed", dest="random_seed", type=int, default=None, help="Random seed for reproducible teams")
    ap.add_argument("--config", default=None, help="YAML file with settings; flags override it")
    ap.add_argument("--log-level", dest="log_level", default=None, choices=LOG_LEVELS, help="Logging level (default: INFO)")
    ap.add_argument("--write-samples", metavar="DIR", default=None, help="Write sample roster files to DIR and exit")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    overrides = {
        "compound_file": args.compound_file,
        "recurve_file": args.recurve_file,
        "barebow_file": args.barebow_file,
        "output_file": args.output_file,
        "patience": args.patience,
        "random_seed": args.random_seed,
        "log_level": args.log_level,
    }
    try:
        config = load_config_file(args.config, overrides) if args.config else build_config(overrides=overrides)
    except (OSError, ValueError, ValidationError) as e:
        configure_logging(args.log_level or "INFO")
        logger.error("Invalid configuration: %s", e)
        return EXIT_INPUT_ERROR
    configure_logging(config.log_level)

    if args.write_samples:
        for cat, path in ensure_sample_rosters(args.write_samples).items():
            logger.info("Sample %s roster: %s", cat, path)
        return EXIT_OK

    try:
        rosters = load_rosters(config)
        result = schedule_teams(rosters, config)
    except (RosterInputError, PreconditionError) as e:
        logger.error("%s", e)
        return EXIT_INPUT_ERROR

    try:
        write_report(config.output_file, result.teams)
        if args.csv:
            with open(args.csv, "wb") as f:
                f.write(save_teams_csv_bytes(result.teams))
            logger.info("Wrote CSV to %s", args.csv)
        if args.pdf:
            with open(args.pdf, "wb") as f:
                f.write(render_pdf("Mixed Team Draw", teams_dataframe(result.teams), score=result.score))
            logger.info("Wrote PDF to %s", args.pdf)
    except OSError as e:
        logger.error("Cannot write output: %s", e)
        return EXIT_OUTPUT_ERROR
    return EXIT_OK
