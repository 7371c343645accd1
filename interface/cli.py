"""Command-line argument builder (parser only)."""

import argparse

from constants import (
    PROGRAM_NAME,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser taking a target document followed by ingredient documents,
        plus global options (verbosity, config, step count, log file).
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=(
            "Mix ingredients to hit a kcal target with a given "
            "carb:fat:protein ratio"
        ),
    )
    # Target first, then one or more ingredients; the count is checked by
    # the caller so too few files print usage instead of failing
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="target document followed by ingredient documents "
        "(.toml, .yml/.yaml or .json)",
    )
    # Global -v/--verbose (counting flag)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v for INFO, -vv for DEBUG",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="YAML settings file (defaults to config.default.yml)",
    )
    # Overrides optimizer.steps from the config
    parser.add_argument(
        "-s",
        "--steps",
        type=int,
        default=None,
        help="number of pieces the target kcal is split into",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="also write log records to this file",
    )

    return parser
