"""Command-line interface for the macro mixer.

Wires together loading the target and ingredient documents, resolving
constraints, running the greedy search, and printing the result.

Exports
-------
solve
cmd_mix
main

Notes
-----
Use ``python main.py target.toml ingredient0.toml ...`` (or the installed
``natural-bodybuilder`` script) to run from the shell.
"""

import logging
import sys

import yaml

from calculations import (
    evaluate,
)
from config import (
    load_config,
)
from constraints import (
    TargetConstraints,
)
from errors import (
    MixerError,
)
from interface.cli import (
    build_parser,
)
from interface.loader import (
    load_catalog,
    load_target,
)
from interface.render import (
    display_inputs,
    display_proposal,
    display_result,
)
from logs.logging_utils import (
    setup_logging,
)
from models.result import (
    project_proposal,
)
from optimizer import (
    optimize,
)

logger = logging.getLogger(__name__)


def solve(
    target,
    catalog,
    steps: int,
):
    """Resolve constraints and run the search for one target.

    Parameters
    ----------
    target : Target
        Loaded target.
    catalog : IngredientCatalog
        Loaded ingredients.
    steps : int
        Pieces the target kcal is split into.

    Returns
    -------
    tuple[Proposal, float]
        Winning proposal and its cost.
    """
    normalized_target = target.normalize()
    constraints = TargetConstraints.from_target(target, catalog, steps)
    proposal = optimize(normalized_target, constraints, catalog, steps)
    cost = evaluate(normalized_target, proposal, catalog)
    logger.info("Search finished with cost %.6g", cost)
    return proposal, cost


def cmd_mix(
    args,
    config,
) -> None:
    """Load the documents named on the command line, solve, and print.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed CLI arguments; ``files[0]`` is the target.
    config : Config
        Loaded settings.

    Raises
    ------
    MixerError
        On any configuration, constraint or feasibility problem.
    """
    target_path, *ingredient_paths = args.files
    target = load_target(target_path)
    catalog = load_catalog(ingredient_paths)

    steps = args.steps if args.steps is not None else config.optimizer.steps
    if config.display.show_inputs:
        display_inputs(target, catalog)

    proposal, cost = solve(target, catalog, steps)
    display_proposal(proposal, cost, config.display.cost_precision)
    display_result(project_proposal(proposal, target, catalog))


def main(
    argv=None,
) -> int:
    """CLI entry point.

    Parses args, configures logging, and runs the mixer. With fewer than two
    file arguments the usage line is printed and nothing else happens.

    Returns
    -------
    int
        Process exit status: 0 on success or usage, 1 on any error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.files) < 2:
        parser.print_usage()
        return 0
    if args.steps is not None and args.steps < 1:
        parser.error("--steps must be >= 1")

    try:
        setup_logging(args.verbose, args.log_file)
    except OSError as exc:
        print(f"error: cannot open log file: {exc}", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.debug("Settings rejected", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        cmd_mix(args, config)
    except MixerError as exc:
        logger.debug("Run aborted by %s", type(exc).__name__, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
