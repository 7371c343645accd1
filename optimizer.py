"""Greedy piece-by-piece search for the best mix.

Starts from the constraint baseline and hands out the remaining pieces one
at a time, each to the ingredient whose extra piece lowers the cost most.

Exports
-------
optimize
"""

import logging
import math

from calculations import (
    evaluate_with_addition,
)
from errors import (
    ConstraintReferenceError,
    OverBudgetError,
    SearchStarvedError,
)
from models.proposal import (
    Proposal,
)

logger = logging.getLogger(__name__)

# Debug progress line every this many committed pieces
_PROGRESS_EVERY = 250


def _baseline(
    constraints,
    catalog,
) -> tuple[Proposal, int]:
    """Zero proposal overlaid with at-least, then exact, piece counts.

    Returns
    -------
    tuple[Proposal, int]
        The baseline and the assigned pieces. Every budget entry is counted,
        so an ingredient named in both budgets counts twice while its
        proposal count holds the exact value.
    """
    proposal = catalog.empty_proposal()
    assigned_pieces = 0
    for kind, budget in (("at least", constraints.at_least), ("exact", constraints.exact)):
        for name, pieces in budget.items():
            if name not in catalog:
                raise ConstraintReferenceError(
                    f"Unknown constraint ingredient {name!r} ({kind})"
                )
            proposal.set(name, pieces)
            assigned_pieces += pieces
    return proposal, assigned_pieces


def _choose_next_piece(
    target,
    proposal: Proposal,
    constraints,
    catalog,
) -> tuple[str | None, float]:
    """Pick the ingredient whose extra piece gives the lowest cost.

    Candidates are scored in catalog (name) order; a later candidate only
    wins with a strictly lower cost.

    Returns
    -------
    tuple[str | None, float]
        Best name and its cost; ``(None, inf)`` if nothing is eligible.
    """
    best_name = None
    best_cost = math.inf
    for name in catalog:
        if constraints.is_frozen(name):
            continue
        if constraints.is_capped(name, proposal[name]):
            continue
        cost = evaluate_with_addition(target, proposal, catalog, name)
        if best_name is None or cost < best_cost:
            best_name = name
            best_cost = cost
    return best_name, best_cost


def optimize(
    target,
    constraints,
    catalog,
    steps: int,
) -> Proposal:
    """Distribute ``steps`` pieces over the catalog to match ``target``.

    Parameters
    ----------
    target : NormalizedTarget
        Desired macro ratios.
    constraints : TargetConstraints
        Piece budgets; ``exact`` entries are frozen, ``at_most`` entries are
        ceilings, ``at_least`` entries seed the baseline.
    catalog : IngredientCatalog
        Ingredients to mix.
    steps : int
        Total number of pieces in the result.

    Returns
    -------
    Proposal
        Piece count for every catalog name. Holds ``steps`` pieces unless an
        ingredient appears in both ``at_least`` and ``exact``; the overlap is
        assigned but not placed.

    Raises
    ------
    OverBudgetError
        If the ``at_least`` and ``exact`` budgets together hold more than
        ``steps`` pieces. No search is attempted.
    SearchStarvedError
        If at some point every ingredient is frozen or capped.
    """
    proposal, assigned_pieces = _baseline(constraints, catalog)
    if assigned_pieces > steps:
        raise OverBudgetError(
            f"Constraints do not fit into target kcal: {assigned_pieces} "
            f"pieces assigned, {steps} available"
        )

    remaining = steps - assigned_pieces
    logger.info(
        "Searching %d pieces over %d ingredients (%d preassigned)",
        remaining,
        len(catalog),
        assigned_pieces,
    )

    for step in range(remaining):
        name, cost = _choose_next_piece(target, proposal, constraints, catalog)
        if name is None:
            raise SearchStarvedError(
                "No best ingredient selected because constraints can't be "
                f"fulfilled ({step} of {remaining} pieces placed)"
            )
        proposal.add(name)
        if (step + 1) % _PROGRESS_EVERY == 0:
            logger.debug("Step %d/%d: +%s cost=%.6g", step + 1, remaining, name, cost)

    return proposal
