"""Pure scoring utilities for mixes and proposals.

Contains the piece-weighted macro blend, the squared-error cost used by the
optimizer, and small numeric helpers shared by constraint resolution and the
gram projection.

Exports
-------
round_half_up
blend
evaluate
evaluate_with_addition
macro_percentages

Notes
-----
All functions are side-effect free; inputs are treated as read-only.
"""

import math

from models.ingredient import (
    NormalizedIngredient,
)


def round_half_up(
    value: float,
) -> int:
    """Round a non-negative value to the nearest int, halves away from zero.

    Python's ``round`` rounds halves to even, which would make ``2.5`` pieces
    become 2 but ``3.5`` become 4. Values just below a half,
    such as ``0.49999999999999994``, round down.
    """
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    return int(whole)


def blend(
    counts,
    normalized,
    added: str | None = None,
) -> NormalizedIngredient | None:
    """Piece-weighted average of normalized macros.

    Parameters
    ----------
    counts : Mapping[str, int]
        Piece count per ingredient name.
    normalized : Mapping[str, NormalizedIngredient]
        Per-kcal macros for every name in ``counts`` (and ``added``).
    added : str or None
        Name that gets one extra piece for this computation only.

    Returns
    -------
    NormalizedIngredient | None
        The blended densities, or ``None`` when there are no pieces.
    """
    carb = fat = protein = 0.0
    pieces = 0

    def _accumulate(name, count):
        nonlocal carb, fat, protein, pieces
        macros = normalized[name]
        carb += count * macros.carb
        fat += count * macros.fat
        protein += count * macros.protein
        pieces += count

    for name, count in counts.items():
        if name == added:
            count += 1
        if count:
            _accumulate(name, count)
    if added is not None and added not in counts:
        _accumulate(added, 1)

    if pieces == 0:
        return None
    return NormalizedIngredient(
        carb=carb / pieces,
        fat=fat / pieces,
        protein=protein / pieces,
    )


def _cost_of_mix(
    target,
    mix: NormalizedIngredient | None,
) -> float:
    # Unevaluable mixes rank last instead of poisoning comparisons with NaN
    if mix is None:
        return math.inf
    ratios = mix.ratios()
    if ratios is None:
        return math.inf
    return target.squared_error(ratios)


def evaluate(
    target,
    proposal,
    catalog,
) -> float:
    """Squared error between target ratios and the proposal's mix ratios.

    Parameters
    ----------
    target : NormalizedTarget
        Desired macro ratios.
    proposal : Proposal
        Candidate mixture in pieces.
    catalog : IngredientCatalog
        Source of normalized macros.

    Returns
    -------
    float
        ``>= 0``; lower is better. ``math.inf`` for a proposal without pieces
        or whose mix has no macros at all.
    """
    return _cost_of_mix(target, blend(proposal.counts, catalog.normalized))


def evaluate_with_addition(
    target,
    proposal,
    catalog,
    name: str,
) -> float:
    """Cost of ``proposal`` with one more piece of ``name``.

    Same result as evaluating ``proposal.with_added(name)``, in a single pass
    and without building the trial proposal.
    """
    return _cost_of_mix(
        target,
        blend(proposal.counts, catalog.normalized, added=name),
    )


def macro_percentages(
    carb: float,
    fat: float,
    protein: float,
) -> tuple[float, float, float]:
    """Share of each macro in percent of their sum (zeros when empty)."""
    total = carb + fat + protein
    if total <= 0:
        return 0.0, 0.0, 0.0
    return (
        100.0 * carb / total,
        100.0 * fat / total,
        100.0 * protein / total,
    )
