"""Gram constraints resolved into optimizer pieces.

Converts the target's exact / at-least / at-most gram constraints into piece
counts on the same scale the optimizer searches in: ``target.kcal`` kcal map
to ``steps`` pieces.

Exports
-------
constraint_to_pieces
TargetConstraints
"""

import logging

from calculations import (
    round_half_up,
)
from constants import (
    CONSTRAINT_KINDS,
    CONSTRAINT_LABELS,
)
from errors import (
    ConstraintReferenceError,
)
from models.proposal import (
    Proposal,
)

logger = logging.getLogger(__name__)


def constraint_to_pieces(
    constraint,
    target,
    catalog,
    steps: int,
) -> int:
    """Pieces equivalent to a gram constraint.

    Parameters
    ----------
    constraint : TargetConstraint
        Ingredient name and grams.
    target : Target
        Supplies the total kcal the pieces are spread over.
    catalog : IngredientCatalog
        Supplies the ingredient's kcal density.
    steps : int
        Number of pieces ``target.kcal`` is split into.

    Returns
    -------
    int
        ``round(g * kcal_per_gram * steps / target.kcal)``.

    Raises
    ------
    ConstraintReferenceError
        If the ingredient is not in the catalog.
    """
    ingredient = catalog.get(constraint.name)
    if ingredient is None:
        raise ConstraintReferenceError(
            f"Unknown constraint ingredient {constraint.name!r}"
        )
    pieces_per_kcal = steps / target.kcal
    constraint_kcal = constraint.g * ingredient.kcal_per_gram
    return round_half_up(constraint_kcal * pieces_per_kcal)


class TargetConstraints:
    """Exact / at-least / at-most budgets in pieces.

    Parameters
    ----------
    exact, at_least, at_most : Proposal, optional
        Sparse proposals keyed by the constrained names. Default empty.
    """

    def __init__(
        self,
        exact: Proposal | None = None,
        at_least: Proposal | None = None,
        at_most: Proposal | None = None,
    ):
        self.exact = exact if exact is not None else Proposal()
        self.at_least = at_least if at_least is not None else Proposal()
        self.at_most = at_most if at_most is not None else Proposal()

    @classmethod
    def from_target(
        cls,
        target,
        catalog,
        steps: int,
    ) -> "TargetConstraints":
        """Resolve every constraint of ``target`` into pieces."""
        resolved = {}
        for kind in CONSTRAINT_KINDS:
            proposal = Proposal()
            for constraint in target.constraints_of(kind):
                pieces = constraint_to_pieces(constraint, target, catalog, steps)
                logger.info(
                    "Constraint %s %s %g g -> %d pieces",
                    CONSTRAINT_LABELS[kind],
                    constraint.name,
                    constraint.g,
                    pieces,
                )
                proposal.set(constraint.name, pieces)
            resolved[kind] = proposal
        return cls(
            exact=resolved["constraint_exact"],
            at_least=resolved["constraint_at_least"],
            at_most=resolved["constraint_at_most"],
        )

    def is_frozen(
        self,
        name: str,
    ) -> bool:
        """Exact-constrained ingredients never get extra pieces."""
        return name in self.exact

    def is_capped(
        self,
        name: str,
        current: int,
    ) -> bool:
        return name in self.at_most and current >= self.at_most[name]

    def __repr__(self):
        return (
            f"TargetConstraints(exact={self.exact!r}, "
            f"at_least={self.at_least!r}, at_most={self.at_most!r})"
        )
