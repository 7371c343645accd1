from dataclasses import (
    dataclass,
    field,
)

from calculations import (
    macro_percentages,
    round_half_up,
)
from errors import (
    DegenerateProposalError,
)


@dataclass
class MixResult:
    """A solved proposal converted to kitchen units.

    Attributes
    ----------
    grams : dict[str, int]
        Grams of each ingredient, sorted by name.
    kcal : int
        Target kcal the grams were scaled to.
    carb, fat, protein : float
        Macro grams contained in ``grams``.
    """

    grams: dict[str, int] = field(default_factory=dict)
    kcal: int = 0
    carb: float = 0.0
    fat: float = 0.0
    protein: float = 0.0

    @property
    def percentages(self) -> tuple[float, float, float]:
        """Carb/fat/protein share of their sum, in percent."""
        return macro_percentages(self.carb, self.fat, self.protein)


def project_proposal(
    proposal,
    target,
    catalog,
) -> MixResult:
    """Convert piece counts to grams and recompute the macros.

    Parameters
    ----------
    proposal : Proposal
        Solved piece counts.
    target : Target
        Supplies the kcal the pieces are scaled to.
    catalog : IngredientCatalog
        Supplies grams/kcal of each ingredient.

    Returns
    -------
    MixResult
        Gram amounts rounded to whole grams, and the macros they contain.
    """
    total_pieces = proposal.kcal()
    if total_pieces == 0:
        raise DegenerateProposalError(
            "Cannot convert a proposal without any pieces to grams"
        )
    kcal_per_piece = target.kcal / total_pieces

    result = MixResult(kcal=target.kcal)
    for name, pieces in proposal.items():
        ingredient = catalog.raw[name]
        ingredient_kcal = pieces * kcal_per_piece
        result.grams[name] = round_half_up(ingredient_kcal * ingredient.grams_per_kcal)

    # Macros come from the rounded grams
    for name, grams in result.grams.items():
        ingredient = catalog.raw[name]
        factor = grams / ingredient.g
        result.carb += factor * ingredient.carb
        result.fat += factor * ingredient.fat
        result.protein += factor * ingredient.protein
    return result
