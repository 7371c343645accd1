from calculations import (
    round_half_up,
)
from constants import (
    CONSTRAINT_KINDS,
    CONSTRAINT_LABELS,
    MACROS,
)


def _fmt_ratio(
    values,
) -> str:
    return ", ".join(
        f"{label} {value:.4f}"
        for label, value in zip(MACROS, values)
    )


def _fmt_constraints(
    constraints,
) -> str:
    if not constraints:
        return "none"
    return ", ".join(f"{c.name} {c.g:g} g" for c in constraints)


def display_inputs(
    target,
    catalog,
):
    """Print the normalized target, constraints and ingredients.

    Parameters
    ----------
    target : Target
        Loaded target (normalized here for display).
    catalog : IngredientCatalog
        Loaded ingredients, printed in catalog order.
    """
    normalized = target.normalize()
    print("Starting search with")
    print(
        f"\tTarget {target.kcal} kcal: "
        + _fmt_ratio((normalized.carb, normalized.fat, normalized.protein))
    )
    print(
        "\tConstraints "
        + "; ".join(
            f"{CONSTRAINT_LABELS[kind]}: {_fmt_constraints(target.constraints_of(kind))}"
            for kind in CONSTRAINT_KINDS
        )
    )
    name_width = max((len(name) for name in catalog), default=0)
    for name in catalog:
        macros = catalog.normalized[name]
        print(
            f"\tIngredient {name:<{name_width}}  "
            + _fmt_ratio((macros.carb, macros.fat, macros.protein))
            + " g/kcal"
        )


def display_proposal(
    proposal,
    cost: float,
    precision: int = 6,
):
    """Print the winning piece counts and their cost."""
    pieces = ", ".join(f"{name}: {count}" for name, count in proposal.items())
    print(f"\tFound {{{pieces}}} with cost {cost:.{precision}f}")


def display_result(
    result,
):
    """Pretty-print the gram mixture and achieved macros.

    Parameters
    ----------
    result : MixResult
        Projection of the solved proposal.
    """
    print()
    print("---- RESULT ----")
    if not result.grams:
        print("Nothing to mix.")
        return

    name_width = max(len(name) for name in result.grams)
    gram_width = max(len(str(grams)) for grams in result.grams.values())
    print("Mix the following together (in grams):")
    for name, grams in result.grams.items():
        print(f"  {name:<{name_width}}  {grams:>{gram_width}} g")

    carb_pct, fat_pct, protein_pct = result.percentages
    print(
        f"Results in {round_half_up(result.carb)}g carb, "
        f"{round_half_up(result.fat)}g fat, "
        f"{round_half_up(result.protein)}g protein in {result.kcal} kcal "
        f"({round_half_up(carb_pct)}:{round_half_up(fat_pct)}:"
        f"{round_half_up(protein_pct)})."
    )
