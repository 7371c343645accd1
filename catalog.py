"""Ingredient catalog for one run.

Holds the loaded ingredients, their normalized macros, and the fixed name
order every other component iterates in.

Exports
-------
IngredientCatalog

Notes
-----
Iteration is always by ingredient name, ascending. The optimizer's
tie-break ("first candidate wins") depends on it.
"""

import logging
from types import (
    MappingProxyType,
)

from errors import (
    ConfigurationError,
)
from models.ingredient import (
    Ingredient,
)
from models.proposal import (
    Proposal,
)

logger = logging.getLogger(__name__)


class IngredientCatalog:
    """Immutable set of ingredients keyed by name.

    Parameters
    ----------
    ingredients : list of Ingredient
        Records to manage. Names must be unique.

    Attributes
    ----------
    names : tuple[str, ...]
        Ingredient names, sorted.
    raw : Mapping[str, Ingredient]
        Source records keyed by name (read-only).
    normalized : Mapping[str, NormalizedIngredient]
        Per-kcal macros keyed by name (read-only), computed once here.
    """

    def __init__(
        self,
        ingredients: list[Ingredient],
    ):
        by_name = {}
        for ingredient in ingredients:
            if ingredient.name in by_name:
                raise ConfigurationError(
                    f"Duplicate ingredient name {ingredient.name!r}"
                )
            by_name[ingredient.name] = ingredient
        if not by_name:
            raise ConfigurationError("At least one ingredient is required")

        self.names = tuple(sorted(by_name))
        self.raw = MappingProxyType({name: by_name[name] for name in self.names})
        self.normalized = MappingProxyType(
            {name: by_name[name].normalize() for name in self.names}
        )
        for name in self.names:
            logger.debug("Normalized %s -> %s", name, self.normalized[name])

    def __contains__(self, name) -> bool:
        return name in self.normalized

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def get(
        self,
        name: str,
    ) -> Ingredient | None:
        """Source record for ``name``, or ``None`` when unknown."""
        return self.raw.get(name)

    def empty_proposal(self) -> Proposal:
        """Proposal holding every catalog name with zero pieces."""
        return Proposal({name: 0 for name in self.names})
