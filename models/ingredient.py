"""Ingredient data model and normalization.

Defines the `Ingredient` record loaded from an ingredient document and the
`NormalizedIngredient` per-kcal macro densities derived from it.

Exports
-------
Ingredient
NormalizedIngredient

Notes
-----
Normalized values are grams of macro per kcal. They are not rescaled to sum
to 1; the evaluator renormalizes the blended mix instead.
"""

from dataclasses import (
    dataclass,
)

from constants import (
    INGREDIENT_FIELDS,
    MACROS,
)
from errors import (
    ConfigurationError,
)


def is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class NormalizedIngredient:
    """Carb, fat and protein in grams per kcal."""

    carb: float = 0.0
    fat: float = 0.0
    protein: float = 0.0

    def total(self) -> float:
        return self.carb + self.fat + self.protein

    def ratios(self) -> "NormalizedIngredient | None":
        """Rescale the three densities so they sum to 1.

        Returns
        -------
        NormalizedIngredient | None
            Ratios, or ``None`` when all three densities are zero.
        """
        total = self.total()
        if total <= 0:
            return None
        return NormalizedIngredient(
            carb=self.carb / total,
            fat=self.fat / total,
            protein=self.protein / total,
        )


@dataclass(frozen=True)
class Ingredient:
    """One ingredient as described by its document.

    Parameters
    ----------
    name : str
        Unique ingredient name.
    g : float
        Grams the other values refer to (> 0).
    kcal : float
        Energy in ``g`` grams (> 0).
    carb, fat, protein : float
        Macro grams in ``g`` grams (>= 0).

    Raises
    ------
    ConfigurationError
        If any field is missing its type or range requirement.
    """

    name: str
    g: float
    kcal: float
    carb: float
    fat: float
    protein: float

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError(
                f"Ingredient name must be a non-empty string, got {self.name!r}"
            )
        for field_name in ("g", "kcal", *MACROS):
            value = getattr(self, field_name)
            if not is_number(value):
                raise ConfigurationError(
                    f"Ingredient {self.name!r}: field '{field_name}' must be "
                    f"a number, got {value!r}"
                )
            if value < 0:
                raise ConfigurationError(
                    f"Ingredient {self.name!r}: field '{field_name}' must not "
                    f"be negative, got {value!r}"
                )
        # Both are divisors: kcal in normalize(), g in the gram conversions
        if self.kcal == 0:
            raise ConfigurationError(
                f"Ingredient {self.name!r}: field 'kcal' must be > 0"
            )
        if self.g == 0:
            raise ConfigurationError(
                f"Ingredient {self.name!r}: field 'g' must be > 0"
            )

    @classmethod
    def from_dict(
        cls,
        data,
    ):
        """Create an ``Ingredient`` from a parsed document.

        Parameters
        ----------
        data : dict
            Must include keys ``name``, ``g``, ``kcal``, ``carb``, ``fat``,
            ``protein``. Extra keys are ignored.

        Returns
        -------
        Ingredient
            Validated instance.
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Ingredient document must be a mapping")
        missing = [key for key in INGREDIENT_FIELDS if key not in data]
        if missing:
            raise ConfigurationError(
                f"Ingredient document is missing fields: {', '.join(missing)}"
            )
        return cls(**{key: data[key] for key in INGREDIENT_FIELDS})

    def normalize(self) -> NormalizedIngredient:
        """Macro grams per kcal."""
        return NormalizedIngredient(
            carb=self.carb / self.kcal,
            fat=self.fat / self.kcal,
            protein=self.protein / self.kcal,
        )

    @property
    def kcal_per_gram(self) -> float:
        return self.kcal / self.g

    @property
    def grams_per_kcal(self) -> float:
        return self.g / self.kcal

    def debug_string(self) -> str:
        return (
            f"{self.name} | {self.g:g} g, {self.kcal:g} kcal, "
            f"C:{self.carb:g} F:{self.fat:g} P:{self.protein:g}"
        )
