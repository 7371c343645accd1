"""Target data model.

Defines the caloric/macro `Target`, its gram-based `TargetConstraint`
entries, and the ratio form `NormalizedTarget` that proposals are scored
against.

Exports
-------
Target
TargetConstraint
NormalizedTarget
"""

from dataclasses import (
    dataclass,
    field,
)

from constants import (
    CONSTRAINT_KINDS,
    CONSTRAINT_LABELS,
    MACROS,
    PERCENT,
    PERCENT_SUM_TOLERANCE,
    TARGET_FIELDS,
)
from errors import (
    ConfigurationError,
)
from models.ingredient import (
    NormalizedIngredient,
    is_number,
)


def square(
    x: float,
) -> float:
    return x * x


@dataclass(frozen=True)
class TargetConstraint:
    """Gram amount of one named ingredient."""

    name: str
    g: float

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError(
                f"Constraint name must be a non-empty string, got {self.name!r}"
            )
        if not is_number(self.g) or self.g < 0:
            raise ConfigurationError(
                f"Constraint {self.name!r}: field 'g' must be a number >= 0, "
                f"got {self.g!r}"
            )

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Constraint entry must be a mapping with 'name' and 'g', "
                f"got {data!r}"
            )
        missing = [key for key in ("name", "g") if key not in data]
        if missing:
            raise ConfigurationError(
                f"Constraint entry is missing fields: {', '.join(missing)}"
            )
        return cls(name=data["name"], g=data["g"])


@dataclass(frozen=True)
class NormalizedTarget:
    """Target macros as ratios (percentage / 100)."""

    carb: float
    fat: float
    protein: float

    def squared_error(
        self,
        ratios: NormalizedIngredient,
    ) -> float:
        """Sum of squared differences against mix ratios; lower is better."""
        return (
            square(self.carb - ratios.carb)
            + square(self.fat - ratios.fat)
            + square(self.protein - ratios.protein)
        )


@dataclass(frozen=True)
class Target:
    """Caloric target with desired macro percentages.

    Parameters
    ----------
    kcal : int
        Total kcal of the mix (> 0).
    carb, fat, protein : float
        Desired share of each macro in percent (0..100). They are not
        required to sum to 100.
    constraint_exact, constraint_at_least, constraint_at_most : tuple
        Gram constraints on named ingredients.
    """

    kcal: int
    carb: float
    fat: float
    protein: float
    constraint_exact: tuple[TargetConstraint, ...] = field(default_factory=tuple)
    constraint_at_least: tuple[TargetConstraint, ...] = field(default_factory=tuple)
    constraint_at_most: tuple[TargetConstraint, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if (
            not isinstance(self.kcal, int)
            or isinstance(self.kcal, bool)
            or self.kcal <= 0
        ):
            raise ConfigurationError(
                f"Target field 'kcal' must be an integer > 0, got {self.kcal!r}"
            )
        for macro in MACROS:
            value = getattr(self, macro)
            if not is_number(value) or not 0 <= value <= PERCENT:
                raise ConfigurationError(
                    f"Target field '{macro}' must be a percentage in "
                    f"0..{PERCENT:g}, got {value!r}"
                )

    @classmethod
    def from_dict(
        cls,
        data,
    ):
        """Create a ``Target`` from a parsed document.

        Parameters
        ----------
        data : dict
            Must include ``kcal``, ``carb``, ``fat``, ``protein``. Optional
            ``constraint_exact``, ``constraint_at_least`` and
            ``constraint_at_most`` are lists of ``{name, g}`` mappings.

        Returns
        -------
        Target
            Validated instance.
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Target document must be a mapping")
        missing = [key for key in TARGET_FIELDS if key not in data]
        if missing:
            raise ConfigurationError(
                f"Target document is missing fields: {', '.join(missing)}"
            )
        constraints = {}
        for kind in CONSTRAINT_KINDS:
            entries = data.get(kind) or []
            if not isinstance(entries, list):
                raise ConfigurationError(
                    f"Target field '{kind}' must be a list of {{name, g}} entries"
                )
            constraints[kind] = tuple(
                TargetConstraint.from_dict(entry) for entry in entries
            )
        return cls(
            **{key: data[key] for key in TARGET_FIELDS},
            **constraints,
        )

    def normalize(self) -> NormalizedTarget:
        return NormalizedTarget(
            carb=self.carb / PERCENT,
            fat=self.fat / PERCENT,
            protein=self.protein / PERCENT,
        )

    def constraints_of(
        self,
        kind: str,
    ) -> tuple[TargetConstraint, ...]:
        """Constraint entries for one of ``CONSTRAINT_KINDS``."""
        return getattr(self, kind)

    def data_issues(self) -> list[str]:
        """Human-readable warnings about suspicious but accepted values.

        Returns
        -------
        list[str]
            Empty when nothing looks off.
        """
        issues = []
        total = self.carb + self.fat + self.protein
        if abs(total - PERCENT) > PERCENT_SUM_TOLERANCE:
            issues.append(
                f"target percentages sum to {total:g}, not {PERCENT:g}; "
                "they are compared as ratios as given"
            )

        exact_names = {c.name for c in self.constraint_exact}
        for kind in ("constraint_at_least", "constraint_at_most"):
            for constraint in self.constraints_of(kind):
                if constraint.name in exact_names:
                    issues.append(
                        f"{constraint.name!r} has both an exact and an "
                        f"{CONSTRAINT_LABELS[kind]} constraint; exact wins"
                    )

        at_most = {c.name: c.g for c in self.constraint_at_most}
        for constraint in self.constraint_at_least:
            ceiling = at_most.get(constraint.name)
            if ceiling is not None and constraint.g > ceiling:
                issues.append(
                    f"{constraint.name!r} needs at least {constraint.g:g} g "
                    f"but at most {ceiling:g} g"
                )

        for kind in CONSTRAINT_KINDS:
            names = [c.name for c in self.constraints_of(kind)]
            for name in sorted({n for n in names if names.count(n) > 1}):
                issues.append(
                    f"{name!r} is listed more than once in {kind}; "
                    "the last entry wins"
                )
        return issues
