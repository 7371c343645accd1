"""Domain constants for the macro mixer (immutable mappings).

Conventions
-----------
- Target macros are **percentages (0..100)**; normalized values are ratios.
- Ingredient macros are **grams** in the amount described by the document.
- A *piece* is one discretized kcal step of the search.

Notes
-----
`CONSTRAINT_LABELS` is exposed as a read-only mapping (via `MappingProxyType`).
Tunable values live in `config.default.yml`, not here.
"""

from types import (
    MappingProxyType,
)
from typing import (
    Final,
    Mapping,
)

# --- Macros ------------------------------------------------------------------

# Order used for every report and every cost computation
MACROS: Final[tuple[str, ...]] = ("carb", "fat", "protein")

# Target percentages are divided by this to get ratios
PERCENT: Final[float] = 100.0

# Allowed distance of the target percentage sum from PERCENT before warning
PERCENT_SUM_TOLERANCE: Final[float] = 0.5

# --- Documents ---------------------------------------------------------------

INGREDIENT_FIELDS: Final[tuple[str, ...]] = ("name", "g", "kcal", *MACROS)
TARGET_FIELDS: Final[tuple[str, ...]] = ("kcal", *MACROS)

# Target keys holding lists of {name, g} entries
CONSTRAINT_KINDS: Final[tuple[str, ...]] = (
    "constraint_exact",
    "constraint_at_least",
    "constraint_at_most",
)

# Human labels for reports and logs; not used in calculations
_CONSTRAINT_LABELS_DICT: Final[dict[str, str]] = {
    "constraint_exact": "exact",
    "constraint_at_least": "at least",
    "constraint_at_most": "at most",
}

CONSTRAINT_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    _CONSTRAINT_LABELS_DICT
)

PROGRAM_NAME: Final[str] = "natural-bodybuilder"
