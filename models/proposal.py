"""Proposal data model.

A `Proposal` is a candidate mixture expressed as integer piece counts per
ingredient name; one piece stands for one discretized kcal step.

Exports
-------
Proposal
"""

from calculations import (
    blend,
)
from errors import (
    DegenerateProposalError,
)


def _check_count(name, count) -> int:
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise ValueError(
            f"Piece count for {name!r} must be a non-negative integer, "
            f"got {count!r}"
        )
    return count


class Proposal:
    """Piece counts keyed by ingredient name.

    Parameters
    ----------
    counts : Mapping[str, int], optional
        Initial counts. Working proposals of the optimizer hold every
        catalog name (see ``IngredientCatalog.empty_proposal``); constraint
        proposals only hold the constrained names.

    Notes
    -----
    Two proposals are equal when their name -> count mappings are equal,
    regardless of insertion order.
    """

    def __init__(
        self,
        counts=None,
    ):
        self.counts: dict[str, int] = {
            name: _check_count(name, count)
            for name, count in (counts or {}).items()
        }

    def __getitem__(self, name: str) -> int:
        return self.counts[name]

    def get(self, name: str, default: int = 0) -> int:
        return self.counts.get(name, default)

    def __contains__(self, name) -> bool:
        return name in self.counts

    def __iter__(self):
        return iter(sorted(self.counts))

    def __len__(self) -> int:
        return len(self.counts)

    def items(self) -> list[tuple[str, int]]:
        """Name/count pairs sorted by name."""
        return sorted(self.counts.items())

    def __eq__(self, other):
        if not isinstance(other, Proposal):
            return NotImplemented
        return self.counts == other.counts

    __hash__ = None

    def __repr__(self):
        body = ", ".join(f"{name!r}: {count}" for name, count in self.items())
        return f"Proposal({{{body}}})"

    def kcal(self) -> int:
        """Total pieces; one piece is one kcal-equivalent step."""
        return sum(self.counts.values())

    def set(self, name: str, count: int) -> None:
        self.counts[name] = _check_count(name, count)

    def add(self, name: str, pieces: int = 1) -> None:
        """Increment ``name`` in place."""
        self.set(name, self.counts.get(name, 0) + pieces)

    def with_added(self, name: str, pieces: int = 1) -> "Proposal":
        """Copy of this proposal with ``name`` incremented."""
        trial = Proposal(self.counts)
        trial.add(name, pieces)
        return trial

    def mix(self, catalog):
        """Blend the ingredients into a single normalized ingredient.

        Parameters
        ----------
        catalog : IngredientCatalog
            Provides the normalized macros for every name with pieces.

        Returns
        -------
        NormalizedIngredient
            Piece-weighted average of per-kcal macros.

        Raises
        ------
        DegenerateProposalError
            If the proposal holds no pieces.
        """
        mixed = blend(self.counts, catalog.normalized)
        if mixed is None:
            raise DegenerateProposalError(
                "Cannot mix a proposal without any pieces"
            )
        return mixed
