"""Tests for resolving gram constraints into pieces."""

import pytest

from catalog import IngredientCatalog
from conftest import make_ingredient
from constraints import TargetConstraints, constraint_to_pieces
from errors import ConstraintReferenceError
from models.proposal import Proposal
from models.target import Target, TargetConstraint


def _target(**constraints) -> Target:
    return Target(kcal=2000, carb=40, fat=30, protein=30, **constraints)


class TestConstraintToPieces:
    """Grams -> kcal -> pieces on the optimizer scale."""

    def test_pieces_follow_target_scale(self, kitchen_catalog) -> None:
        # 100 g rice = 400 kcal; 2000 kcal over 1000 steps -> 2 kcal/piece
        pieces = constraint_to_pieces(
            TargetConstraint("rice", 100), _target(), kitchen_catalog, 1000
        )
        assert pieces == 200

    def test_pieces_are_rounded(self, kitchen_catalog) -> None:
        # 30 g whey = 117 kcal -> 117 * 2000 / 2000 = 117 pieces
        assert (
            constraint_to_pieces(
                TargetConstraint("whey", 30), _target(), kitchen_catalog, 2000
            )
            == 117
        )
        # 7 g oil = 63 kcal -> 63 * 100 / 2000 = 3.15 -> 3 pieces
        assert (
            constraint_to_pieces(
                TargetConstraint("oil", 7), _target(), kitchen_catalog, 100
            )
            == 3
        )

    def test_halves_round_up(self) -> None:
        catalog = IngredientCatalog([make_ingredient("flat", g=100, kcal=100)])
        target = Target(kcal=1000, carb=40, fat=30, protein=30)
        assert constraint_to_pieces(TargetConstraint("flat", 25), target, catalog, 100) == 3
        assert constraint_to_pieces(TargetConstraint("flat", 35), target, catalog, 100) == 4

    def test_zero_grams_is_zero_pieces(self, kitchen_catalog) -> None:
        assert (
            constraint_to_pieces(
                TargetConstraint("oil", 0), _target(), kitchen_catalog, 2000
            )
            == 0
        )

    def test_unknown_ingredient_raises(self, kitchen_catalog) -> None:
        with pytest.raises(ConstraintReferenceError, match="butter"):
            constraint_to_pieces(
                TargetConstraint("butter", 10), _target(), kitchen_catalog, 2000
            )


class TestTargetConstraints:
    """Building the three budgets from a target."""

    def test_empty_by_default(self) -> None:
        constraints = TargetConstraints()
        assert constraints.exact == Proposal()
        assert constraints.at_least == Proposal()
        assert constraints.at_most == Proposal()

    def test_from_target_fills_each_kind(self, kitchen_catalog) -> None:
        target = _target(
            constraint_exact=(TargetConstraint("whey", 50),),
            constraint_at_least=(TargetConstraint("rice", 100),),
            constraint_at_most=(TargetConstraint("oil", 10),),
        )
        constraints = TargetConstraints.from_target(target, kitchen_catalog, 2000)
        assert constraints.exact == Proposal({"whey": 195})
        assert constraints.at_least == Proposal({"rice": 400})
        assert constraints.at_most == Proposal({"oil": 90})

    def test_from_target_unknown_name_raises(self, kitchen_catalog) -> None:
        target = _target(constraint_at_most=(TargetConstraint("butter", 10),))
        with pytest.raises(ConstraintReferenceError):
            TargetConstraints.from_target(target, kitchen_catalog, 2000)

    def test_frozen_and_capped(self) -> None:
        constraints = TargetConstraints(
            exact=Proposal({"whey": 3}),
            at_most=Proposal({"oil": 2}),
        )
        assert constraints.is_frozen("whey")
        assert not constraints.is_frozen("oil")
        assert not constraints.is_capped("oil", 1)
        assert constraints.is_capped("oil", 2)
        assert not constraints.is_capped("rice", 10_000)
