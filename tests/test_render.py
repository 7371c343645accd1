"""Tests for console rendering."""

from interface.render import display_inputs, display_proposal, display_result
from models.proposal import Proposal
from models.result import MixResult
from models.target import Target, TargetConstraint


class TestDisplayInputs:
    """Tests for display_inputs()."""

    def test_lists_target_and_ingredients(self, capsys, kitchen_catalog) -> None:
        target = Target(
            kcal=2000,
            carb=40,
            fat=30,
            protein=30,
            constraint_at_most=(TargetConstraint("oil", 20),),
        )
        display_inputs(target, kitchen_catalog)
        output = capsys.readouterr().out
        assert "Starting search with" in output
        assert "2000 kcal" in output
        assert "carb 0.4000" in output
        assert "at most: oil 20 g" in output
        assert "exact: none" in output
        for name in ("oil", "rice", "whey"):
            assert f"Ingredient {name}" in output


class TestDisplayProposal:
    """Tests for display_proposal()."""

    def test_pieces_and_cost(self, capsys) -> None:
        display_proposal(Proposal({"banana": 0, "apple": 2}), 0.000123456, precision=4)
        output = capsys.readouterr().out
        assert "{apple: 2, banana: 0}" in output
        assert "cost 0.0001" in output


class TestDisplayResult:
    """Tests for display_result()."""

    def test_grams_and_breakdown(self, capsys) -> None:
        result = MixResult(
            grams={"apple": 200, "banana": 0},
            kcal=200,
            carb=40.0,
            fat=60.0,
            protein=100.0,
        )
        display_result(result)
        output = capsys.readouterr().out
        assert "---- RESULT ----" in output
        assert "apple   200 g" in output
        assert "banana    0 g" in output
        assert (
            "Results in 40g carb, 60g fat, 100g protein in 200 kcal (20:30:50)."
            in output
        )

    def test_empty_result(self, capsys) -> None:
        display_result(MixResult())
        output = capsys.readouterr().out
        assert "Nothing to mix." in output
