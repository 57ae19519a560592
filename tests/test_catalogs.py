"""Tests for the static criteria catalogs."""

import pytest
from pydantic import ValidationError

from obstetric_tools.models import Answer, BishopCriterionId, CriterionGroup
from obstetric_tools.decision_support import (
    ABSOLUTE_CONTRAINDICATIONS,
    ALL_CRITERIA,
    BISHOP_CRITERIA,
    CRITERIA_GROUPS,
    INCLUSION_CRITERIA,
    RELATIVE_CONTRAINDICATIONS,
    InvalidScoreError,
    UnknownCriterionError,
    all_answered,
    answered_count,
    evaluate_bishop,
    evaluate_ectopic,
    get_bishop_criterion,
    get_criterion,
    new_bishop_scores,
    new_criteria_state,
    validate_bishop_scores,
)


class TestEctopicCatalog:

    def test_section_sizes(self):
        assert len(INCLUSION_CRITERIA) == 4
        assert len(ABSOLUTE_CONTRAINDICATIONS) == 11
        assert len(RELATIVE_CONTRAINDICATIONS) == 4
        assert len(ALL_CRITERIA) == 19

    def test_groups_cover_every_section_in_display_order(self):
        assert list(CRITERIA_GROUPS) == [
            CriterionGroup.INCLUSION,
            CriterionGroup.ABSOLUTE_CONTRAINDICATION,
            CriterionGroup.RELATIVE_CONTRAINDICATION,
        ]
        assert CRITERIA_GROUPS[CriterionGroup.INCLUSION] is INCLUSION_CRITERIA
        assert sum(CRITERIA_GROUPS.values(), ()) == ALL_CRITERIA

    def test_ids_are_unique(self):
        ids = [c.id for c in ALL_CRITERIA]
        assert len(ids) == len(set(ids))

    def test_absolute_order_starts_with_rupture(self):
        assert [c.id for c in ABSOLUTE_CONTRAINDICATIONS[:2]] == ["rupture", "hemoUnstable"]

    def test_new_state_is_all_unset(self):
        state = new_criteria_state()

        assert set(state) == {c.id for c in ALL_CRITERIA}
        assert all(v == Answer.UNSET for v in state.values())

    def test_new_state_returns_independent_copies(self):
        first = new_criteria_state()
        first["rupture"] = Answer.YES

        assert new_criteria_state()["rupture"] == Answer.UNSET

    def test_get_criterion(self):
        assert get_criterion("massSize").text.startswith("Ectopic mass size")

    def test_get_unknown_criterion_raises(self):
        with pytest.raises(UnknownCriterionError):
            get_criterion("nope")

    def test_answered_count_ignores_unknown_ids(self, empty_state):
        empty_state["rupture"] = Answer.NO
        empty_state["somethingElse"] = Answer.YES

        assert answered_count(empty_state) == 1
        assert all_answered(empty_state) is False

    def test_all_answered(self, eligible_state):
        assert all_answered(eligible_state) is True

    def test_criteria_are_frozen(self):
        with pytest.raises(ValidationError):
            INCLUSION_CRITERIA[0].text = "changed"

    def test_evaluation_does_not_touch_catalog(self, eligible_state):
        before = [c.model_dump() for c in ALL_CRITERIA]
        other = new_criteria_state()
        other["fetalHeartbeat"] = Answer.YES

        evaluate_ectopic(eligible_state)
        evaluate_ectopic(other)

        assert [c.model_dump() for c in ALL_CRITERIA] == before


class TestBishopCatalog:

    def test_five_components_in_order(self):
        assert [c.id for c in BISHOP_CRITERIA] == list(BishopCriterionId)

    @pytest.mark.parametrize("criterion_id,expected", [
        ("dilation", (0, 1, 2, 3)),
        ("effacement", (0, 1, 2, 3)),
        ("station", (0, 1, 2, 3)),
        ("consistency", (0, 1, 2)),
        ("position", (0, 1, 2)),
    ])
    def test_option_scores(self, criterion_id, expected):
        assert get_bishop_criterion(criterion_id).allowed_scores == expected

    def test_unknown_component_raises(self):
        with pytest.raises(UnknownCriterionError):
            get_bishop_criterion("parity")

    def test_new_scores_all_none(self):
        scores = new_bishop_scores()

        assert set(scores) == {c.value for c in BishopCriterionId}
        assert all(v is None for v in scores.values())

    def test_evaluation_does_not_touch_catalog(self):
        before = [c.model_dump() for c in BISHOP_CRITERIA]

        evaluate_bishop({"dilation": 3, "effacement": 3, "station": 3, "consistency": 2, "position": 2})
        evaluate_bishop(new_bishop_scores())

        assert [c.model_dump() for c in BISHOP_CRITERIA] == before


class TestValidateBishopScores:

    def test_valid_partial_scores_pass(self):
        validate_bishop_scores({"dilation": 3, "position": None})

    def test_out_of_range_score_raises(self):
        with pytest.raises(InvalidScoreError):
            validate_bishop_scores({"consistency": 3})

    def test_negative_score_raises(self):
        with pytest.raises(InvalidScoreError):
            validate_bishop_scores({"dilation": -1})

    def test_unknown_component_raises(self):
        with pytest.raises(UnknownCriterionError):
            validate_bishop_scores({"parity": 1})
