"""Shared fixtures for the decision-support tests."""

import pytest

from obstetric_tools.models import Answer
from obstetric_tools.decision_support import (
    ABSOLUTE_CONTRAINDICATIONS,
    INCLUSION_CRITERIA,
    RELATIVE_CONTRAINDICATIONS,
    new_bishop_scores,
    new_criteria_state,
)


@pytest.fixture
def empty_state():
    """Every ectopic criterion unanswered."""
    return new_criteria_state()


@pytest.fixture
def eligible_state():
    """All inclusion criteria YES, every contraindication NO."""
    state = new_criteria_state()
    for c in INCLUSION_CRITERIA:
        state[c.id] = Answer.YES
    for c in ABSOLUTE_CONTRAINDICATIONS + RELATIVE_CONTRAINDICATIONS:
        state[c.id] = Answer.NO
    return state


@pytest.fixture
def empty_scores():
    return new_bishop_scores()
