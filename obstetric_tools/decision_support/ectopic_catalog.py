"""Static criteria catalog for methotrexate treatment of ectopic pregnancy.

Order within each section matters: it is the display order and decides
which criterion is reported first when several match.
"""
from typing import Dict, Mapping, Tuple

from obstetric_tools.models import Answer, Criterion, CriterionGroup
from obstetric_tools.decision_support.exceptions import UnknownCriterionError

# A NO answer to any of these is disqualifying.
INCLUSION_CRITERIA: Tuple[Criterion, ...] = (
    Criterion(id="hemoStable", text="Is the patient hemodynamically stable?"),
    Criterion(id="noContraindications", text="No absolute contraindication to Methotrexate?"),
    Criterion(
        id="canFollowUp",
        text="Is the patient able and willing to comply with post-treatment follow-up?",
    ),
    Criterion(id="confirmedEctopic", text="Is the diagnosis of ectopic pregnancy confirmed?"),
)

# A YES answer to any of these vetoes medical treatment.
ABSOLUTE_CONTRAINDICATIONS: Tuple[Criterion, ...] = (
    Criterion(id="rupture", text="Signs or evidence of ectopic pregnancy rupture?"),
    Criterion(id="hemoUnstable", text="Hemodynamically unstable?"),
    Criterion(id="breastfeeding", text="Is the patient breastfeeding?"),
    Criterion(id="immunodeficiency", text="Does the patient have an immunodeficiency?"),
    Criterion(id="mtxSensitivity", text="History of hypersensitivity to Methotrexate?"),
    Criterion(id="activePUD", text="Does the patient have active peptic ulcer disease?"),
    Criterion(id="activePulmonary", text="Does the patient have active pulmonary disease?"),
    Criterion(id="hepaticDysfunction", text="Clinically significant hepatic dysfunction?"),
    Criterion(id="renalDysfunction", text="Clinically significant renal dysfunction?"),
    Criterion(id="hematologicDysfunction", text="Clinically significant hematologic dysfunction?"),
    Criterion(id="coexistingIUP", text="Coexisting intrauterine pregnancy?"),
)

# YES answers lower the expected success rate but do not veto.
RELATIVE_CONTRAINDICATIONS: Tuple[Criterion, ...] = (
    Criterion(id="fetalHeartbeat", text="Fetal cardiac activity detected on ultrasound?"),
    Criterion(id="hcgLevel", text="Initial β-hCG concentration > 5000 mIU/mL?"),
    Criterion(id="massSize", text="Ectopic mass size > 4 cm?"),
    Criterion(id="refusesBlood", text="Does the patient refuse blood transfusion?"),
)

CRITERIA_GROUPS: Dict[CriterionGroup, Tuple[Criterion, ...]] = {
    CriterionGroup.INCLUSION: INCLUSION_CRITERIA,
    CriterionGroup.ABSOLUTE_CONTRAINDICATION: ABSOLUTE_CONTRAINDICATIONS,
    CriterionGroup.RELATIVE_CONTRAINDICATION: RELATIVE_CONTRAINDICATIONS,
}

ALL_CRITERIA: Tuple[Criterion, ...] = (
    INCLUSION_CRITERIA + ABSOLUTE_CONTRAINDICATIONS + RELATIVE_CONTRAINDICATIONS
)

_CRITERIA_BY_ID: Dict[str, Criterion] = {c.id: c for c in ALL_CRITERIA}


def get_criterion(criterion_id: str) -> Criterion:
    """Look up a criterion by id across all three sections."""
    try:
        return _CRITERIA_BY_ID[criterion_id]
    except KeyError:
        raise UnknownCriterionError(f"Unknown ectopic criterion: {criterion_id}") from None


def new_criteria_state() -> Dict[str, Answer]:
    """Fresh answer state with every known criterion UNSET."""
    return {c.id: Answer.UNSET for c in ALL_CRITERIA}


def answer_for(state: Mapping[str, Answer], criterion: Criterion) -> Answer:
    """Read a criterion's answer; a missing or unrecognised entry counts as UNSET."""
    value = state.get(criterion.id, Answer.UNSET)
    try:
        return Answer(value)
    except ValueError:
        return Answer.UNSET


def answered_count(state: Mapping[str, Answer]) -> int:
    """Number of catalog criteria with a YES or NO answer."""
    return sum(1 for c in ALL_CRITERIA if answer_for(state, c) != Answer.UNSET)


def all_answered(state: Mapping[str, Answer]) -> bool:
    return answered_count(state) == len(ALL_CRITERIA)
