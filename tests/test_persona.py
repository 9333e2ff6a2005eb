"""Tests for the persona rule cascade."""

from wellness.evaluation import evaluate
from wellness.evaluation.coverage import COVERED, GAP, WIP, CoverageMap, derive_coverage
from wellness.evaluation.persona import (
    FAMILY_PROTECTOR,
    FREE_SPIRIT,
    GETTING_STARTED,
    GROWTH_PLANNER,
    PERSONA_RULES,
    PERSONAS,
    SAFETY_GUARDIAN,
    STRONG_STARTER,
    select_persona,
)


def _coverage(**states):
    values = {"medical": WIP, "income": WIP, "retirement": WIP, "emergency": WIP, "debt": WIP}
    values.update(states)
    return CoverageMap(**values)


def test_every_persona_has_two_lines_and_a_theme():
    assert len({p.key for p in PERSONAS}) == 6
    for persona in PERSONAS:
        assert len(persona.lines) == 2
        assert persona.theme


def test_rules_are_ordered():
    assert [persona for _, persona in PERSONA_RULES] == [
        GETTING_STARTED,
        GROWTH_PLANNER,
        FAMILY_PROTECTOR,
        SAFETY_GUARDIAN,
        STRONG_STARTER,
    ]


def test_scenario_a_is_getting_started(make_answers):
    answers = make_answers()
    assert evaluate(answers).persona == GETTING_STARTED


def test_scenario_b_is_family_protector(make_answers):
    answers = make_answers(
        has_kids="Yes",
        insurance_coverage=["Life Insurance"],
        emergency_fund="Yes, fully funded",
        debt_situation="Debt-free! 🎉",
        retirement_plan="Yes, regularly",
        retirement_confidence="Feels on track",
        top_concern="Protecting my family",
    )
    assert evaluate(answers).persona == FAMILY_PROTECTOR


def test_growth_planner_beats_family_protector(make_answers):
    answers = make_answers(
        has_kids="Yes",
        insurance_coverage=["Life Insurance"],
        emergency_fund="Yes, fully funded",
        retirement_plan="Yes, regularly",
        top_concern="Growing my money",
    )
    assert evaluate(answers).persona == GROWTH_PLANNER


def test_planning_for_the_future_counts_as_growth(make_answers):
    coverage = _coverage(emergency=COVERED, retirement=COVERED)
    answers = make_answers(top_concern="Planning for the future")
    assert select_persona(answers, coverage) == GROWTH_PLANNER


def test_square_one_beats_family_protector(make_answers):
    # Dependents plus life insurance, but nothing covered yet
    answers = make_answers(has_kids="Yes", insurance_coverage=["Life Insurance"])
    coverage = _coverage(medical=GAP, income=GAP, retirement=GAP, emergency=GAP, debt=GAP)
    assert select_persona(answers, coverage) == GETTING_STARTED


def test_square_one_needs_three_gaps(make_answers):
    coverage = _coverage(medical=GAP, retirement=GAP)
    assert select_persona(make_answers(), coverage) == STRONG_STARTER


def test_planning_kids_with_life_insurance_is_family_protector(make_answers):
    answers = make_answers(has_kids="Planning to have kids", insurance_coverage=["Life Insurance"])
    assert select_persona(answers, _coverage()) == FAMILY_PROTECTOR


def test_safety_first_guardian(make_answers):
    coverage = _coverage(emergency=COVERED, debt=COVERED, retirement=WIP)
    assert select_persona(make_answers(), coverage) == SAFETY_GUARDIAN


def test_safety_first_needs_retirement_not_covered(make_answers):
    coverage = _coverage(emergency=COVERED, debt=COVERED, retirement=COVERED)
    assert select_persona(make_answers(top_concern="Saving enough"), coverage) == FREE_SPIRIT


def test_strong_starter_with_two_gaps(make_answers):
    coverage = _coverage(medical=COVERED, retirement=GAP, debt=GAP)
    assert select_persona(make_answers(), coverage) == STRONG_STARTER


def test_education_gap_counts(make_answers):
    coverage = _coverage(medical=COVERED, debt=GAP, education=GAP)
    assert select_persona(make_answers(), coverage) == STRONG_STARTER


def test_default_free_spirit(make_answers):
    assert select_persona(make_answers(), _coverage(medical=COVERED)) == FREE_SPIRIT


def test_selection_is_deterministic(make_answers):
    answers = make_answers(retirement_plan="Occasionally", emergency_fund="Working on it")
    coverage = derive_coverage(answers)
    assert select_persona(answers, coverage) is select_persona(answers, coverage)
