"""Question catalogue for the financial wellness questionnaire.

Each question is asked in order. A question with a ``condition`` is only asked
when the condition holds for the answers given so far, and an ``optional``
question may be skipped with an empty answer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

if TYPE_CHECKING:
    from wellness.data.answers import AnswerSet

# Question types
TEXT = "text"
CHOICE = "choice"
MULTIPLE = "multiple"

# Dependents
KIDS_YES = "Yes"
KIDS_NO = "No"
KIDS_PLANNING = "Planning to have kids"
DEPENDENT_ANSWERS = frozenset({KIDS_YES, KIDS_PLANNING})

# Insurance
LIFE_INSURANCE = "Life Insurance"
HEALTH_MEDICAL = "Health/Medical"
NO_INSURANCE = "None yet / not sure"

# Income confidence
INCOME_SOLID = "Feels solid"
INCOME_UNSURE = "Have some but not sure"
INCOME_NONE = "None yet"

# Retirement
RETIREMENT_REGULAR = "Yes, regularly"
RETIREMENT_OCCASIONAL = "Occasionally"
RETIREMENT_NOT_YET = "Not yet"
RETIREMENT_NO_PLAN = "What's a retirement plan? 😅"
NO_RETIREMENT_PLAN = frozenset({RETIREMENT_NOT_YET, RETIREMENT_NO_PLAN})

RETIREMENT_ON_TRACK = "Feels on track"
RETIREMENT_STARTED = "Making a start"
RETIREMENT_NOT_CONFIDENT = "Not confident"

# Education
EDUCATION_COVERED = "Feels covered"
EDUCATION_SAVING = "Saving but not there yet"
EDUCATION_NOT_YET = "Not yet"

# Emergency fund
EMERGENCY_FUNDED = "Yes, fully funded"
EMERGENCY_WORKING = "Working on it"
EMERGENCY_NOT_YET = "Not yet"
EMERGENCY_WHAT = "Emergency... what?"

# Debt
DEBT_FREE = "Debt-free! 🎉"
DEBT_MANAGEABLE = "Manageable"
DEBT_STRESSED = "Bit stressed about it"
DEBT_UNDISCLOSED = "Prefer not to say"

# Top concern
CONCERN_SAVING = "Saving enough"
CONCERN_EXPENSES = "Managing expenses"
CONCERN_FAMILY = "Protecting my family"
CONCERN_FUTURE = "Planning for the future"
CONCERN_GROWTH = "Growing my money"
GROWTH_CONCERNS = frozenset({CONCERN_GROWTH, CONCERN_FUTURE})


@dataclass(frozen=True)
class Question:
    """A single questionnaire step."""

    id: str
    attr: str  # AnswerSet attribute the answer is stored in
    question: str
    type: str
    options: Tuple[str, ...] = ()
    subtitle: Optional[str] = None
    placeholder: Optional[str] = None
    optional: bool = False
    exclusive_option: Optional[str] = None
    condition: Optional[Callable[[AnswerSet], bool]] = field(default=None, compare=False)

    def applies_to(self, answers: AnswerSet) -> bool:
        return self.condition is None or self.condition(answers)


def _has_or_plans_dependents(answers: AnswerSet) -> bool:
    return answers.has_kids in DEPENDENT_ANSWERS


def _is_saving_for_retirement(answers: AnswerSet) -> bool:
    return answers.retirement_plan not in NO_RETIREMENT_PLAN


QUESTIONS: List[Question] = [
    Question(
        id="name",
        attr="name",
        question="What's your name?",
        type=TEXT,
        placeholder="Your name here",
    ),
    Question(
        id="ageRange",
        attr="age_range",
        question="Which age bracket are you in?",
        type=CHOICE,
        options=("20-29", "30-39", "40-49", "50+"),
    ),
    Question(
        id="hasKids",
        attr="has_kids",
        question="Do you have kids or dependents?",
        type=CHOICE,
        options=(KIDS_YES, KIDS_NO, KIDS_PLANNING),
    ),
    Question(
        id="insuranceCoverage",
        attr="insurance_coverage",
        question="What insurance do you currently have?",
        subtitle="Select all that apply",
        type=MULTIPLE,
        options=(LIFE_INSURANCE, HEALTH_MEDICAL, NO_INSURANCE),
        exclusive_option=NO_INSURANCE,
    ),
    Question(
        id="incomeConfidence",
        attr="income_confidence",
        question="If you couldn't work for a while, how protected is your income?",
        type=CHOICE,
        options=(INCOME_SOLID, INCOME_UNSURE, INCOME_NONE),
        optional=True,
    ),
    Question(
        id="retirementPlan",
        attr="retirement_plan",
        question="Are you actively saving for retirement?",
        type=CHOICE,
        options=(RETIREMENT_REGULAR, RETIREMENT_OCCASIONAL, RETIREMENT_NOT_YET, RETIREMENT_NO_PLAN),
    ),
    Question(
        id="retirementConfidence",
        attr="retirement_confidence",
        question="How do you feel about your retirement savings?",
        type=CHOICE,
        options=(RETIREMENT_ON_TRACK, RETIREMENT_STARTED, RETIREMENT_NOT_CONFIDENT),
        optional=True,
        condition=_is_saving_for_retirement,
    ),
    Question(
        id="educationConfidence",
        attr="education_confidence",
        question="How ready are you for your kids' education costs?",
        type=CHOICE,
        options=(EDUCATION_COVERED, EDUCATION_SAVING, EDUCATION_NOT_YET),
        optional=True,
        condition=_has_or_plans_dependents,
    ),
    Question(
        id="emergencyFund",
        attr="emergency_fund",
        question="Do you have an emergency fund?",
        subtitle="3-6 months of expenses saved",
        type=CHOICE,
        options=(EMERGENCY_FUNDED, EMERGENCY_WORKING, EMERGENCY_NOT_YET, EMERGENCY_WHAT),
    ),
    Question(
        id="debtSituation",
        attr="debt_situation",
        question="How's your debt situation?",
        type=CHOICE,
        options=(DEBT_FREE, DEBT_MANAGEABLE, DEBT_STRESSED, DEBT_UNDISCLOSED),
    ),
    Question(
        id="topConcern",
        attr="top_concern",
        question="What's your biggest financial concern right now?",
        type=CHOICE,
        options=(CONCERN_SAVING, CONCERN_EXPENSES, CONCERN_FAMILY, CONCERN_FUTURE, CONCERN_GROWTH),
    ),
]

QUESTIONS_BY_ID = {q.id: q for q in QUESTIONS}


def applicable_questions(answers: AnswerSet) -> List[Question]:
    """Questions to ask, in order, given the answers so far."""
    return [q for q in QUESTIONS if q.applies_to(answers)]

