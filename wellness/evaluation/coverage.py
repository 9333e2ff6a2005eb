"""Coverage classification per financial category.

Every category is resolved from a small decision table over the raw answers.
Unknown or missing answers resolve to work-in-progress, never to covered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from wellness.data.answers import AnswerSet
from wellness.data.questions import (
    DEBT_FREE,
    DEBT_MANAGEABLE,
    DEBT_STRESSED,
    DEBT_UNDISCLOSED,
    EDUCATION_COVERED,
    EDUCATION_NOT_YET,
    EDUCATION_SAVING,
    EMERGENCY_FUNDED,
    EMERGENCY_NOT_YET,
    EMERGENCY_WHAT,
    EMERGENCY_WORKING,
    HEALTH_MEDICAL,
    INCOME_NONE,
    INCOME_SOLID,
    INCOME_UNSURE,
    LIFE_INSURANCE,
    NO_RETIREMENT_PLAN,
    RETIREMENT_OCCASIONAL,
    RETIREMENT_ON_TRACK,
    RETIREMENT_REGULAR,
    RETIREMENT_STARTED,
)


class CoverageState(str, Enum):
    COVERED = "covered"
    WORK_IN_PROGRESS = "wip"
    GAP = "gap"


COVERED = CoverageState.COVERED
WIP = CoverageState.WORK_IN_PROGRESS
GAP = CoverageState.GAP

# Display order; education sits between retirement and emergency.
CATEGORY_ORDER: Tuple[str, ...] = ("medical", "income", "retirement", "education", "emergency", "debt")
MANDATORY_CATEGORIES: Tuple[str, ...] = ("medical", "income", "retirement", "emergency", "debt")


@dataclass(frozen=True)
class CoverageMap:
    """Coverage state per category. ``education`` is None when not applicable."""

    medical: CoverageState
    income: CoverageState
    retirement: CoverageState
    emergency: CoverageState
    debt: CoverageState
    education: Optional[CoverageState] = None

    def items(self) -> Iterator[Tuple[str, CoverageState]]:
        """(category, state) pairs in display order, skipping absent ones."""
        for category in CATEGORY_ORDER:
            state = getattr(self, category)
            if state is not None:
                yield category, state

    def as_dict(self) -> Dict[str, str]:
        return {category: state.value for category, state in self.items()}

    def count(self, state: CoverageState) -> int:
        return sum(1 for _, s in self.items() if s is state)


EMERGENCY_STATES = {
    EMERGENCY_FUNDED: COVERED,
    EMERGENCY_WORKING: WIP,
    EMERGENCY_NOT_YET: GAP,
    EMERGENCY_WHAT: GAP,
}

DEBT_STATES = {
    DEBT_FREE: COVERED,
    DEBT_MANAGEABLE: WIP,
    DEBT_STRESSED: GAP,
    DEBT_UNDISCLOSED: WIP,
}

EDUCATION_STATES = {
    EDUCATION_COVERED: COVERED,
    EDUCATION_SAVING: WIP,
    EDUCATION_NOT_YET: GAP,
}


def _medical(answers: AnswerSet) -> CoverageState:
    return COVERED if HEALTH_MEDICAL in answers.insurance_coverage else GAP


def _income(answers: AnswerSet) -> CoverageState:
    confidence = answers.income_confidence
    if confidence:
        if confidence == INCOME_SOLID:
            return COVERED
        if confidence == INCOME_UNSURE:
            return WIP
        if confidence == INCOME_NONE:
            return GAP if answers.has_or_plans_dependents else WIP
        return WIP

    if LIFE_INSURANCE in answers.insurance_coverage:
        return COVERED
    return GAP if answers.has_or_plans_dependents else WIP


def _retirement(answers: AnswerSet) -> CoverageState:
    plan = answers.retirement_plan
    if plan in NO_RETIREMENT_PLAN:
        return GAP

    confidence = answers.retirement_confidence
    if confidence:
        if confidence == RETIREMENT_ON_TRACK:
            return COVERED if plan == RETIREMENT_REGULAR else WIP
        if confidence == RETIREMENT_STARTED:
            return WIP
        return GAP

    if plan == RETIREMENT_REGULAR:
        return COVERED
    if plan == RETIREMENT_OCCASIONAL:
        return WIP
    return GAP


def _education(answers: AnswerSet) -> Optional[CoverageState]:
    if not answers.has_or_plans_dependents or not answers.education_confidence:
        return None
    return EDUCATION_STATES.get(answers.education_confidence, WIP)


def derive_coverage(answers: AnswerSet) -> CoverageMap:
    """Classify every category for the given answers."""
    return CoverageMap(
        medical=_medical(answers),
        income=_income(answers),
        retirement=_retirement(answers),
        emergency=EMERGENCY_STATES.get(answers.emergency_fund, WIP),
        debt=DEBT_STATES.get(answers.debt_situation, WIP),
        education=_education(answers),
    )
