"""Answer set collected by the questionnaire."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from wellness.data.questions import DEPENDENT_ANSWERS, QUESTIONS


@dataclass
class AnswerSet:
    """Answers given so far. Unanswered fields are empty strings."""

    name: str = ""
    age_range: str = ""
    has_kids: str = ""
    insurance_coverage: List[str] = field(default_factory=list)
    income_confidence: str = ""
    retirement_plan: str = ""
    retirement_confidence: str = ""
    education_confidence: str = ""
    emergency_fund: str = ""
    debt_situation: str = ""
    top_concern: str = ""

    @property
    def has_or_plans_dependents(self) -> bool:
        return self.has_kids in DEPENDENT_ANSWERS

    def to_dict(self) -> Dict[str, Union[str, List[str]]]:
        """Answers keyed by question id."""
        data: Dict[str, Union[str, List[str]]] = {}
        for question in QUESTIONS:
            value = getattr(self, question.attr)
            data[question.id] = list(value) if isinstance(value, list) else value
        return data


def toggle_option(current: List[str], value: str, exclusive: Optional[str] = None) -> List[str]:
    """Apply a click on a multi-select option and return the new selection.

    Clicking a selected option deselects it. Clicking the exclusive option
    replaces the whole selection, and clicking any other option drops the
    exclusive one.
    """
    if value in current:
        return [v for v in current if v != value]
    if exclusive is not None and value == exclusive:
        return [value]
    return [v for v in current if v != exclusive] + [value]
