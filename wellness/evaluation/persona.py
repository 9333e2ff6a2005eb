"""Persona selection.

Rules are checked top to bottom and the first match wins, so an earlier rule
always shadows a later one that would also match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from wellness.data.answers import AnswerSet
from wellness.data.questions import GROWTH_CONCERNS, LIFE_INSURANCE
from wellness.evaluation.coverage import COVERED, GAP, CoverageMap


@dataclass(frozen=True)
class Persona:
    key: str
    name: str
    lines: Tuple[str, str]
    theme: str

    def to_dict(self) -> Dict[str, object]:
        return {"key": self.key, "name": self.name, "lines": list(self.lines), "theme": self.theme}


GETTING_STARTED = Persona(
    key="getting_started",
    name="The Foundation Setter",
    lines=(
        "Everyone starts at square one, and you've just taken the first step.",
        "Pick one area below and build from there. Small moves add up fast.",
    ),
    theme="slate",
)

GROWTH_PLANNER = Persona(
    key="growth_planner",
    name="The Growth-Oriented Planner",
    lines=(
        "Your safety net is in place and your future self is already being looked after.",
        "Now it's about making your money work harder for you.",
    ),
    theme="emerald",
)

FAMILY_PROTECTOR = Persona(
    key="family_protector",
    name="The Family Protector",
    lines=(
        "You put the people you love first, and your cover shows it.",
        "Next up: making sure every part of the plan keeps pace with your family.",
    ),
    theme="rose",
)

SAFETY_GUARDIAN = Persona(
    key="safety_guardian",
    name="The Safety-First Guardian",
    lines=(
        "Cash in the bank and debt under control. You've built a solid base.",
        "Turning some of that stability into retirement savings is your next win.",
    ),
    theme="sky",
)

STRONG_STARTER = Persona(
    key="strong_starter",
    name="The Strong Starter",
    lines=(
        "You've got some pieces in place and a few still to build.",
        "Focus on the gaps one at a time and you'll feel the difference quickly.",
    ),
    theme="amber",
)

FREE_SPIRIT = Persona(
    key="free_spirit",
    name="The Free-Spirited Builder",
    lines=(
        "You're making progress on your own terms, and most of the basics are moving.",
        "A little structure will turn those good habits into real momentum.",
    ),
    theme="violet",
)

PERSONAS: List[Persona] = [
    GETTING_STARTED,
    GROWTH_PLANNER,
    FAMILY_PROTECTOR,
    SAFETY_GUARDIAN,
    STRONG_STARTER,
    FREE_SPIRIT,
]

Rule = Tuple[Callable[[AnswerSet, CoverageMap], bool], Persona]


def _square_one(answers: AnswerSet, coverage: CoverageMap) -> bool:
    return coverage.count(COVERED) == 0 and coverage.count(GAP) >= 3


def _growth_ready(answers: AnswerSet, coverage: CoverageMap) -> bool:
    return (
        coverage.emergency is COVERED
        and coverage.retirement is COVERED
        and answers.top_concern in GROWTH_CONCERNS
    )


def _protects_family(answers: AnswerSet, coverage: CoverageMap) -> bool:
    return answers.has_or_plans_dependents and LIFE_INSURANCE in answers.insurance_coverage


def _safety_first(answers: AnswerSet, coverage: CoverageMap) -> bool:
    return (
        coverage.emergency is COVERED
        and coverage.debt is COVERED
        and coverage.retirement is not COVERED
    )


def _several_gaps(answers: AnswerSet, coverage: CoverageMap) -> bool:
    return coverage.count(GAP) >= 2


PERSONA_RULES: List[Rule] = [
    (_square_one, GETTING_STARTED),
    (_growth_ready, GROWTH_PLANNER),
    (_protects_family, FAMILY_PROTECTOR),
    (_safety_first, SAFETY_GUARDIAN),
    (_several_gaps, STRONG_STARTER),
]

DEFAULT_PERSONA = FREE_SPIRIT


def select_persona(answers: AnswerSet, coverage: CoverageMap) -> Persona:
    """Return the persona of the first matching rule."""
    for predicate, persona in PERSONA_RULES:
        if predicate(answers, coverage):
            return persona
    return DEFAULT_PERSONA
