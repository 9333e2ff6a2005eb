"""Coverage and persona evaluation package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from wellness.data.answers import AnswerSet
from wellness.evaluation.coverage import (
    CATEGORY_ORDER,
    CoverageMap,
    CoverageState,
    derive_coverage,
)
from wellness.evaluation.persona import PERSONA_RULES, PERSONAS, Persona, select_persona
from wellness.evaluation.tiles import Tile, partition_tiles, project_tiles


@dataclass(frozen=True)
class Evaluation:
    coverage: CoverageMap
    persona: Persona
    tiles: List[Tile]


def evaluate(answers: AnswerSet) -> Evaluation:
    """Derive coverage, persona and tiles in one pass."""
    coverage = derive_coverage(answers)
    return Evaluation(
        coverage=coverage,
        persona=select_persona(answers, coverage),
        tiles=project_tiles(coverage),
    )


__all__ = [
    "CATEGORY_ORDER",
    "CoverageMap",
    "CoverageState",
    "Evaluation",
    "PERSONAS",
    "PERSONA_RULES",
    "Persona",
    "Tile",
    "derive_coverage",
    "evaluate",
    "partition_tiles",
    "project_tiles",
    "select_persona",
]
