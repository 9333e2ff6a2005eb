"""Text and structured renderings of questionnaire results."""

from __future__ import annotations

from typing import Any, Dict, List

from wellness.data.answers import AnswerSet
from wellness.evaluation import Evaluation, Tile, partition_tiles
from wellness.evaluation.tiles import STATE_LABELS

SNAPSHOT_LABELS = [
    ("Age Range", "age_range"),
    ("Dependents", "has_kids"),
    ("Insurance Coverage", "insurance_coverage"),
    ("Income Protection", "income_confidence"),
    ("Retirement Planning", "retirement_plan"),
    ("Retirement Outlook", "retirement_confidence"),
    ("Education Savings", "education_confidence"),
    ("Emergency Fund", "emergency_fund"),
    ("Debt Status", "debt_situation"),
    ("Top Priority", "top_concern"),
]


def _tile_lines(tiles: List[Tile]) -> str:
    return "\n".join(f"- {t.label}: {STATE_LABELS[t.state]}" for t in tiles)


def render_answer_summary(answers: AnswerSet) -> str:
    """Profile snapshot, one line per answered field."""
    lines = []
    for label, attr in SNAPSHOT_LABELS:
        value = getattr(answers, attr)
        if isinstance(value, list):
            value = ", ".join(value) if value else "None"
        if value:
            lines.append(f"- {label}: {value}")
    return "\n".join(lines)


def render_results_text(answers: AnswerSet, evaluation: Evaluation) -> str:
    persona = evaluation.persona
    covered, needs_attention = partition_tiles(evaluation.tiles)

    parts = [
        f"All set, {answers.name}! 👏 You're **{persona.name}**.",
        "\n".join(persona.lines),
    ]
    if covered:
        parts.append(f"**You've got covered:**\n{_tile_lines(covered)}")
    if needs_attention:
        parts.append(f"**Needs attention:**\n{_tile_lines(needs_attention)}")
    return "\n\n".join(parts)


def results_payload(answers: AnswerSet, evaluation: Evaluation) -> Dict[str, Any]:
    covered, needs_attention = partition_tiles(evaluation.tiles)
    return {
        "name": answers.name,
        "coverage": evaluation.coverage.as_dict(),
        "persona": evaluation.persona.to_dict(),
        "tiles": {
            "covered": [t.to_dict() for t in covered],
            "needsAttention": [t.to_dict() for t in needs_attention],
        },
    }
