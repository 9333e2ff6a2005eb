"""Display tiles for the results card."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from wellness.evaluation.coverage import COVERED, CoverageMap, CoverageState

CATEGORY_LABELS = {
    "medical": "Medical",
    "income": "Income Protection",
    "retirement": "Retirement",
    "education": "Education",
    "emergency": "Emergency Fund",
    "debt": "Debt",
}

STATE_LABELS = {
    CoverageState.COVERED: "Covered",
    CoverageState.WORK_IN_PROGRESS: "Work in progress",
    CoverageState.GAP: "Gap",
}


@dataclass(frozen=True)
class Tile:
    category: str
    label: str
    state: CoverageState

    def to_dict(self) -> Dict[str, str]:
        return {
            "category": self.category,
            "label": self.label,
            "state": self.state.value,
            "stateLabel": STATE_LABELS[self.state],
        }


def project_tiles(coverage: CoverageMap) -> List[Tile]:
    return [Tile(category, CATEGORY_LABELS[category], state) for category, state in coverage.items()]


def partition_tiles(tiles: Sequence[Tile]) -> Tuple[List[Tile], List[Tile]]:
    """Split tiles into (covered, needs attention), keeping their order."""
    covered = [t for t in tiles if t.state is COVERED]
    needs_attention = [t for t in tiles if t.state is not COVERED]
    return covered, needs_attention
