"""Result rendering package."""

from wellness.rendering.summary import (
    render_answer_summary,
    render_results_text,
    results_payload,
)

__all__ = [
    "render_answer_summary",
    "render_results_text",
    "results_payload",
]
