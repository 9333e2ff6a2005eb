"""MCP resources for widget templates."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from mcp.server.fastmcp import FastMCP

# Widget configuration
WIDGET_DIR = Path(__file__).resolve().parent.parent.parent / "public"
RESULTS_TEMPLATE_URI = "ui://widget/results-card.html"
MIME_TYPE = "text/html+skybridge"


@lru_cache(maxsize=1)
def load_results_widget_html() -> str:
    """Load and cache the results card widget HTML."""
    return (WIDGET_DIR / "results-card.html").read_text(encoding="utf-8")


def widget_meta() -> dict:
    """Standard meta for widget-backed tools (used in tool listing and results)."""
    return {
        "openai/outputTemplate": RESULTS_TEMPLATE_URI,
        "openai/toolInvocation/invoking": "Building your snapshot",
        "openai/toolInvocation/invoked": "Snapshot ready",
        "openai/widgetAccessible": True,
    }


def register_resources(mcp: FastMCP) -> None:
    """Register widget resources with the MCP server."""

    @mcp.resource(
        RESULTS_TEMPLATE_URI,
        name="Financial wellness results card",
        mime_type=MIME_TYPE,
    )
    async def results_widget() -> str:
        """Returns the results card HTML with coverage tiles and persona."""
        return load_results_widget_html()
