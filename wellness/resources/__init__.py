"""MCP resources package (widget HTML, templates).

This package contains resource registration and template utilities.
"""

from wellness.resources.templates import (
    MIME_TYPE,
    RESULTS_TEMPLATE_URI,
    WIDGET_DIR,
    load_results_widget_html,
    register_resources,
    widget_meta,
)

__all__ = [
    "MIME_TYPE",
    "RESULTS_TEMPLATE_URI",
    "WIDGET_DIR",
    "load_results_widget_html",
    "register_resources",
    "widget_meta",
]
