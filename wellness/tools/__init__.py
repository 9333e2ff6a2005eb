"""MCP tools package.

This package contains modular tool registration functions for the MCP server.
Each module focuses on a specific domain of functionality.
"""

from wellness.tools.booking import register_booking_tools
from wellness.tools.questionnaire import register_questionnaire_tools

__all__ = [
    "register_booking_tools",
    "register_questionnaire_tools",
]
