"""Financial wellness questionnaire MCP server with widget UI support for ChatGPT Apps SDK.

This server exposes tools for walking through the questionnaire, viewing the
coverage snapshot and booking a follow-up consultation. Results render in a
results card widget inline in ChatGPT conversations.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from wellness.clients.sheets import SheetsWebhookClient
from wellness.config import Settings
from wellness.resources import register_resources
from wellness.tools import register_booking_tools, register_questionnaire_tools


def _transport_security_settings(settings: Settings) -> TransportSecuritySettings:
    if not settings.allowed_hosts and not settings.allowed_origins:
        return TransportSecuritySettings(enable_dns_rebinding_protection=False)
    return TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=settings.allowed_hosts,
        allowed_origins=settings.allowed_origins,
    )


def create_mcp_server(
    settings: Settings,
    sheets: Optional[SheetsWebhookClient] = None,
) -> FastMCP:
    """Create and configure the MCP server with questionnaire and booking tools."""
    if sheets is None:
        sheets = SheetsWebhookClient(settings.sheets_webapp_url, timeout=settings.sheets_timeout)

    mcp = FastMCP(
        name="financial-wellness-questionnaire",
        stateless_http=True,
        transport_security=_transport_security_settings(settings),
    )

    register_resources(mcp)
    register_questionnaire_tools(mcp, sheets)
    register_booking_tools(mcp, sheets)

    return mcp
