"""Consultation booking tools for MCP server."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from wellness.clients.sheets import SheetsWebhookClient
from wellness.data.booking import BOOKING_OPTIONS, BookingError, create_booking
from wellness.data.questionnaire_state import get_session
from wellness.logging_config import get_logger, set_response_id
from wellness.tools.questionnaire import error_result, session_not_found

logger = get_logger(__name__)


def register_booking_tools(mcp: FastMCP, sheets: SheetsWebhookClient) -> None:
    """Register booking tools with the MCP server."""

    @mcp.tool()
    async def get_booking_options() -> CallToolResult:
        """Lists the time slots available for a follow-up consultation."""
        options = "\n".join(f"- {o}" for o in BOOKING_OPTIONS)
        return CallToolResult(
            content=[TextContent(type="text", text=f"When suits you best?\n{options}")],
            structuredContent={"options": list(BOOKING_OPTIONS)},
        )

    @mcp.tool()
    async def book_consultation(
        session_id: str = Field(
            ...,
            description="The completed questionnaire session ID.",
        ),
        time_preference: str = Field(
            ...,
            description="One of the options returned by get_booking_options.",
        ),
        phone: str = Field(
            ...,
            description="Phone number to call back on.",
        ),
    ) -> CallToolResult:
        """Books a follow-up consultation for a completed questionnaire."""
        session = get_session(session_id)
        if session is None:
            return session_not_found()
        set_response_id(session.response_id)

        try:
            booking = create_booking(session, time_preference, phone)
        except BookingError as e:
            logger.info("Rejected booking: %s", e)
            return error_result(str(e))

        sheets.submit_booking(booking)

        return CallToolResult(
            content=[
                TextContent(
                    type="text",
                    text=f"You're booked in! We'll call {booking.phone}, {booking.time_preference}.",
                )
            ],
            structuredContent={"booked": True, **booking.to_dict()},
        )
