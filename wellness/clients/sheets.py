"""Fire-and-forget submission of responses to a spreadsheet web app.

The web app (a Google Apps Script endpoint) appends one row per POST. It
sends no CORS headers and is treated as best-effort telemetry: failures are
logged and never reach the user.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Optional, Set

import httpx

from wellness.data.answers import AnswerSet
from wellness.data.booking import BookingRequest
from wellness.logging_config import get_logger

logger = get_logger(__name__)

CONTENT_TYPE = "text/plain;charset=utf-8"


def build_response_payload(
    answers: AnswerSet,
    response_id: str,
    user_agent: str = "",
    referrer: str = "",
) -> Dict[str, Any]:
    payload: Dict[str, Any] = answers.to_dict()
    payload["responseId"] = response_id
    payload["ua"] = user_agent
    payload["ref"] = referrer
    return payload


def build_booking_payload(booking: BookingRequest) -> Dict[str, Any]:
    return {"type": "booking", **booking.to_dict()}


class SheetsWebhookClient:
    """POSTs JSON payloads to the configured spreadsheet web app URL."""

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport
        self._pending: Set[asyncio.Task] = set()

    async def post(self, payload: Dict[str, Any]) -> bool:
        """Send one payload. Returns True on a 2xx response, never raises."""
        response_id = payload.get("responseId", "N/A")
        if not self.webhook_url:
            logger.error("Missing SHEETS_WEBAPP_URL, dropping submission %s", response_id)
            return False

        body = json.dumps(payload, ensure_ascii=False)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.webhook_url,
                    content=body.encode("utf-8"),
                    headers={"Content-Type": CONTENT_TYPE},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Sheets submit failed for %s: %s", response_id, e)
            return False

        if not response.is_success:
            logger.error("Sheets submit for %s returned %s", response_id, response.status_code)
            return False

        logger.info("Submitted %s to sheets", response_id)
        return True

    def dispatch(self, payload: Dict[str, Any]) -> asyncio.Task:
        """Schedule ``post`` on the running loop without waiting for it."""
        task = asyncio.get_running_loop().create_task(self.post(payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def submit_responses(
        self,
        answers: AnswerSet,
        response_id: str,
        user_agent: str = "",
        referrer: str = "",
    ) -> asyncio.Task:
        return self.dispatch(build_response_payload(answers, response_id, user_agent, referrer))

    def submit_booking(self, booking: BookingRequest) -> asyncio.Task:
        return self.dispatch(build_booking_payload(booking))

    async def drain(self) -> None:
        """Wait for submissions still in flight."""
        if self._pending:
            await asyncio.gather(*list(self._pending))
