"""Outbound HTTP clients."""

from wellness.clients.sheets import (
    SheetsWebhookClient,
    build_booking_payload,
    build_response_payload,
)

__all__ = [
    "SheetsWebhookClient",
    "build_booking_payload",
    "build_response_payload",
]
