"""Follow-up consultation booking for a completed questionnaire."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List

from wellness.data.questionnaire_state import QuestionnaireError, QuestionnaireState
from wellness.logging_config import get_logger

logger = get_logger(__name__)

BOOKING_OPTIONS: List[str] = [
    "Morning (9am - 12pm)",
    "Afternoon (12pm - 5pm)",
    "Evening (5pm - 8pm)",
]

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15

_PHONE_SEPARATORS = re.compile(r"[\s\-.()]")


class BookingError(QuestionnaireError):
    pass


class InvalidPhoneError(BookingError):
    pass


class InvalidBookingOptionError(BookingError):
    pass


class QuestionnaireIncompleteError(BookingError):
    pass


@dataclass(frozen=True)
class BookingRequest:
    response_id: str
    time_preference: str
    phone: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "responseId": self.response_id,
            "timePreference": self.time_preference,
            "phone": self.phone,
        }


def normalize_phone(raw: str) -> str:
    """Strip separators and check the digit count. A leading + is kept."""
    compact = _PHONE_SEPARATORS.sub("", raw.strip())
    prefix = ""
    if compact.startswith("+"):
        prefix, compact = "+", compact[1:]
    if not compact.isdigit() or not MIN_PHONE_DIGITS <= len(compact) <= MAX_PHONE_DIGITS:
        raise InvalidPhoneError(f"'{raw}' doesn't look like a phone number.")
    return prefix + compact


def create_booking(session: QuestionnaireState, time_preference: str, phone: str) -> BookingRequest:
    """Validate and attach a booking to a completed session.

    Raises:
        QuestionnaireIncompleteError: The questionnaire isn't finished yet.
        InvalidBookingOptionError: Unknown time preference.
        InvalidPhoneError: The phone number can't be normalized.
    """
    if not session.completed:
        raise QuestionnaireIncompleteError("Finish the questionnaire before booking a consultation.")
    if time_preference not in BOOKING_OPTIONS:
        raise InvalidBookingOptionError(
            f"'{time_preference}' is not a booking option. Choose one of: {', '.join(BOOKING_OPTIONS)}"
        )

    booking = BookingRequest(
        response_id=session.response_id,
        time_preference=time_preference,
        phone=normalize_phone(phone),
    )
    session.booking = booking
    logger.info("Booking recorded for %s (%s)", session.response_id, time_preference)
    return booking
