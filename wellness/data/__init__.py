"""Questionnaire data and session state package."""

from wellness.data.answers import AnswerSet, toggle_option
from wellness.data.booking import (
    BOOKING_OPTIONS,
    BookingError,
    BookingRequest,
    InvalidBookingOptionError,
    InvalidPhoneError,
    QuestionnaireIncompleteError,
    create_booking,
    normalize_phone,
)
from wellness.data.questionnaire_state import (
    InvalidAnswerError,
    QuestionnaireError,
    QuestionnaireState,
    can_proceed,
    clear_session,
    create_session,
    get_current_question,
    get_session,
    previous_question,
    record_answer,
    total_steps,
)
from wellness.data.questions import QUESTIONS, QUESTIONS_BY_ID, Question, applicable_questions

__all__ = [
    # Answers and questions
    "AnswerSet",
    "toggle_option",
    "QUESTIONS",
    "QUESTIONS_BY_ID",
    "Question",
    "applicable_questions",
    # Questionnaire state
    "InvalidAnswerError",
    "QuestionnaireError",
    "QuestionnaireState",
    "can_proceed",
    "clear_session",
    "create_session",
    "get_current_question",
    "get_session",
    "previous_question",
    "record_answer",
    "total_steps",
    # Booking
    "BOOKING_OPTIONS",
    "BookingError",
    "BookingRequest",
    "InvalidBookingOptionError",
    "InvalidPhoneError",
    "QuestionnaireIncompleteError",
    "create_booking",
    "normalize_phone",
]
