"""Questionnaire session state.

A session walks the user through the applicable questions one step at a time.
Sessions are stored in-memory and keyed by their response id, which is also
the identifier sent with the spreadsheet submission and any later booking.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Union
from uuid import uuid4

from wellness.data.answers import AnswerSet, toggle_option
from wellness.data.questions import MULTIPLE, QUESTIONS, TEXT, Question, applicable_questions
from wellness.logging_config import get_logger

if TYPE_CHECKING:
    from wellness.data.booking import BookingRequest

logger = get_logger(__name__)

AnswerValue = Union[str, List[str]]


class QuestionnaireError(Exception):
    """Base error for questionnaire input problems."""


class InvalidAnswerError(QuestionnaireError):
    pass


@dataclass
class QuestionnaireState:
    """Represents one user's pass through the questionnaire."""

    response_id: str
    current_step: int = 0
    answers: AnswerSet = field(default_factory=AnswerSet)
    completed: bool = False
    booking: Optional[BookingRequest] = None


# In-memory store for questionnaire sessions
_sessions: Dict[str, QuestionnaireState] = {}


def new_response_id() -> str:
    """Opaque id unique per session: epoch millis plus random hex."""
    return f"{int(time.time() * 1000)}-{uuid4().hex[:12]}"


def create_session() -> QuestionnaireState:
    session = QuestionnaireState(response_id=new_response_id())
    _sessions[session.response_id] = session
    logger.info("Questionnaire session %s started", session.response_id)
    return session


def get_session(response_id: str) -> Optional[QuestionnaireState]:
    return _sessions.get(response_id)


def clear_session(response_id: str) -> Optional[QuestionnaireState]:
    """Remove a session from the store.

    Returns:
        The removed session, or None if not found.
    """
    return _sessions.pop(response_id, None)


def get_current_question(session: QuestionnaireState) -> Optional[Question]:
    """The question at the current step, or None once completed."""
    if session.completed:
        return None
    questions = applicable_questions(session.answers)
    if session.current_step >= len(questions):
        return None
    return questions[session.current_step]


def total_steps(session: QuestionnaireState) -> int:
    return len(applicable_questions(session.answers))


def can_proceed(question: Question, answers: AnswerSet) -> bool:
    """Whether the stored answer for ``question`` is enough to move on."""
    value = getattr(answers, question.attr)
    if question.type == TEXT:
        return len(value.strip()) > 0
    if question.type == MULTIPLE:
        return len(value) > 0
    return question.optional or value != ""


def _parse(question: Question, value: Optional[AnswerValue]) -> AnswerValue:
    """Turn a raw answer into the value stored for ``question``."""
    if question.type == MULTIPLE:
        if value is None:
            selections: Iterable[str] = []
        elif isinstance(value, str):
            selections = [value]
        else:
            selections = value
        selected: List[str] = []
        for option in selections:
            if option not in question.options:
                raise InvalidAnswerError(f"'{option}' is not an option for {question.id}.")
            if option not in selected:
                selected = toggle_option(selected, option, question.exclusive_option)
        return selected

    if value is not None and not isinstance(value, str):
        raise InvalidAnswerError(f"{question.id} takes a single answer.")
    text = (value or "").strip()

    if question.type != TEXT and text and text not in question.options:
        raise InvalidAnswerError(f"'{text}' is not an option for {question.id}.")
    return text


def _clear_inapplicable(answers: AnswerSet) -> None:
    """Drop answers to conditional questions that no longer apply."""
    for question in QUESTIONS:
        if not question.applies_to(answers):
            setattr(answers, question.attr, [] if question.type == MULTIPLE else "")


def record_answer(response_id: str, value: Optional[AnswerValue]) -> Optional[QuestionnaireState]:
    """Record an answer for the current question and advance to the next.

    Args:
        response_id: The session to update.
        value: Text or choice answer, or the list of selections for a
            multi-select question. None or "" skips an optional question.

    Returns:
        The updated session, or None if the session was not found.

    Raises:
        InvalidAnswerError: The answer is not an option, or is missing for a
            required question.
    """
    session = _sessions.get(response_id)
    if session is None:
        return None

    question = get_current_question(session)
    if question is None:
        return session

    new_value = _parse(question, value)
    if not can_proceed(question, replace(session.answers, **{question.attr: new_value})):
        raise InvalidAnswerError(f"An answer is required for: {question.question}")

    setattr(session.answers, question.attr, new_value)
    _clear_inapplicable(session.answers)

    session.current_step += 1
    # The applicable list can shrink or grow with this answer
    if session.current_step >= total_steps(session):
        session.completed = True
        logger.info("Questionnaire session %s completed", response_id)

    return session


def previous_question(response_id: str) -> Optional[QuestionnaireState]:
    """Step back one question. A completed session stays completed."""
    session = _sessions.get(response_id)
    if session is None:
        return None
    if not session.completed and session.current_step > 0:
        session.current_step -= 1
    return session

