import pytest

from wellness.data import questionnaire_state
from wellness.data.answers import AnswerSet


@pytest.fixture(autouse=True)
def clear_sessions():
    questionnaire_state._sessions.clear()
    yield
    questionnaire_state._sessions.clear()


@pytest.fixture
def make_answers():
    """Build an AnswerSet with sensible defaults overridden per test."""

    def _make(**overrides):
        values = {
            "name": "Alex",
            "age_range": "30-39",
            "has_kids": "No",
            "insurance_coverage": [],
            "retirement_plan": "Not yet",
            "emergency_fund": "Not yet",
            "debt_situation": "Bit stressed about it",
            "top_concern": "Saving enough",
        }
        values.update(overrides)
        return AnswerSet(**values)

    return _make
