"""Questionnaire tools for MCP server."""

from __future__ import annotations

from typing import List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from wellness.clients.sheets import SheetsWebhookClient
from wellness.data.questionnaire_state import (
    QuestionnaireError,
    QuestionnaireState,
    create_session,
    get_current_question,
    get_session,
    previous_question as step_back,
    record_answer,
    total_steps,
)
from wellness.data.questions import MULTIPLE, TEXT, Question
from wellness.evaluation import evaluate
from wellness.logging_config import get_logger, set_response_id
from wellness.rendering.summary import render_answer_summary, render_results_text, results_payload
from wellness.resources.templates import widget_meta

logger = get_logger(__name__)

# Sent as the "ua" column; MCP calls carry no browser user agent.
SUBMISSION_SOURCE = "mcp:wellness-questionnaire"


def _questionnaire_meta(session_id: Optional[str] = None) -> dict:
    """Meta for questionnaire tools with optional session tracking."""
    meta = {
        "openai/toolInvocation/invoking": "Processing answer",
        "openai/toolInvocation/invoked": "Questionnaire response ready",
    }
    if session_id:
        meta["openai/widgetSessionId"] = session_id
    return meta


def _results_meta(session_id: str) -> dict:
    meta = widget_meta()
    meta["openai/widgetSessionId"] = session_id
    return meta


def error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        structuredContent={"error": message},
        isError=True,
    )


def session_not_found() -> CallToolResult:
    return error_result("Session not found. Please start the questionnaire again.")


def _answer_hint(question: Question) -> str:
    if question.type == TEXT:
        return "Please type your answer."
    options = "\n".join(f"- {o}" for o in question.options)
    if question.type == MULTIPLE:
        hint = "Pick all that apply"
        if question.exclusive_option:
            hint += f' ("{question.exclusive_option}" can\'t be combined with others)'
        return f"{hint}:\n{options}"
    if question.optional:
        return f"Pick one, or skip:\n{options}"
    return f"Pick one:\n{options}"


def question_result(session: QuestionnaireState, question: Question, intro: str = "") -> CallToolResult:
    """Return the question at the session's current step."""
    number = session.current_step + 1
    total = total_steps(session)

    message = f"Question {number}/{total}: {question.question}\n\n"
    if question.subtitle:
        message += f"{question.subtitle}\n\n"
    message = intro + message + _answer_hint(question)

    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        structuredContent={
            "sessionId": session.response_id,
            "currentQuestion": number,
            "totalQuestions": total,
            "questionId": question.id,
            "questionText": question.question,
            "questionType": question.type,
            "options": list(question.options),
            "optional": question.optional,
            "completed": False,
        },
        _meta=_questionnaire_meta(session.response_id),
    )


def results_result(session: QuestionnaireState, intro: str = "") -> CallToolResult:
    """Return the evaluated results for a completed session."""
    evaluation = evaluate(session.answers)
    message = (
        f"{intro}{render_results_text(session.answers, evaluation)}\n\n"
        f"Your snapshot:\n{render_answer_summary(session.answers)}"
    )

    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        structuredContent={
            "sessionId": session.response_id,
            "completed": True,
            "answers": session.answers.to_dict(),
            **results_payload(session.answers, evaluation),
        },
        _meta=_results_meta(session.response_id),
    )


def register_questionnaire_tools(mcp: FastMCP, sheets: SheetsWebhookClient) -> None:
    """Register questionnaire tools with the MCP server."""

    @mcp.tool()
    async def start_questionnaire() -> CallToolResult:
        """Starts the financial wellness questionnaire.

        Walks through a short set of questions about insurance, retirement,
        savings and debt. At the end you'll get a coverage snapshot and a
        persona that sums up where you are today.
        """
        session = create_session()
        set_response_id(session.response_id)
        return question_result(
            session,
            get_current_question(session),
            intro="Welcome! Let's take a quick snapshot of your financial wellness.\n\n",
        )

    @mcp.tool()
    async def answer_question(
        session_id: str = Field(
            ...,
            description="The questionnaire session ID from the previous response.",
        ),
        answer: Optional[str] = Field(
            default=None,
            description="Answer text or the chosen option. Leave empty to skip an optional question.",
        ),
        selections: Optional[List[str]] = Field(
            default=None,
            description="Chosen options for a select-all-that-apply question, in the order picked.",
        ),
    ) -> CallToolResult:
        """Records an answer to the current question and returns the next question or the results.

        Call this tool with the user's answer to the current question. After
        the last question the answers are evaluated and submitted.
        """
        session = get_session(session_id)
        if session is None:
            return session_not_found()
        set_response_id(session.response_id)

        if session.completed:
            return results_result(session, intro="Questionnaire already completed.\n\n")

        value = selections if selections is not None else answer
        try:
            updated_session = record_answer(session_id, value)
        except QuestionnaireError as e:
            logger.info("Rejected answer: %s", e)
            return error_result(str(e))
        if updated_session is None:
            return session_not_found()

        if updated_session.completed:
            sheets.submit_responses(
                updated_session.answers,
                updated_session.response_id,
                user_agent=SUBMISSION_SOURCE,
            )
            return results_result(updated_session)

        return question_result(updated_session, get_current_question(updated_session))

    @mcp.tool()
    async def previous_question(
        session_id: str = Field(
            ...,
            description="The questionnaire session ID from the previous response.",
        ),
    ) -> CallToolResult:
        """Goes back to the previous question so the user can change their answer."""
        session = step_back(session_id)
        if session is None:
            return session_not_found()
        set_response_id(session.response_id)

        if session.completed:
            return results_result(session, intro="Questionnaire already completed.\n\n")
        return question_result(session, get_current_question(session))

    @mcp.tool(meta=widget_meta())
    async def get_results(
        session_id: str = Field(
            ...,
            description="The questionnaire session ID.",
        ),
    ) -> CallToolResult:
        """Shows the coverage snapshot and persona for a completed questionnaire."""
        session = get_session(session_id)
        if session is None:
            return session_not_found()
        set_response_id(session.response_id)

        if not session.completed:
            return question_result(
                session,
                get_current_question(session),
                intro="Not quite done yet! Let's pick up where you left off.\n\n",
            )
        return results_result(session)
