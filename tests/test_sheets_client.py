"""Tests for the spreadsheet webhook client."""

import asyncio
import json

import httpx

from wellness.clients.sheets import (
    SheetsWebhookClient,
    build_booking_payload,
    build_response_payload,
)
from wellness.data.answers import AnswerSet
from wellness.data.booking import BookingRequest

WEBHOOK_URL = "https://script.example.com/macros/s/abc/exec"


def _recording_transport(requests, status_code=200):
    def handler(request):
        requests.append(request)
        return httpx.Response(status_code, text="ok")

    return httpx.MockTransport(handler)


def test_response_payload_shape():
    answers = AnswerSet(name="Alex", insurance_coverage=["Health/Medical"])
    payload = build_response_payload(answers, "123-abc", user_agent="tests", referrer="https://ref")

    assert payload["name"] == "Alex"
    assert payload["insuranceCoverage"] == ["Health/Medical"]
    assert payload["responseId"] == "123-abc"
    assert payload["ua"] == "tests"
    assert payload["ref"] == "https://ref"


def test_booking_payload_shares_response_id():
    booking = BookingRequest(response_id="123-abc", time_preference="Evening (5pm - 8pm)", phone="0412345678")
    response = build_response_payload(AnswerSet(name="Alex"), "123-abc")

    payload = build_booking_payload(booking)
    assert payload["type"] == "booking"
    assert payload["responseId"] == response["responseId"]
    assert payload["phone"] == "0412345678"


def test_post_sends_json_as_plain_text():
    requests = []
    client = SheetsWebhookClient(WEBHOOK_URL, transport=_recording_transport(requests))

    ok = asyncio.run(client.post({"responseId": "1", "debtSituation": "Debt-free! 🎉"}))

    assert ok is True
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK_URL
    assert request.headers["Content-Type"] == "text/plain;charset=utf-8"
    assert json.loads(request.content.decode("utf-8")) == {"responseId": "1", "debtSituation": "Debt-free! 🎉"}


def test_missing_url_is_skipped():
    requests = []
    client = SheetsWebhookClient("", transport=_recording_transport(requests))

    assert asyncio.run(client.post({"responseId": "1"})) is False
    assert requests == []


def test_error_status_returns_false():
    client = SheetsWebhookClient(WEBHOOK_URL, transport=_recording_transport([], status_code=500))
    assert asyncio.run(client.post({"responseId": "1"})) is False


def test_transport_error_is_swallowed():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    client = SheetsWebhookClient(WEBHOOK_URL, transport=httpx.MockTransport(handler))
    assert asyncio.run(client.post({"responseId": "1"})) is False


def test_dispatch_runs_in_background():
    requests = []
    client = SheetsWebhookClient(WEBHOOK_URL, transport=_recording_transport(requests))

    async def run():
        task = client.submit_responses(AnswerSet(name="Alex"), "123-abc")
        assert not task.done()
        await client.drain()
        return task

    task = asyncio.run(run())

    assert task.result() is True
    assert json.loads(requests[0].content)["responseId"] == "123-abc"
    assert not client._pending


def test_failed_dispatch_does_not_raise():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    client = SheetsWebhookClient(WEBHOOK_URL, transport=httpx.MockTransport(handler))

    async def run():
        booking = BookingRequest(response_id="1", time_preference="Morning (9am - 12pm)", phone="0412345678")
        task = client.submit_booking(booking)
        await client.drain()
        return task

    assert asyncio.run(run()).result() is False
