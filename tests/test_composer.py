"""Tests for the event creation form."""

from datetime import date

import httpx
import pytest

from client.api_client import EventsAPIClient
from client.composer import FAILURE_MESSAGE, SUCCESS_MESSAGE, EventComposer

TODAY = date(2025, 3, 14)


def fill(composer, **overrides):
    values = {
        "title": "Planning",
        "start_time": "09:00",
        "end_time": "10:00",
        "creator_name": "Mike",
        "creator_email": "mike@example.com",
    }
    values.update(overrides)
    for name, value in values.items():
        composer.update_field(name, value)


def test_defaults_to_today(api):
    composer = EventComposer(api, today=lambda: TODAY)

    assert composer.form.start_date == "2025-03-14"
    assert composer.form.end_date == "2025-03-14"
    assert composer.form.title == ""


def test_unknown_field_rejected(api):
    with pytest.raises(ValueError):
        EventComposer(api).update_field("color", "red")


def test_missing_fields_block_submission(api, client):
    composer = EventComposer(api, today=lambda: TODAY)
    composer.update_field("title", "Planning")

    assert composer.submit() is None
    assert composer.message.type == "error"
    assert "start_time" in composer.message.text
    assert client.get("/api/events").json()["events"] == []


def test_successful_submit_resets_form(api, client):
    composer = EventComposer(api, today=lambda: TODAY)
    fill(composer, location="HQ")

    created = composer.submit()

    assert created is not None
    assert created.title == "Planning"
    assert created.start_date == "2025-03-14"
    assert composer.message.type == "success"
    assert composer.message.text == SUCCESS_MESSAGE
    assert composer.form.title == ""
    assert composer.form.start_date == "2025-03-14"
    assert composer.is_submitting is False
    assert client.get(f"/api/events/{created.id}").status_code == 200


@pytest.mark.parametrize(
    "response, expected",
    [
        (httpx.Response(400, json={"error": "Missing required fields"}), "Missing required fields"),
        (httpx.Response(500, text="oops"), FAILURE_MESSAGE),
    ],
)
def test_failed_submit_keeps_form(response, expected):
    transport = httpx.MockTransport(lambda request: response)
    api = EventsAPIClient(base_url="http://calendar/api", http_client=httpx.Client(transport=transport))
    composer = EventComposer(api, today=lambda: TODAY)
    fill(composer)

    assert composer.submit() is None
    assert composer.message.type == "error"
    assert composer.message.text == expected
    assert composer.form.title == "Planning"
    assert composer.is_submitting is False
