import asyncio
import time
import pytest

from linkharvest.core.constants import TITLE_SELECTOR, COUNT_SELECTOR
from linkharvest.core.errors import MetadataParseError
from linkharvest.harvest.session import Session, open_session, parse_count

URL = "https://example.com/collection/42"


@pytest.mark.parametrize("text,expected", [
    ("3", 3),
    (" 120\n", 120),
    ("1,204", 1204),
    ("12,345,678", 12345678),
    ("0", 0),
])
def test_parse_count(text, expected):
    assert parse_count(text) == expected


@pytest.mark.parametrize("text", [
    None, "", "   ", "abc", "12 items", "-3", "4.5",
    "1,,2", "_3_", "1_0,0", "12,34", ",123", "1,234,", "1_000",
])
def test_parse_count_rejects_non_numbers(text):
    with pytest.raises(MetadataParseError) as exc_info:
        parse_count(text)
    assert exc_info.value.text == text


def test_open_session_reads_markers(make_page):
    page = make_page(markers={TITLE_SELECTOR: "  Space Cats \n", COUNT_SELECTOR: "3"})

    session = asyncio.run(open_session(page, URL))

    assert session.url == URL
    assert session.title == "Space Cats"
    assert session.expected_count == 3
    assert page.calls == [
        ("goto", URL),
        ("wait_for_selector", TITLE_SELECTOR),
        ("wait_for_selector", COUNT_SELECTOR),
    ]


def test_open_session_malformed_count(make_page):
    page = make_page(markers={TITLE_SELECTOR: "Space Cats", COUNT_SELECTOR: "lots"})
    with pytest.raises(MetadataParseError):
        asyncio.run(open_session(page, URL))


def test_navigation_error_propagates_unchanged(make_page):
    error = ConnectionError("net::ERR_NAME_NOT_RESOLVED")
    page = make_page(goto_error=error)
    with pytest.raises(ConnectionError) as exc_info:
        asyncio.run(open_session(page, URL))
    assert exc_info.value is error


def test_session_is_immutable():
    session = Session(url=URL, title="Space Cats", expected_count=3)
    with pytest.raises(AttributeError):
        session.expected_count = 4


def test_session_elapsed():
    session = Session(url=URL, title="t", expected_count=1, started_at=time.monotonic() - 5)
    assert session.elapsed >= 5
