# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from tasklist.tasks.errors import InvalidDate, InvalidIdentifier
from tasklist.tasks.task_models import (
    Deadline,
    IdMode,
    NumericId,
    Task,
    TokenId,
    parse_identifier,
)


def test_numeric_id_parses_base10_int64() -> None:
    assert parse_identifier("42") == NumericId(42)
    assert parse_identifier(" 7 ") == NumericId(7)
    assert parse_identifier(str(2**63 - 1)) == NumericId(2**63 - 1)


@pytest.mark.parametrize(
    "raw", ["", "abc", "1.5", "0x10", "1_000", str(2**63), "\u0661", "\uff11", "1\u0662"]
)
def test_numeric_id_rejects_garbage(raw: str) -> None:
    with pytest.raises(InvalidIdentifier):
        parse_identifier(raw)


def test_token_id_is_verbatim_and_rejects_whitespace() -> None:
    assert parse_identifier(" abc-1 ", IdMode.TOKEN) == TokenId("abc-1")
    with pytest.raises(InvalidIdentifier):
        parse_identifier("two words", IdMode.TOKEN)
    with pytest.raises(InvalidIdentifier):
        parse_identifier("   ", IdMode.TOKEN)
    with pytest.raises(InvalidIdentifier):
        parse_identifier("bad\x07", IdMode.TOKEN)


@pytest.mark.parametrize("raw", ["a#b", "hi!", "x.y", "caf\u00e9", "#tag"])
def test_token_id_allows_only_word_characters(raw: str) -> None:
    with pytest.raises(InvalidIdentifier):
        parse_identifier(raw, IdMode.TOKEN)
    assert parse_identifier("Fix_bug-42", IdMode.TOKEN) == TokenId("Fix_bug-42")


def test_identifier_variants_never_compare_equal() -> None:
    assert NumericId(1) != TokenId("1")
    assert str(NumericId(1)) == str(TokenId("1")) == "1"


def test_id_mode_from_str_defaults_to_numeric() -> None:
    assert IdMode.from_str("token") is IdMode.TOKEN
    assert IdMode.from_str("TOKEN") is IdMode.TOKEN
    assert IdMode.from_str(None) is IdMode.NUMERIC
    assert IdMode.from_str("weird") is IdMode.NUMERIC


def test_deadline_parse_and_format() -> None:
    d = Deadline.parse("2020-07-21")
    assert not d.is_empty()
    assert d.day == date(2020, 7, 21)
    assert d.format() == " (2020-07-21)"

    empty = Deadline()
    assert empty.is_empty()
    assert empty.format() == ""


@pytest.mark.parametrize(
    "raw",
    ["", "20200721", "2020-13-01", "2021-02-29", "tomorrow", "2020-7-1", "2020-07-1", "2020-\u0660\u0667-01"],
)
def test_deadline_rejects_other_formats(raw: str) -> None:
    with pytest.raises(InvalidDate):
        Deadline.parse(raw)


def test_deadline_due_uses_calendar_dates() -> None:
    d = Deadline.parse("2021-11-29")
    assert d.is_due_on_or_before(date(2021, 11, 30))
    assert d.is_due_on_or_before(date(2021, 11, 29))
    assert not d.is_due_on_or_before(date(2021, 11, 28))
    # Lexically "2021-11-29" > "20211130"; by calendar it is the day before.
    assert Deadline.parse("2021-11-29").day < Deadline.parse("2021-11-30").day

    assert not Deadline().is_due_on_or_before(date(2999, 1, 1))


def test_task_render_plain_done_and_with_deadline() -> None:
    task = Task(id=NumericId(1), description="Eat more donuts.")
    assert task.render() == "    [ ] 1: Eat more donuts."

    task.set_done(True)
    assert task.render() == "    [X] 1: Eat more donuts."

    task.set_deadline(Deadline.parse("2020-07-21"))
    assert task.render() == "    [X] 1: (2020-07-21) Eat more donuts."


def test_task_set_deadline_overwrites() -> None:
    task = Task(id=TokenId("abc"), description="")
    task.set_deadline(Deadline.parse("2020-07-21"))
    task.set_deadline(Deadline.parse("2020-07-30"))
    assert task.deadline.day == date(2020, 7, 30)
    assert task.render() == "    [ ] abc: (2020-07-30) "


def test_toggle_restores_render() -> None:
    task = Task(id=NumericId(3), description="SOLID")
    before = task.render()
    task.set_done(True)
    task.set_done(True)
    task.set_done(False)
    assert task.render() == before
