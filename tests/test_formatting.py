"""Message construction for plain and templated calls."""

from __future__ import annotations

from log_facade.logging.formatting import concat, format_message, sprintf


def test_concat_joins_without_separator() -> None:
    assert concat(("a", 1, None, 2.5, ["x"])) == "a1None2.5['x']"


def test_concat_of_nothing_is_empty() -> None:
    assert concat(()) == ""


def test_sprintf_without_arguments_keeps_template_verbatim() -> None:
    assert sprintf("100% done", ()) == "100% done"


def test_sprintf_collapses_escaped_percent_without_arguments() -> None:
    assert sprintf("100%% done", ()) == "100% done"
    assert sprintf("%(user)s left", ()) == "%(user)s left"


def test_sprintf_positional_arguments() -> None:
    assert sprintf("received %s balls", ("ping pong",)) == "received ping pong balls"
    assert sprintf("%05.1f|%x|%r", (3.14159, 255, "q")) == "003.1|ff|'q'"


def test_sprintf_single_mapping_argument() -> None:
    assert sprintf("%(user)s has %(count)d items", ({"user": "alice", "count": 3},)) == "alice has 3 items"


def test_sprintf_mismatched_arguments_do_not_raise() -> None:
    assert sprintf("only %s", ("a", "b")) == "only %s ('a', 'b')"
    assert sprintf("%d apples", ("many",)) == "%d apples ('many',)"
    assert sprintf("%(missing)s", ({"other": 1},)) == "%(missing)s ({'other': 1},)"


def test_format_message_dispatches_on_template() -> None:
    assert format_message(None, ("a", "b")) == "ab"
    assert format_message("%s-%s", ("a", "b")) == "a-b"
