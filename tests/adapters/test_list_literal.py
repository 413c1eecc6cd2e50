from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tally_cli.adapters.list_literal import PREFIX, parse_list_literal
from tally_cli.domain.errors import LIST_FORMAT_HINT, InvalidListLiteral

SAFE_TEXT = st.text(
    alphabet=st.characters(exclude_categories=("Cs", "Cc"), exclude_characters="'"),
    max_size=8,
)


def test_parses_single_quoted_items() -> None:
    assert parse_list_literal("['a','b','c']") == ("a", "b", "c")


def test_parses_double_quoted_items_with_escapes() -> None:
    assert parse_list_literal('["x\\ty", "z"]') == ("x\ty", "z")


def test_prefix_is_not_duplicated() -> None:
    assert parse_list_literal(PREFIX + "['x', 'y']") == ("x", "y")


def test_empty_list() -> None:
    assert parse_list_literal("[]") == ()


def test_preserves_order_and_duplicates() -> None:
    assert parse_list_literal("['b', 'a', 'b']") == ("b", "a", "b")


@pytest.mark.parametrize("token", ["[a,b", "['a',", "[", "", "a,b", "['a'] junk"])
def test_malformed_tokens_carry_hint(token: str) -> None:
    with pytest.raises(InvalidListLiteral) as excinfo:
        parse_list_literal(token)
    message = str(excinfo.value)
    assert message.endswith(LIST_FORMAT_HINT)
    assert excinfo.value.reason


def test_parser_error_is_chained() -> None:
    with pytest.raises(InvalidListLiteral) as excinfo:
        parse_list_literal("[a,b")
    assert excinfo.value.__cause__ is not None
    assert str(excinfo.value.__cause__) in str(excinfo.value)


@pytest.mark.parametrize("token", ["[1, 2]", "['a', 1]", "[['a']]"])
def test_non_string_items_rejected(token: str) -> None:
    with pytest.raises(InvalidListLiteral, match="must be a string"):
        parse_list_literal(token)


def test_scalar_value_rejected() -> None:
    with pytest.raises(InvalidListLiteral, match="must be an array"):
        parse_list_literal("'solo'")


def test_extra_keys_rejected() -> None:
    with pytest.raises(InvalidListLiteral, match="unexpected keys"):
        parse_list_literal("['a']\nother = 1")


def test_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="tally_cli")
    with pytest.raises(InvalidListLiteral):
        parse_list_literal("[a,b")
    assert any(record.getMessage() == "args_invalid" for record in caplog.records)


@given(st.lists(SAFE_TEXT, max_size=5))
def test_single_quoted_lists_parse_back(items: list[str]) -> None:
    token = "[" + ", ".join(f"'{item}'" for item in items) + "]"
    assert parse_list_literal(token) == tuple(items)
