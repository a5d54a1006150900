import pytest

from courtdesk.validation import (
    EMPTY_QUERY_MESSAGE,
    INVALID_QUERY_MESSAGE,
    QueryValidationError,
    is_valid_query,
    require_query,
    validate_query,
)


@pytest.mark.parametrize(
    "value",
    ["WP 1234/2024", "OS 45/2023 Guntur", "CRP-12-2024", "TSHC010012342024", "", "   "],
)
def test_allowed_characters_pass(value: str) -> None:
    assert validate_query(value) is None
    assert is_valid_query(value)


@pytest.mark.parametrize("value", ["WP#1234", "Rao & Sons", "OS 45/2023;", "WP (1234)", "case_no"])
def test_disallowed_characters_fail_with_fixed_message(value: str) -> None:
    assert validate_query(value) == INVALID_QUERY_MESSAGE
    assert not is_valid_query(value)


def test_trailing_newline_is_whitespace_not_a_bypass() -> None:
    assert validate_query("WP 1/2024\n") is None
    assert validate_query("WP 1/2024\n#") == INVALID_QUERY_MESSAGE


def test_require_query_returns_value_untouched() -> None:
    assert require_query(" WP 1234/2024 ") == " WP 1234/2024 "


@pytest.mark.parametrize("value", ["", "   ", "\t"])
def test_require_query_rejects_blank(value: str) -> None:
    with pytest.raises(QueryValidationError) as excinfo:
        require_query(value)
    assert str(excinfo.value) == EMPTY_QUERY_MESSAGE


def test_require_query_rejects_invalid_characters() -> None:
    with pytest.raises(QueryValidationError, match="Invalid characters detected"):
        require_query("WP#1234")
