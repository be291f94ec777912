"""Tests for usage text formatting."""

import os

import pytest

from gruntusage.errors import InvalidConfigurationError
from gruntusage.formatter import (
    format_description,
    format_usage,
    format_usage_header,
    format_usage_help,
    normalize_line_breaks,
)
from gruntusage.models import FormattingOptions

ADD_PERIOD = FormattingOptions(add_period=True)
NO_PERIOD = FormattingOptions(add_period=False)


def test_format_description_missing_text_uses_placeholder() -> None:
    assert format_description(None, ADD_PERIOD) == "N/A."
    assert format_description("", ADD_PERIOD) == "N/A."
    assert format_description(None, NO_PERIOD) == "N/A"


def test_format_description_appends_period() -> None:
    assert format_description("Builds the project", ADD_PERIOD) == "Builds the project."


@pytest.mark.parametrize(
    "text",
    [
        "Already punctuated!",
        "Is it done?",
        "Ends with a period.",
        'He said "done."',
        "Runs all checks (lint and tests.)",
        "Listed [see docs.]",
    ],
)
def test_format_description_keeps_existing_sentence_end(text: str) -> None:
    assert format_description(text, ADD_PERIOD) == text


def test_format_description_brackets_without_sentence_end_get_period() -> None:
    assert format_description("Runs checks (lint)", ADD_PERIOD) == "Runs checks (lint)."


def test_format_description_add_period_disabled() -> None:
    assert format_description("No period", NO_PERIOD) == "No period"


def test_format_description_is_idempotent() -> None:
    once = format_description("Compiles sources", ADD_PERIOD)
    assert format_description(once, ADD_PERIOD) == once


def test_format_usage_header_joins_lines() -> None:
    assert format_usage_header(["Line A", "Line B"]) == f"Line A{os.linesep}Line B{os.linesep}"


def test_format_usage_header_single_string() -> None:
    assert format_usage_header("Single") == f"Single{os.linesep}"


def test_format_usage_header_missing_title_is_empty() -> None:
    assert format_usage_header(None) == ""


@pytest.mark.parametrize("header", [5, ["ok", 3], {"title": "x"}])
def test_format_usage_header_rejects_other_shapes(header: object) -> None:
    with pytest.raises(InvalidConfigurationError):
        format_usage_header(header)  # type: ignore[arg-type]


def test_format_usage_help_passes_text_through() -> None:
    assert format_usage_help("usage: grunt\n") == "usage: grunt\n"


def test_format_usage_strips_synthetic_dashes() -> None:
    raw = (
        "usage: grunt [-build] [-test]\n"
        "\n"
        "Build:\n"
        "  -build   Builds the project.\n"
        "  -test    Runs the tests.\n"
    )

    result = format_usage(f"Title{os.linesep}", raw)

    lines = result.split(os.linesep)
    assert lines[0] == "Title"
    assert lines[1] == "usage: grunt [build] [test]"
    assert "  build    Builds the project." in lines
    assert "  test     Runs the tests." in lines
    assert "-build" not in result


def test_format_usage_keeps_dashes_that_are_not_task_flags() -> None:
    raw = "A well-known task list - read it.\n   -deeper indent stays\n"

    result = format_usage("", raw)

    assert "well-known" in result
    assert "- read it." in result
    assert "   -deeper indent stays" in result


def test_format_usage_normalizes_line_breaks() -> None:
    result = format_usage("Head\r\n", "usage: grunt\r\nbody\n")

    assert result == os.linesep.join(["Head", "usage: grunt", "body", ""])


def test_normalize_line_breaks_handles_mixed_input() -> None:
    assert normalize_line_breaks("a\r\nb\nc") == os.linesep.join(["a", "b", "c"])
