"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from gruntusage.models import FormattingOptions, PackageInfo, TaskGroup, UsageOptions


def test_formatting_defaults() -> None:
    formatting = FormattingOptions()
    assert formatting.add_period is True
    assert formatting.width is None


def test_models_accept_field_names_and_aliases() -> None:
    assert FormattingOptions(add_period=False).add_period is False
    assert FormattingOptions.model_validate({"addPeriod": False}).add_period is False
    assert UsageOptions(hide_tasks=True).hide_tasks is True


def test_task_group_defaults() -> None:
    group = TaskGroup()
    assert group.header is None
    assert group.tasks == []


def test_models_are_frozen() -> None:
    info = PackageInfo(name="app")
    with pytest.raises(ValidationError):
        info.name = "other"  # type: ignore[misc]


def test_title_accepts_string_or_list() -> None:
    assert UsageOptions(title="Usage").title == "Usage"
    assert UsageOptions(title=["A", "B"]).title == ["A", "B"]
