"""Pytest fixtures for gruntusage tests."""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

import pytest

from gruntusage.host import ConfigStore, Runner, TaskLog


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_runner(
    output: io.StringIO,
) -> Callable[..., Runner]:
    """Build a Runner writing to `output` with description-only tasks."""

    def _make(
        config: dict[str, Any] | None = None,
        tasks: dict[str, str] | None = None,
        cli_options: dict[str, Any] | None = None,
    ) -> Runner:
        runner = Runner(
            config=ConfigStore(config or {}),
            log=TaskLog(output),
            cli_options=cli_options,
        )
        for name, info in (tasks or {}).items():
            runner.register_description(name, info)
        return runner

    return _make
