"""Building the argparse parser that renders task groups."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from functools import partial
from typing import Any, Protocol

from .constants import DEFAULT_GROUP_HEADER, DEFAULT_HELP_WIDTH, DEFAULT_PROG
from .errors import InvalidConfigurationError, TaskNotFoundError
from .formatter import UsageHelpFormatter, format_description
from .models import FormattingOptions, TaskGroup

logger = logging.getLogger(__name__)


class TaskInfo(Protocol):
    name: str
    info: str


class TaskRegistry(Protocol):
    def get_task(self, name: str) -> TaskInfo | None: ...


def build_parser(
    description: str,
    *,
    formatting: FormattingOptions,
    prog: str = DEFAULT_PROG,
) -> argparse.ArgumentParser:
    """Create an empty parser; one is built per usage invocation."""
    width = formatting.width if formatting.width is not None else DEFAULT_HELP_WIDTH
    extra_kwargs: dict[str, Any] = {}
    if sys.version_info >= (3, 14):
        # Usage text goes to a log sink, never ANSI colors.
        extra_kwargs["color"] = False
    return argparse.ArgumentParser(
        prog=prog,
        description=_escape_description(description),
        add_help=False,
        formatter_class=partial(UsageHelpFormatter, width=width),
        **extra_kwargs,
    )


def add_task_group(
    task_group: TaskGroup,
    registry: TaskRegistry,
    parser: argparse.ArgumentParser,
    description_overrides: Mapping[str, str],
    formatting: FormattingOptions,
) -> None:
    """Add one argument group listing the group's tasks in order."""
    title = task_group.header if task_group.header else DEFAULT_GROUP_HEADER
    group = parser.add_argument_group(title=title)

    for task_name in task_group.tasks:
        task = registry.get_task(task_name)
        if task is None:
            raise TaskNotFoundError(task_name)

        description = format_description(
            description_overrides.get(task_name) or task.info,
            formatting,
        )
        try:
            group.add_argument(
                f"-{task_name}",
                action="store_true",
                required=False,
                help=_escape_help(description),
            )
        except argparse.ArgumentError as exc:
            raise InvalidConfigurationError(
                f"Task '{task_name}' cannot be listed in group '{title}': {exc}"
            ) from exc

    logger.debug("Added task group %r with %d task(s)", title, len(task_group.tasks))


def _escape_help(text: str) -> str:
    # argparse applies %-formatting to help strings.
    return text.replace("%", "%%")


def _escape_description(text: str) -> str:
    # argparse only %-formats a description that mentions %(prog).
    if "%(prog)" in text:
        return _escape_help(text)
    return text
