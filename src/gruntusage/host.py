"""Minimal grunt-like task host the usage plugin runs inside.

Provides the three collaborators the plugin needs: a config store, a task
registry and a task log with an overridable start banner.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TextIO

from .config import merge_options
from .constants import TASK_HEADER_TEMPLATE
from .errors import TaskNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class ConfigStore:
    data: dict[str, Any] = field(default_factory=dict)

    def task_options(self, task_name: str) -> dict[str, Any]:
        """Return `<task_name>.options` or an empty dict."""
        task_config = self.data.get(task_name)
        if isinstance(task_config, Mapping):
            options = task_config.get("options")
            if isinstance(options, Mapping):
                return dict(options)
        return {}


class TaskLog:
    """Output sink for task results and task start banners."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> TaskLog:
        self.stream.write(text)
        return self

    def header(self, message: str) -> None:
        self.stream.write(f"\n{message}\n")


def hide_task_headers(log: TaskLog) -> None:
    """Silence task start banners for the rest of the process."""

    def _no_header(message: str) -> None:
        return None

    log.header = _no_header  # type: ignore[method-assign]


@dataclass
class Task:
    name: str
    info: str
    fn: Callable[[TaskContext], None]


@dataclass
class TaskContext:
    name: str
    runner: Runner
    overrides: dict[str, Any] = field(default_factory=dict)

    def options(self, defaults: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge defaults < configured task options < invocation overrides."""
        merged = merge_options(defaults or {}, self.runner.config.task_options(self.name))
        return merge_options(merged, self.overrides)


class Runner:
    def __init__(
        self,
        *,
        config: ConfigStore | None = None,
        log: TaskLog | None = None,
        cli_options: Mapping[str, Any] | None = None,
    ) -> None:
        self.config = config if config is not None else ConfigStore()
        self.log = log if log is not None else TaskLog()
        self.cli_options: dict[str, Any] = dict(cli_options or {})
        self._tasks: dict[str, Task] = {}

    def register_task(
        self, name: str, info: str, fn: Callable[[TaskContext], None]
    ) -> Task:
        task = Task(name=name, info=info, fn=fn)
        self._tasks[name] = task
        return task

    def register_description(self, name: str, info: str) -> Task:
        """Register a task that only carries a description."""

        def _noop(context: TaskContext) -> None:
            return None

        return self.register_task(name, info, _noop)

    def get_task(self, name: str) -> Task | None:
        return self._tasks.get(name)

    def task_names(self) -> list[str]:
        return list(self._tasks)

    def run_task(self, name: str, overrides: Mapping[str, Any] | None = None) -> None:
        task = self.get_task(name)
        if task is None:
            raise TaskNotFoundError(name)
        self.log.header(TASK_HEADER_TEMPLATE.format(name=name))
        logger.info("Running task %s", name)
        task.fn(TaskContext(name=name, runner=self, overrides=dict(overrides or {})))
