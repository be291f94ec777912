"""Loading a JSON taskfile into a Runner.

Taskfile layout:

    {
      "pkg": {"name": "...", "description": "..."},
      "usage": {"options": {...}},
      "tasks": {"compile": "Compiles sources", ...}
    }

Everything except "tasks" becomes host config data.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import TaskfileError
from .host import ConfigStore, Runner, TaskLog

logger = logging.getLogger(__name__)

_TASKS_KEY = "tasks"


def load_taskfile(
    path: Path,
    *,
    log: TaskLog | None = None,
    cli_options: Mapping[str, Any] | None = None,
) -> Runner:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TaskfileError(f"Could not read taskfile: {path}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TaskfileError(f"Taskfile is not valid JSON: {path} ({exc})") from exc

    if not isinstance(data, dict):
        raise TaskfileError(f"Taskfile must contain a JSON object: {path}")

    tasks = data.pop(_TASKS_KEY, {})
    if not isinstance(tasks, dict):
        raise TaskfileError(f"'{_TASKS_KEY}' must map task names to descriptions.")

    runner = Runner(config=ConfigStore(data), log=log, cli_options=cli_options)
    for name, info in tasks.items():
        if info is not None and not isinstance(info, str):
            raise TaskfileError(f"Description of task '{name}' must be a string.")
        runner.register_description(name, info or "")

    logger.info("Loaded taskfile %s with %d task(s)", path, len(tasks))
    return runner
