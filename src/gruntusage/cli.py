"""CLI entry and startup wiring."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .constants import CLI_OPTION_SHOW_TASKS, ERROR_PREFIX, USAGE_TASK_NAME
from .errors import GruntUsageError, StartupValidationError
from .plugin import register
from .taskfile import load_taskfile


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file)

    try:
        taskfile_path = _resolve_taskfile(args.taskfile)
        runner = load_taskfile(
            taskfile_path,
            cli_options={CLI_OPTION_SHOW_TASKS: args.show_tasks},
        )
        register(runner)
        runner.run_task(USAGE_TASK_NAME)
    except GruntUsageError as exc:
        print(f"{ERROR_PREFIX} {exc}", file=sys.stderr)
        return 1
    return 0


def setup_logging(log_file: str | None = None) -> None:
    """Log to a file when requested; otherwise keep stdout to the usage text."""
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)


def _resolve_taskfile(raw: str) -> Path:
    path = Path(raw).expanduser()
    if not path.is_file():
        raise StartupValidationError(f"Taskfile not found: {raw}")
    return path.resolve()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gruntusage",
        description="Print formatted usage information for configured tasks.",
    )
    parser.add_argument(
        "--taskfile",
        required=True,
        help="Path to a JSON taskfile with pkg, usage options and task descriptions.",
    )
    parser.add_argument(
        f"--{CLI_OPTION_SHOW_TASKS}",
        action="store_true",
        help="Keep task start banners visible.",
    )
    parser.add_argument(
        "--log-file",
        required=False,
        help="Optional path for a diagnostic log file.",
    )
    return parser
