"""Literal constants used by gruntusage."""

from __future__ import annotations

# Usage task registration
USAGE_TASK_NAME = "usage"
USAGE_TASK_INFO = "Prints usage information"

# Rendering
DEFAULT_PROG = "grunt"
DEFAULT_GROUP_HEADER = "Grunt tasks"
FALLBACK_DESCRIPTION = "N/A"
SENTENCE_END = "."
DEFAULT_HELP_WIDTH = 80

# Host banner for task start, e.g. 'Running "usage" task'
TASK_HEADER_TEMPLATE = 'Running "{name}" task'

# CLI args and startup
CLI_OPTION_SHOW_TASKS = "show-tasks"
ERROR_PREFIX = "ERROR:"
