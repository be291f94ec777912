"""Usage task registration and rendering.

register() is the load phase: it reads configuration once, decides whether
task start banners are shown and registers the `usage` task. Each run of
that task is an invocation phase that renders into a freshly built parser,
so repeated runs in one process never accumulate task groups.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import (
    get_package_info,
    get_usage_options,
    merge_formatting_options,
    parse_package_info,
    parse_usage_options,
)
from .constants import CLI_OPTION_SHOW_TASKS, USAGE_TASK_INFO, USAGE_TASK_NAME
from .formatter import (
    format_description,
    format_usage,
    format_usage_header,
    format_usage_help,
)
from .host import Runner, TaskContext, hide_task_headers
from .models import FormattingOptions, UsageOptions
from .registrar import TaskRegistry, add_task_group, build_parser

logger = logging.getLogger(__name__)

_INVOCATION_DEFAULTS: dict[str, Any] = {"taskGroups": []}


class UsagePlugin:
    def __init__(
        self,
        *,
        registry: TaskRegistry,
        description: str,
        formatting: FormattingOptions,
    ) -> None:
        self.registry = registry
        self.description = description
        self.formatting = formatting

    def run(self, context: TaskContext) -> None:
        usage_text = self.render(context.options(_INVOCATION_DEFAULTS))
        context.runner.log.write(usage_text)

    def render(self, raw_options: Mapping[str, Any]) -> str:
        """Render the usage text for one set of invocation options."""
        options = parse_usage_options(raw_options)
        formatting = merge_formatting_options(self.formatting, options.formatting)

        description = self.description
        if options.description:
            description = format_description(options.description, formatting)

        parser = build_parser(description, formatting=formatting)
        for task_group in options.task_groups:
            add_task_group(
                task_group,
                self.registry,
                parser,
                options.task_description_overrides or {},
                formatting,
            )

        usage_help = format_usage_help(parser.format_help())
        usage_header = format_usage_header(options.title)
        logger.info(
            "Rendered usage with %d task group(s)", len(options.task_groups)
        )
        return format_usage(usage_header, usage_help)


def register(runner: Runner) -> UsagePlugin:
    """Load the plugin into a runner and register the `usage` task."""
    usage_options = parse_usage_options(get_usage_options(runner.config.data))
    package_info = parse_package_info(get_package_info(runner.config.data))

    if should_hide_task_headers(usage_options, runner.cli_options):
        hide_task_headers(runner.log)

    formatting = merge_formatting_options(FormattingOptions(), usage_options.formatting)

    # Usage options override package info field by field.
    description = package_info.description
    if "description" in usage_options.model_fields_set:
        description = usage_options.description

    plugin = UsagePlugin(
        registry=runner,
        description=format_description(description, formatting),
        formatting=formatting,
    )
    runner.register_task(USAGE_TASK_NAME, USAGE_TASK_INFO, plugin.run)
    logger.debug("Registered %s task", USAGE_TASK_NAME)
    return plugin


def should_hide_task_headers(
    usage_options: UsageOptions, cli_options: Mapping[str, Any]
) -> bool:
    """Banners are hidden unless hideTasks is explicitly false or --show-tasks is set."""
    if cli_options.get(CLI_OPTION_SHOW_TASKS):
        return False
    return usage_options.hide_tasks is not False
