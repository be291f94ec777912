"""Configuration models for gruntusage.

Field aliases match the camelCase keys used in task configuration, so
`UsageOptions.model_validate({"hideTasks": True})` works directly on the
host's config data. Unknown keys are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class FormattingOptions(_ConfigModel):
    add_period: bool = Field(default=True, alias="addPeriod")
    width: int | None = Field(default=None, gt=0)


class TaskGroup(_ConfigModel):
    header: str | None = None
    tasks: list[str] = []


class UsageOptions(_ConfigModel):
    hide_tasks: bool | None = Field(default=None, alias="hideTasks")
    formatting: FormattingOptions | None = None
    task_groups: list[TaskGroup] = Field(default=[], alias="taskGroups")
    task_description_overrides: dict[str, str] | None = Field(
        default=None, alias="taskDescriptionOverrides"
    )
    description: str | None = None
    title: str | list[str] | None = None


class PackageInfo(_ConfigModel):
    name: str | None = None
    description: str | None = None
