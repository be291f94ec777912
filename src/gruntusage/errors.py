"""Typed exceptions for gruntusage."""

from __future__ import annotations


class GruntUsageError(Exception):
    """Base exception for gruntusage failures."""


class InvalidConfigurationError(GruntUsageError):
    """Raised when usage options or package info have an unsupported shape."""


class TaskNotFoundError(GruntUsageError):
    def __init__(self, task_name: str) -> None:
        super().__init__(f"Task '{task_name}' is not registered.")
        self.task_name = task_name


class TaskfileError(GruntUsageError):
    """Raised when the taskfile cannot be read or parsed."""


class StartupValidationError(GruntUsageError):
    """Raised when startup arguments are invalid."""
