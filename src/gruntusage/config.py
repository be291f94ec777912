"""Reading and merging usage configuration from host config data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from .errors import InvalidConfigurationError
from .models import FormattingOptions, PackageInfo, UsageOptions


def get_usage_options(config_data: Mapping[str, Any]) -> dict[str, Any]:
    """Return `usage.options` from config data, or an empty dict when absent."""
    usage = config_data.get("usage")
    if isinstance(usage, Mapping):
        options = usage.get("options")
        if isinstance(options, Mapping):
            return dict(options)
    return {}


def get_package_info(config_data: Mapping[str, Any]) -> dict[str, Any]:
    """Return `pkg` from config data, or an empty dict when absent."""
    pkg = config_data.get("pkg")
    if isinstance(pkg, Mapping):
        return dict(pkg)
    return {}


def merge_options(
    base: Mapping[str, Any], overrides: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Shallow merge: keys in overrides win over keys in base."""
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


def merge_formatting_options(
    defaults: FormattingOptions, overrides: FormattingOptions | None
) -> FormattingOptions:
    """Apply only the fields the user actually set on top of defaults."""
    if overrides is None:
        return defaults
    explicit = overrides.model_dump(include=overrides.model_fields_set)
    return defaults.model_copy(update=explicit)


def parse_usage_options(raw: Mapping[str, Any]) -> UsageOptions:
    return _validate(UsageOptions, raw, "usage options")


def parse_package_info(raw: Mapping[str, Any]) -> PackageInfo:
    return _validate(PackageInfo, raw, "package info")


def _validate(model: type[BaseModel], raw: Mapping[str, Any], label: str) -> Any:
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidConfigurationError(f"Invalid {label}: {details}") from exc
