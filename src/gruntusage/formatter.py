"""Text formatting for usage output.

argparse only lists a task in the usage synopsis when it is registered as
an optional argument, so every task is added as a `-<task>` flag. The
synthetic dash is removed again in format_usage() right before output.
"""

from __future__ import annotations

import argparse
import os
import re

from .constants import FALLBACK_DESCRIPTION, SENTENCE_END
from .errors import InvalidConfigurationError
from .models import FormattingOptions

# Sentence end, optionally followed by closing brackets or quotes.
_SENTENCE_END_PATTERN = re.compile(r"[.!?][)\]\"']*$")
_USAGE_FLAG_PATTERN = re.compile(r"\[-(.+?)\]")
_LISTING_FLAG_PATTERN = re.compile(r"^ {2}-(\S*)", flags=re.MULTILINE)
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\n")


class UsageHelpFormatter(argparse.HelpFormatter):
    """HelpFormatter with a fixed width instead of the terminal size."""

    def __init__(self, prog: str, width: int | None = None) -> None:
        super().__init__(prog, width=width)


def format_description(text: str | None, options: FormattingOptions) -> str:
    if not text:
        text = FALLBACK_DESCRIPTION

    if options.add_period and not _SENTENCE_END_PATTERN.search(text):
        text = text + SENTENCE_END

    return text


def format_usage_header(header: str | list[str] | tuple[str, ...] | None) -> str:
    """Join the title lines and terminate the block with one line break."""
    if header is None:
        return ""
    if isinstance(header, str):
        header_text = header
    elif isinstance(header, (list, tuple)) and all(
        isinstance(line, str) for line in header
    ):
        header_text = os.linesep.join(header)
    else:
        raise InvalidConfigurationError(
            "Usage title must be a string or a list of strings, "
            f"got {type(header).__name__}."
        )
    return header_text + os.linesep


def format_usage_help(usage_help: str) -> str:
    # Hook for rewriting argparse section headers; nothing to change yet.
    return usage_help


def format_usage(usage_header: str, usage_help: str) -> str:
    """Strip the synthetic task dashes and normalize line breaks."""
    usage_help = _USAGE_FLAG_PATTERN.sub(r"[\1]", usage_help)
    usage_help = _LISTING_FLAG_PATTERN.sub(r"  \1 ", usage_help)
    return normalize_line_breaks(usage_header + usage_help)


def normalize_line_breaks(text: str) -> str:
    return _LINE_BREAK_PATTERN.sub(os.linesep, text)
