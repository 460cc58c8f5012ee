"""Parsers for `locale` output, `locale -a` output, and shell-style config files.

Everything here works on text already read from the system, so the matching
logic never touches the OS.
"""

import re
from collections.abc import Mapping
from typing import NamedTuple

from locale_repair.config import LOCALE_KEY_PATTERN

EXPORT_PATTERN = re.compile(r"^export\s+")


class Assignment(NamedTuple):
    """A ``KEY=value`` pair for a locale variable."""

    key: str
    value: str


def is_locale_key(key: str) -> bool:
    """Check if a variable name is LANG, LC_ALL, or another LC_* variable."""
    return LOCALE_KEY_PATTERN.match(key) is not None


def unquote(value: str) -> str:
    """Strip surrounding double quotes, then surrounding single quotes."""
    for quote in ('"', "'"):
        value = value.removeprefix(quote).removesuffix(quote)
    return value


def parse_assignment(line: str, *, allow_export: bool = False) -> Assignment | None:
    """Parse one line into a locale assignment, or None if it is not one."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    if allow_export:
        stripped = EXPORT_PATTERN.sub("", stripped, count=1)

    key, sep, value = stripped.partition("=")
    if not sep or not is_locale_key(key):
        return None

    return Assignment(key, unquote(value))


def _parse_lines(text: str, *, allow_export: bool) -> list[Assignment]:
    assignments = []
    for line in text.splitlines():
        assignment = parse_assignment(line, allow_export=allow_export)
        if assignment is not None and assignment.value:
            assignments.append(assignment)
    return assignments


def parse_locale_report(text: str) -> list[Assignment]:
    """Parse the output of `locale`, skipping unset variables."""
    return _parse_lines(text, allow_export=False)


def parse_config_file(text: str) -> list[Assignment]:
    """Parse /etc/default/locale, /etc/environment, or a shell profile."""
    return _parse_lines(text, allow_export=True)


def environment_assignments(environ: Mapping[str, str]) -> list[Assignment]:
    """Return the non-empty locale variables of an environment."""
    return [
        Assignment(key, value)
        for key, value in sorted(environ.items())
        if is_locale_key(key) and value
    ]


def parse_available(text: str) -> list[str]:
    """Parse the output of `locale -a` into locale names."""
    return [line.strip() for line in text.splitlines() if line.strip()]
