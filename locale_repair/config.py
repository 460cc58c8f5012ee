"""Scope definitions and locale source locations."""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final


class Scope(str, Enum):
    ENVIRONMENT = "environment"  # Process environment and `locale` report only
    SYSTEM = "system"  # + system-wide defaults files
    ALL = "all"  # + shell profiles of the user and root


LOCALE_KEY_PATTERN: Final = re.compile(r"^(LANG|LC_ALL|LC_[A-Z_]+)$")

SPECIAL_LOCALES: Final[frozenset[str]] = frozenset({"c", "posix"})

# Only these keys are written back as system-wide defaults after a repair
DEFAULT_KEYS: Final[tuple[str, ...]] = ("LANG", "LC_ALL")

LOCALE_COMMAND: Final = "locale"
LOCALES_PACKAGE: Final = "locales"

DEFAULT_LOCALE_FILE: Final = "/etc/default/locale"
ENVIRONMENT_FILE: Final = "/etc/environment"
LOCALE_GEN_FILE: Final = "/etc/locale.gen"

SYSTEM_FILES: Final[list[str]] = [DEFAULT_LOCALE_FILE, ENVIRONMENT_FILE]

PROFILE_FILES: Final[list[str]] = [".profile", ".bashrc"]


@dataclass(frozen=True)
class RepairConfig:
    """Configuration for a locale repair run."""

    scope: Scope = Scope.ALL
    explicit_locales: tuple[str, ...] = ()
    home_dir: str = "~"
    privileged_home: str = "/root"
    dry_run: bool = False

    def get_config_files(self) -> list[str]:
        """Return static files to scan for the current scope (cumulative)."""
        files: list[str] = []
        if self.scope in (Scope.SYSTEM, Scope.ALL):
            files.extend(SYSTEM_FILES)
        if self.scope == Scope.ALL:
            for home in (self.privileged_home, self.home_dir):
                base = Path(home).expanduser()
                files.extend(str(base / name) for name in PROFILE_FILES)
        return list(dict.fromkeys(files))
