"""Host access used by the reconciler and the repair step.

The reconciler only sees a `LocaleSystem`, so it can run against a fake in tests.
"""

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol

from locale_repair import locale, packages
from locale_repair.config import LOCALE_COMMAND
from locale_repair.errors import PrivilegeError
from locale_repair.utils import command_exists, is_root, run

logger = logging.getLogger("locale_repair")


class LocaleSystem(Protocol):
    """Everything locale repair reads from or does to a host."""

    def environ(self) -> Mapping[str, str]: ...

    def has_command(self, name: str) -> bool: ...

    def locale_report(self) -> str: ...

    def available_locales(self) -> str: ...

    def read_text(self, path: str) -> str | None: ...

    def acquire_privilege(self) -> None: ...

    def ensure_locales_package(self) -> None: ...

    def generate_locales(self, names: Sequence[str]) -> None: ...

    def update_defaults(self, defaults: Mapping[str, str]) -> None: ...


class HostLocaleSystem:
    """`LocaleSystem` backed by the local Debian host."""

    def environ(self) -> Mapping[str, str]:
        return dict(os.environ)

    def has_command(self, name: str) -> bool:
        return command_exists(name)

    def locale_report(self) -> str:
        """Output of `locale` (current settings)."""
        return run([LOCALE_COMMAND], check=False, capture=True).stdout or ""

    def available_locales(self) -> str:
        """Output of `locale -a` (locales in the locale database)."""
        return run([LOCALE_COMMAND, "-a"], check=False, capture=True).stdout or ""

    def read_text(self, path: str) -> str | None:
        """Read a config file, or None if it is missing or unreadable."""
        file_path = Path(path).expanduser()
        try:
            if not file_path.is_file():
                return None
            return file_path.read_text(errors="replace")
        except OSError as error:
            logger.debug("Skipping %s: %s", file_path, error)
            return None

    def acquire_privilege(self) -> None:
        """Make sure privileged commands can run, prompting for sudo if needed."""
        if is_root():
            return

        if not command_exists("sudo"):
            raise PrivilegeError("Root privileges required: run as root (sudo not found)")

        logger.info("Requesting sudo privileges...")
        result = run(["sudo", "-v"], check=False)
        if result.returncode != 0:
            raise PrivilegeError("Root privileges required: sudo authentication failed")

    def ensure_locales_package(self) -> None:
        packages.ensure_locales_package()

    def generate_locales(self, names: Sequence[str]) -> None:
        locale.enable_locales(names)
        locale.generate_locales(names)

    def update_defaults(self, defaults: Mapping[str, str]) -> None:
        locale.update_system_defaults(defaults)
