"""Shared fixtures."""

from collections.abc import Mapping, Sequence

import pytest

from locale_repair.errors import PrivilegeError


class FakeLocaleSystem:
    """In-memory LocaleSystem that records remedial actions."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        report: str = "",
        available: Sequence[str] = ("C", "C.utf8", "POSIX"),
        files: Mapping[str, str] | None = None,
        has_locale: bool = True,
        privileged: bool = True,
        generation_works: bool = True,
    ) -> None:
        self._environ = dict(environ or {})
        self._report = report
        self.available = list(available)
        self.files = dict(files or {})
        self.has_locale = has_locale
        self.privileged = privileged
        self.generation_works = generation_works
        self.actions: list[tuple] = []

    def environ(self) -> Mapping[str, str]:
        return dict(self._environ)

    def has_command(self, name: str) -> bool:
        return self.has_locale if name == "locale" else True

    def locale_report(self) -> str:
        return self._report

    def available_locales(self) -> str:
        return "\n".join(self.available) + "\n"

    def read_text(self, path: str) -> str | None:
        return self.files.get(path)

    def acquire_privilege(self) -> None:
        self.actions.append(("acquire_privilege",))
        if not self.privileged:
            raise PrivilegeError("Root privileges required")

    def ensure_locales_package(self) -> None:
        self.actions.append(("ensure_locales_package",))

    def generate_locales(self, names: Sequence[str]) -> None:
        self.actions.append(("generate_locales", list(names)))
        if self.generation_works:
            self.available.extend(names)

    def update_defaults(self, defaults: Mapping[str, str]) -> None:
        self.actions.append(("update_defaults", dict(defaults)))


@pytest.fixture
def fake_system():
    """Factory for FakeLocaleSystem instances."""
    return FakeLocaleSystem
