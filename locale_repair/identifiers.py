"""Locale identifiers, canonical forms, and the sets compared during repair."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

from locale_repair.config import SPECIAL_LOCALES


def strip_quotes(raw: str) -> str:
    """Strip one trailing and one leading double quote."""
    value = raw.removesuffix('"')
    return value.removeprefix('"')


def canonicalize(raw: str) -> str:
    """Return the comparison form of a locale identifier.

    ``de_AT.UTF-8``, ``"de_AT.UTF-8"`` and ``DE_AT.utf8`` all map to
    ``de_at.utf8``.
    """
    return strip_quotes(raw).lower().replace("utf-8", "utf8")


def database_form(raw: str) -> str:
    """Return the spelling `locale -a` uses for a locale.

    glibc lowercases the codeset and drops everything but letters and digits,
    so ``de_DE.ISO-8859-15@euro`` is listed as ``de_DE.iso885915@euro``.
    """
    value, at, modifier = strip_quotes(raw).partition("@")
    language, dot, codeset = value.partition(".")
    if dot:
        codeset = "".join(char for char in codeset.lower() if char.isalnum())
        if codeset.isdigit():
            codeset = f"iso{codeset}"
        value = f"{language}.{codeset}"
    return f"{value}{at}{modifier}".lower()


def is_special(value: str) -> bool:
    """Check if a locale is C or POSIX, which never need repair."""
    return canonicalize(value) in SPECIAL_LOCALES


@dataclass(frozen=True, order=True)
class LocaleIdentifier:
    """A locale token compared by canonical form.

    ``name`` keeps the original spelling for handing to system tools.
    """

    canonical: str
    name: str = field(compare=False)

    @classmethod
    def parse(cls, raw: str) -> "LocaleIdentifier":
        return cls(canonical=canonicalize(raw), name=strip_quotes(raw))

    @property
    def is_special(self) -> bool:
        return self.canonical in SPECIAL_LOCALES

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ConfiguredSet:
    """Locales found in the environment, `locale` output, and config files."""

    locales: tuple[LocaleIdentifier, ...] = ()

    @classmethod
    def from_values(cls, values: Iterable[str]) -> "ConfiguredSet":
        """Build a sorted set, deduplicated by canonical form.

        When several spellings share a canonical form, the lexically first one
        is kept as the name.
        """
        by_canonical: dict[str, LocaleIdentifier] = {}
        for value in sorted({value.strip() for value in values}):
            if not value:
                continue
            identifier = LocaleIdentifier.parse(value)
            if not identifier.canonical:
                continue
            by_canonical.setdefault(identifier.canonical, identifier)
        return cls(locales=tuple(sorted(by_canonical.values())))

    def without_special(self) -> tuple[LocaleIdentifier, ...]:
        """Return configured locales excluding C and POSIX."""
        return tuple(locale for locale in self.locales if not locale.is_special)

    def __iter__(self) -> Iterator[LocaleIdentifier]:
        return iter(self.locales)

    def __len__(self) -> int:
        return len(self.locales)


@dataclass(frozen=True)
class AvailableSet:
    """Canonical forms of the locales the system can use."""

    canonical: frozenset[str] = frozenset()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "AvailableSet":
        return cls(canonical=frozenset(canonicalize(name) for name in names if name.strip()))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, LocaleIdentifier):
            return item.canonical in self.canonical
        if isinstance(item, str):
            return canonicalize(item) in self.canonical
        return False

    def has_database_form(self, identifier: LocaleIdentifier) -> bool:
        """Check if a locale is present under its normalized codeset spelling."""
        target = database_form(identifier.name)
        return any(database_form(name) == target for name in self.canonical)

    def __len__(self) -> int:
        return len(self.canonical)


@dataclass(frozen=True)
class MissingSet:
    """Configured locales absent from the system, in configured order."""

    locales: tuple[LocaleIdentifier, ...] = ()

    @property
    def names(self) -> list[str]:
        return [locale.name for locale in self.locales]

    @property
    def canonical(self) -> list[str]:
        return [locale.canonical for locale in self.locales]

    def __iter__(self) -> Iterator[LocaleIdentifier]:
        return iter(self.locales)

    def __len__(self) -> int:
        return len(self.locales)


class Outcome(str, Enum):
    NOTHING_CONFIGURED = "nothing-configured"
    ONLY_SPECIAL = "only-special"
    ALL_AVAILABLE = "all-available"
    MISSING = "missing"


@dataclass(frozen=True)
class ReconcileResult:
    """What a reconcile run found and what a repair has to change."""

    outcome: Outcome
    configured: ConfiguredSet = field(default_factory=ConfiguredSet)
    missing: MissingSet = field(default_factory=MissingSet)
    defaults_to_update: Mapping[str, str] = field(default_factory=dict)

    @property
    def needs_repair(self) -> bool:
        return self.outcome == Outcome.MISSING
