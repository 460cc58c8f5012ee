"""Locale generation - enable entries in /etc/locale.gen, run locale-gen, set defaults."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from locale_repair.config import LOCALE_GEN_FILE
from locale_repair.identifiers import canonicalize
from locale_repair.utils import run, sudo_prefix

logger = logging.getLogger("locale_repair")

DEFAULT_CHARSET = "ISO-8859-1"


def locale_gen_entry(name: str) -> str:
    """Build a /etc/locale.gen line such as ``de_AT.UTF-8 UTF-8``."""
    _, dot, codeset = name.partition(".")
    charset = codeset.split("@", 1)[0] if dot else ""
    return f"{name} {charset or DEFAULT_CHARSET}"


def update_locale_gen(text: str, names: Sequence[str]) -> tuple[str, bool]:
    """Uncomment or append /etc/locale.gen entries for the given locales.

    Returns the new file content and whether anything changed.
    """
    wanted = {canonicalize(name): name for name in names}
    lines = text.splitlines()
    found = {
        canonicalize(fields[0])
        for fields in (line.split() for line in lines)
        if len(fields) == 2 and not fields[0].startswith("#")
    }
    changed = False

    for index, line in enumerate(lines):
        stripped = line.strip()
        if not stripped.startswith("#"):
            continue
        entry = stripped.lstrip("#").strip()
        fields = entry.split()
        if len(fields) != 2:
            continue
        canonical = canonicalize(fields[0])
        if canonical in wanted and canonical not in found:
            lines[index] = entry
            found.add(canonical)
            changed = True

    for canonical, name in wanted.items():
        if canonical not in found:
            lines.append(locale_gen_entry(name))
            changed = True

    return "\n".join(lines) + "\n", changed


def enable_locales(names: Sequence[str], locale_gen: str | Path = LOCALE_GEN_FILE) -> None:
    """Make sure locale-gen will build the given locales."""
    path = Path(locale_gen)
    if not path.exists():
        logger.debug("%s not found; relying on locale-gen arguments", path)
        return

    content, changed = update_locale_gen(path.read_text(), names)
    if not changed:
        logger.debug("%s already enables %s", path, ", ".join(names))
        return

    sudo = sudo_prefix()
    backup = path.with_name(f"{path.name}.bak")
    logger.info("Backing up %s to %s", path, backup)
    run([*sudo, "cp", "-p", str(path), str(backup)])

    logger.info("Enabling %s in %s", ", ".join(names), path)
    run([*sudo, "tee", str(path)], capture=True, input=content)


def generate_locales(names: Sequence[str]) -> None:
    """Generate the given locales with a single locale-gen call."""
    logger.info("Generating missing locales: %s", " ".join(names))
    run([*sudo_prefix(), "locale-gen", *names])
    logger.info("Locale generation complete")


def update_system_defaults(defaults: Mapping[str, str]) -> None:
    """Set system-wide locale defaults with update-locale."""
    if not defaults:
        return

    assignments = [f"{key}={value}" for key, value in defaults.items()]
    logger.info("Updating system locale defaults: %s", " ".join(assignments))
    run([*sudo_prefix(), "update-locale", *assignments])
