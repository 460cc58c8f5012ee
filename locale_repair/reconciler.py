"""Locale reconciliation - find configured locales the system cannot provide."""

import logging
from collections.abc import Mapping

from locale_repair.config import DEFAULT_KEYS, LOCALE_COMMAND, RepairConfig
from locale_repair.errors import PreconditionError
from locale_repair.identifiers import (
    AvailableSet,
    ConfiguredSet,
    MissingSet,
    Outcome,
    ReconcileResult,
    is_special,
)
from locale_repair.parsing import (
    environment_assignments,
    parse_available,
    parse_config_file,
    parse_locale_report,
)
from locale_repair.system import LocaleSystem

logger = logging.getLogger("locale_repair")


def collect_available(system: LocaleSystem) -> AvailableSet:
    """Read the locales the system currently supports."""
    if not system.has_command(LOCALE_COMMAND):
        raise PreconditionError(f"'{LOCALE_COMMAND}' command not found on this system")

    available = AvailableSet.from_names(parse_available(system.available_locales()))
    logger.debug("Available locales: %d", len(available))
    return available


def collect_configured(system: LocaleSystem, config: RepairConfig) -> ConfiguredSet:
    """Gather locale values from every source selected by the config."""
    values = [assignment.value for assignment in environment_assignments(system.environ())]
    values.extend(assignment.value for assignment in parse_locale_report(system.locale_report()))

    for path in config.get_config_files():
        text = system.read_text(path)
        if text is None:
            continue
        found = [assignment.value for assignment in parse_config_file(text)]
        if found:
            logger.debug("Found %s in %s", ", ".join(found), path)
        values.extend(found)

    values.extend(config.explicit_locales)

    configured = ConfiguredSet.from_values(values)
    logger.debug("Configured locales: %s", ", ".join(map(str, configured)) or "none")
    return configured


def diff(configured: ConfiguredSet, available: AvailableSet) -> MissingSet:
    """Return non-special configured locales that are not available."""
    return MissingSet(
        locales=tuple(locale for locale in configured.without_special() if locale not in available)
    )


def defaults_to_update(environ: Mapping[str, str]) -> dict[str, str]:
    """Return the system defaults to set after a repair.

    Only LANG and LC_ALL are defaults; other LC_* variables are left alone.
    """
    defaults = {}
    for key in DEFAULT_KEYS:
        value = environ.get(key, "")
        if value and not is_special(value):
            defaults[key] = value
    return defaults


def reconcile(system: LocaleSystem, config: RepairConfig) -> ReconcileResult:
    """Work out which configured locales are missing and which defaults to set."""
    available = collect_available(system)
    configured = collect_configured(system, config)

    if not configured:
        return ReconcileResult(outcome=Outcome.NOTHING_CONFIGURED)

    if not configured.without_special():
        return ReconcileResult(outcome=Outcome.ONLY_SPECIAL, configured=configured)

    missing = diff(configured, available)
    if not missing:
        return ReconcileResult(outcome=Outcome.ALL_AVAILABLE, configured=configured)

    return ReconcileResult(
        outcome=Outcome.MISSING,
        configured=configured,
        missing=missing,
        defaults_to_update=defaults_to_update(system.environ()),
    )
