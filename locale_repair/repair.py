"""Apply a reconcile result to the host."""

import logging

from locale_repair.errors import RemedialActionError
from locale_repair.identifiers import Outcome, ReconcileResult
from locale_repair.reconciler import collect_available
from locale_repair.system import LocaleSystem

logger = logging.getLogger("locale_repair")


def report(result: ReconcileResult) -> None:
    """Log what reconciliation found."""
    if result.outcome == Outcome.NOTHING_CONFIGURED:
        logger.warning("No configured locale variables found (LANG/LC_* are empty)")
        logger.info("Nothing to repair")
    elif result.outcome == Outcome.ONLY_SPECIAL:
        logger.info("Only C/POSIX locales are configured. Nothing to repair")
    elif result.outcome == Outcome.ALL_AVAILABLE:
        logger.info("All discovered locale settings are available. No changes needed")
    else:
        logger.warning("Missing configured locale(s): %s", " ".join(result.missing.names))


def verify_repair(system: LocaleSystem, result: ReconcileResult) -> None:
    """Fail if any repaired locale is still absent from `locale -a`.

    Locales listed only under glibc's normalized codeset spelling were
    generated; they are reported with a warning instead.
    """
    available = collect_available(system)
    still_missing = []
    respelled = []
    for locale in result.missing:
        if locale in available:
            continue
        if available.has_database_form(locale):
            respelled.append(locale.name)
        else:
            still_missing.append(locale.name)

    if respelled:
        logger.warning(
            "Generated %s, but `locale -a` lists it with a normalized codeset; "
            "configure it with that spelling to avoid repeated repairs",
            ", ".join(respelled),
        )

    if still_missing:
        raise RemedialActionError(
            f"Locale generation did not provide: {', '.join(still_missing)}"
        )


def repair_locales(system: LocaleSystem, result: ReconcileResult, *, dry_run: bool = False) -> bool:
    """Generate missing locales and update system defaults.

    Privilege is only requested here, after reconciliation found something to
    repair. Returns True if the system was changed.
    """
    if not result.needs_repair:
        return False

    names = result.missing.names
    defaults = dict(result.defaults_to_update)

    if dry_run:
        logger.info("Dry run: would generate %s", " ".join(names))
        if defaults:
            logger.info(
                "Dry run: would set %s",
                " ".join(f"{key}={value}" for key, value in defaults.items()),
            )
        return False

    system.acquire_privilege()
    system.ensure_locales_package()
    system.generate_locales(names)

    if defaults:
        system.update_defaults(defaults)

    verify_repair(system, result)

    logger.info("Locale repair finished")
    logger.info("Open a new shell session (or reboot) to apply updated locale defaults")
    return True
