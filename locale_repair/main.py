"""Main entry point for locale-repair."""

import logging
import sys

import click

from locale_repair.config import RepairConfig, Scope
from locale_repair.reconciler import reconcile
from locale_repair.repair import repair_locales, report
from locale_repair.system import HostLocaleSystem
from locale_repair.utils import setup_logging

logger = logging.getLogger("locale_repair")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("locales", nargs=-1)
@click.option(
    "--scope",
    "-s",
    type=click.Choice([scope.value for scope in Scope]),
    default=Scope.ALL.value,
    show_default=True,
    help="Where to look for configured locales besides the environment",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Report missing locales without changing the system",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def main(locales: tuple[str, ...], scope: str, dry_run: bool, verbose: bool) -> None:
    """Detect configured locales missing on this Debian host and generate them.

    LOCALES are extra locale names (e.g. de_AT.UTF-8) to check alongside
    LANG/LC_* from the environment, `locale`, and config files.
    """
    setup_logging(verbose)

    config = RepairConfig(
        scope=Scope(scope),
        explicit_locales=locales,
        dry_run=dry_run,
    )
    system = HostLocaleSystem()

    try:
        logger.info("=== Checking locales ===")
        result = reconcile(system, config)
        report(result)

        if result.needs_repair:
            logger.info("=== Repairing locales ===")
            repair_locales(system, result, dry_run=config.dry_run)

    except Exception as error:
        logger.error("Locale repair failed: %s", error)
        if verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    main()
