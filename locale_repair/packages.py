"""Package installation logic."""

import logging
from collections.abc import Sequence

from locale_repair.config import LOCALES_PACKAGE
from locale_repair.errors import RemedialActionError
from locale_repair.utils import command_exists, run, sudo_prefix

logger = logging.getLogger("locale_repair")

LOCALE_TOOLS = ("locale-gen", "update-locale")


def is_package_installed(package: str) -> bool:
    """Check if a Debian package is installed."""
    result = run(
        ["dpkg-query", "-W", "-f=${Status}", package],
        check=False,
        capture=True,
    )
    return "install ok installed" in result.stdout


def install_packages(packages: Sequence[str]) -> None:
    """Install Debian packages that are not installed yet."""
    to_install = [package for package in packages if not is_package_installed(package)]

    if not to_install:
        logger.info("All packages already installed")
        return

    logger.info("Installing %d packages: %s", len(to_install), ", ".join(to_install))

    sudo = sudo_prefix()
    run([*sudo, "apt-get", "update", "-qq"])
    run(
        [
            *sudo,
            "apt-get",
            "install",
            "-y",
            "-qq",
            "--no-install-recommends",
            *to_install,
        ]
    )

    logger.info("Package installation complete")


def locale_tools_available() -> bool:
    """Check if locale-gen and update-locale are both in PATH."""
    return all(command_exists(tool) for tool in LOCALE_TOOLS)


def ensure_locales_package() -> None:
    """Install the locales package unless its tools are already present."""
    if locale_tools_available():
        logger.debug("locale-gen and update-locale already available")
        return

    logger.info("Installing %s package...", LOCALES_PACKAGE)
    install_packages([LOCALES_PACKAGE])

    if not locale_tools_available():
        raise RemedialActionError(
            f"{' and '.join(LOCALE_TOOLS)} still missing after installing {LOCALES_PACKAGE}"
        )
