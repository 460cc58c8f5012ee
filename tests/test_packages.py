"""Tests for packages module."""

import logging
from types import SimpleNamespace

import pytest

from locale_repair import packages
from locale_repair.errors import RemedialActionError


def test_is_package_installed(monkeypatch) -> None:
    """dpkg-query status decides whether a package is installed."""
    monkeypatch.setattr(
        packages,
        "run",
        lambda cmd, **kwargs: SimpleNamespace(stdout="install ok installed"),
    )
    assert packages.is_package_installed("locales") is True

    monkeypatch.setattr(
        packages,
        "run",
        lambda cmd, **kwargs: SimpleNamespace(stdout="unknown ok not-installed"),
    )
    assert packages.is_package_installed("locales") is False


def test_install_packages_skips_installed(monkeypatch, caplog) -> None:
    """Nothing runs when every package is present."""
    calls: list[list[str]] = []
    monkeypatch.setattr(packages, "is_package_installed", lambda _: True)
    monkeypatch.setattr(packages, "run", lambda cmd, **kwargs: calls.append(list(cmd)))

    caplog.set_level(logging.INFO, logger="locale_repair")
    packages.install_packages(["locales"])

    assert calls == []
    assert "All packages already installed" in caplog.text


def test_install_packages_uses_sudo_prefix(monkeypatch) -> None:
    """apt-get runs through sudo when required."""
    calls: list[list[str]] = []
    monkeypatch.setattr(packages, "is_package_installed", lambda _: False)
    monkeypatch.setattr(packages, "sudo_prefix", lambda: ["sudo"])
    monkeypatch.setattr(packages, "run", lambda cmd, **kwargs: calls.append(list(cmd)))

    packages.install_packages(["locales"])

    assert calls == [
        ["sudo", "apt-get", "update", "-qq"],
        ["sudo", "apt-get", "install", "-y", "-qq", "--no-install-recommends", "locales"],
    ]


def test_ensure_locales_package_skips_when_tools_present(monkeypatch) -> None:
    """No install when locale-gen and update-locale exist."""
    installed: list[list[str]] = []
    monkeypatch.setattr(packages, "command_exists", lambda _: True)
    monkeypatch.setattr(packages, "install_packages", lambda pkgs: installed.append(list(pkgs)))

    packages.ensure_locales_package()

    assert installed == []


def test_ensure_locales_package_installs_when_missing(monkeypatch, caplog) -> None:
    """Install locales when its tools are absent."""
    installed: list[list[str]] = []
    state = {"present": False}

    def fake_install(pkgs):
        installed.append(list(pkgs))
        state["present"] = True

    monkeypatch.setattr(packages, "command_exists", lambda _: state["present"])
    monkeypatch.setattr(packages, "install_packages", fake_install)

    caplog.set_level(logging.INFO, logger="locale_repair")
    packages.ensure_locales_package()

    assert installed == [["locales"]]
    assert "Installing locales package" in caplog.text


def test_ensure_locales_package_fails_when_tools_still_missing(monkeypatch) -> None:
    """A package install that does not provide the tools is fatal."""
    monkeypatch.setattr(packages, "command_exists", lambda cmd: cmd == "update-locale")
    monkeypatch.setattr(packages, "install_packages", lambda pkgs: None)

    with pytest.raises(RemedialActionError, match="still missing"):
        packages.ensure_locales_package()
