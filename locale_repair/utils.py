"""Utility functions for command execution and logging."""

import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

logger = logging.getLogger("locale_repair")


class ColorFormatter(logging.Formatter):
    """Colored level prefixes and bold section headers."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    COLORS = {
        logging.DEBUG: "\033[90m",
        logging.INFO: "\033[34m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{self.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()

        if message.startswith("===") and message.endswith("==="):
            formatted = "\n" + self._paint(message, self.BOLD)
        else:
            prefix = self._paint(f"{record.levelname}:", self.COLORS.get(record.levelno, ""))
            formatted = f"{prefix} {message}"

        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"
        return formatted


def setup_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """Configure logging."""
    stream = stream or sys.stderr
    use_color = stream.isatty() and "NO_COLOR" not in os.environ

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(use_color=use_color))

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler])
    logger.setLevel(level)


def run(
    cmd: Sequence[str],
    *,
    check: bool = True,
    capture: bool = False,
    env: dict[str, str] | None = None,
    input: str | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command with logging."""
    logger.debug("Running: %s", " ".join(cmd))
    return subprocess.run(
        cmd,
        check=check,
        capture_output=capture,
        text=True,
        env=env,
        input=input,
    )


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    return bool(cmd) and shutil.which(cmd) is not None


def is_root() -> bool:
    """Check if the process runs with effective UID 0."""
    return os.geteuid() == 0


def sudo_prefix() -> list[str]:
    """Return the command prefix needed for privileged commands."""
    return [] if is_root() else ["sudo"]
