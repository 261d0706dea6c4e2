"""Locating executables along PATH and splitting command strings."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Optional

from pipex.textutil import split


class CommandNotFoundError(Exception):
    """Raised when a command string holds no words."""


def get_path_from_env(env: Mapping[str, str]) -> Optional[str]:
    """Return the value of PATH in ``env``, or None if it is not set."""
    return env.get("PATH")


def parse_paths(env: Mapping[str, str]) -> list[str]:
    """Return the PATH directories of ``env``, each ending in a slash."""
    value = get_path_from_env(env)
    if value is None:
        raise LookupError("PATH not found")
    return [directory + "/" for directory in split(value, ":")]


def find_cmd_path(cmd: str, paths: Iterable[str]) -> Optional[str]:
    """Return the first ``prefix + cmd`` that is executable, or None."""
    for prefix in paths:
        candidate = prefix + cmd
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def parse_command(arg: str) -> list[str]:
    """Split a command string on spaces into its argument vector."""
    words = split(arg, " ")
    if not words:
        raise CommandNotFoundError(f"no command in {arg!r}")
    return words