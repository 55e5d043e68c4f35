"""Environment variables — where ``PATH`` values come from and go to.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  ``PATH`` is the one this package cares about,
but nothing here is specific to it; the variable name is configurable.

Two ways in:

- **Environment** — an in-memory snapshot.  Copies are independent, like
  the copy a child process gets from its parent, so a value can be
  prepared for a subprocess without touching the current process.
- **var / set_var** — read and write the live process environment
  (``os.environ``).

Absence is never papered over: an unset variable reads as ``None``, not
as an empty ``PathEnv``.  Values travel as ``str`` decoded with
``os.fsdecode``, so undecodable bytes in a POSIX environment survive the
round trip.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from py_pathenv.logging import Logger, LogLevel
from py_pathenv.path_env import PathEnv

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

DEFAULT_VARIABLE = "PATH"


class Environment:
    """A key-value store for environment variables.

    Each instance is an independent copy; modifying one does not affect
    any other, nor the process environment.
    """

    def __init__(
        self,
        initial: Mapping[str, str] | None = None,
        *,
        logger: Logger | None = None,
    ) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).
            logger: Where to record path reads and writes.

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}
        self._logger = logger

    @classmethod
    def from_process(cls, *, logger: Logger | None = None) -> Environment:
        """Snapshot the current process environment."""
        return cls(os.environ, logger=logger)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def get_path(self, key: str = DEFAULT_VARIABLE) -> PathEnv | None:
        """Parse *key* as a search path, or return None if unset."""
        return _read(self._vars, key, self._logger)

    def set_path(self, path_env: PathEnv, key: str = DEFAULT_VARIABLE) -> None:
        """Store the canonical text of *path_env* under *key*."""
        _write(self._vars, key, path_env, self._logger)

    def copy(self) -> Environment:
        """Return an independent copy of this environment."""
        return Environment(initial=self._vars, logger=self._logger)

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)


def _read(environ: Mapping[str, str], key: str, logger: Logger | None) -> PathEnv | None:
    value = environ.get(key)
    if value is None:
        if logger is not None:
            logger.log(LogLevel.WARNING, "variable is not set", source="env", variable=key)
        return None
    path_env = PathEnv(value)
    if logger is not None:
        logger.log(LogLevel.DEBUG, f"read {len(path_env)} entries", source="env", variable=key)
    return path_env


def _write(environ: MutableMapping[str, str], key: str, path_env: PathEnv, logger: Logger | None) -> None:
    environ[key] = path_env.to_native()
    if logger is not None:
        logger.log(LogLevel.INFO, f"wrote {len(path_env)} entries", source="env", variable=key)


def var(name: str = DEFAULT_VARIABLE, *, logger: Logger | None = None) -> PathEnv | None:
    """Read the process environment variable *name* as a ``PathEnv``.

    Returns:
        The parsed value, or None if the variable is not set.

    """
    return _read(os.environ, name, logger)


def set_var(path_env: PathEnv, name: str = DEFAULT_VARIABLE, *, logger: Logger | None = None) -> None:
    """Set the process environment variable *name* to *path_env*.

    The canonical text is written; child processes started afterwards
    inherit it.
    """
    _write(os.environ, name, path_env, logger)
