"""Platform defaults — the ``PATH`` a system uses when nothing is set.

POSIX systems report their default search path through the ``getconf
PATH`` command.  Running it is the only slow, fallible operation in this
package, so it gets a timeout and a dedicated error:

- Failing to launch ``getconf`` (e.g. it is not installed) raises the
  ``OSError`` from ``subprocess`` unchanged.
- A non-zero exit status or a timeout raises ``GetconfError``, itself an
  ``OSError``.

Windows has no such command; its well-known defaults are constants.
"""

from __future__ import annotations

import subprocess

from py_pathenv.logging import Logger, LogLevel
from py_pathenv.path_env import PathEnv

GETCONF_COMMAND = ("getconf", "PATH")
GETCONF_TIMEOUT = 5.0

WINDOWS_DEFAULT_PATH = r"%SystemRoot%\system32;%SystemRoot%;%SystemRoot%\System32\Wbem"
WINDOWS_DEFAULT_PATH_EXT = WINDOWS_DEFAULT_PATH + r";%SYSTEMROOT%\System32\WindowsPowerShell\v1.0" + "\\"


class GetconfError(OSError):
    """Raise when ``getconf PATH`` fails or times out."""


def _fail(msg: str, logger: Logger | None) -> GetconfError:
    if logger is not None:
        logger.log(LogLevel.ERROR, msg, source="getconf", variable="PATH")
    return GetconfError(msg)


def getconf(*, timeout: float = GETCONF_TIMEOUT, logger: Logger | None = None) -> bytes:
    """Return the raw output of ``getconf PATH``.

    Args:
        timeout: Seconds to wait for the command.
        logger: Where to record failures.

    Returns:
        The default ``PATH`` as bytes, without the trailing newline.

    Raises:
        GetconfError: If the command exits non-zero or times out.
        OSError: If the command cannot be started.

    """
    try:
        result = subprocess.run(  # noqa: S603
            GETCONF_COMMAND,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        msg = f"getconf PATH timed out after {timeout}s"
        raise _fail(msg, logger) from exc

    if result.returncode != 0:
        msg = f"getconf PATH exited with status {result.returncode}"
        raise _fail(msg, logger)

    if logger is not None:
        logger.log(LogLevel.DEBUG, "read default path", source="getconf", variable="PATH")
    return result.stdout.rstrip(b"\r\n")


def from_getconf(*, timeout: float = GETCONF_TIMEOUT, logger: Logger | None = None) -> PathEnv:
    """Return the POSIX default ``PATH`` as a ``PathEnv``.

    Raises:
        GetconfError: If the command exits non-zero or times out.
        OSError: If the command cannot be started.

    """
    return PathEnv(getconf(timeout=timeout, logger=logger))
