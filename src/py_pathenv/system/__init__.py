"""System boundary — environment access and platform defaults.

Re-exports public symbols so callers can write::

    from py_pathenv.system import Environment, var, from_getconf
"""

from py_pathenv.system.defaults import (
    GETCONF_TIMEOUT,
    WINDOWS_DEFAULT_PATH,
    WINDOWS_DEFAULT_PATH_EXT,
    GetconfError,
    from_getconf,
    getconf,
)
from py_pathenv.system.env import DEFAULT_VARIABLE, Environment, set_var, var

__all__ = [
    "DEFAULT_VARIABLE",
    "GETCONF_TIMEOUT",
    "WINDOWS_DEFAULT_PATH",
    "WINDOWS_DEFAULT_PATH_EXT",
    "Environment",
    "GetconfError",
    "from_getconf",
    "getconf",
    "set_var",
    "var",
]
