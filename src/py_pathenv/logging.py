"""Event log for the system boundary.

The core (splitting, caching, comparing) never logs: it is pure
computation over bytes already in memory.  Things only go wrong at the
edges, where a ``PATH`` is read from or written to the process
environment, or fetched by running ``getconf``.  Those edges record what
they did in a ``Logger``:

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — one immutable record (level, message, source, variable).
- **Logger** — an append-only buffer with filtering and clearing.

Callers pass a ``Logger`` in with ``logger=``; passing nothing keeps the
boundary silent.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries, ordered for ``>=`` filtering."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The boundary that generated the event ("env", "getconf").
        variable: The environment variable involved, if any.

    """

    level: LogLevel
    message: str
    source: str
    variable: str | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source(variable): message``."""
        where = self.source if self.variable is None else f"{self.source}({self.variable})"
        return f"[{self.level.name}] {where}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in the order they were recorded."""
        return list(self._entries)

    def __len__(self) -> int:
        """Return the number of recorded entries."""
        return len(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        variable: str | None = None,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Boundary that generated the event.
            variable: Environment variable involved, if any.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source, variable=variable))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        return [
            entry
            for entry in self._entries
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
        ]

    def lines(self) -> list[str]:
        """Return every entry formatted with ``str()``."""
        return [str(entry) for entry in self._entries]

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
