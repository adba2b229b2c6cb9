"""Command history with prefix search and persistence to a file."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class History:
    """A bounded history of entered commands, newest first."""

    path: Path
    capacity: int
    _entries: deque = field(init=False, default_factory=deque)
    _cursor: int | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.path = Path(os.fspath(self.path))
        self._entries = deque(maxlen=self.capacity)

    def load(self) -> None:
        """Add the entries stored in the history file, if there is one."""
        try:
            f = open(self.path, encoding="utf-8", newline="")
        except OSError:
            return
        with f:
            for line in f:
                if line.endswith("\n"):
                    line = line[:-1]
                    if line.endswith("\r"):
                        line = line[:-1]
                self.add(line)

    def save(self) -> None:
        """Write the entries to the history file, oldest first."""
        if self.is_empty():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            for entry in reversed(self._entries):
                f.write(entry + "\n")

    def add(self, entry: str) -> None:
        """Add an entry, unless it repeats the most recent one."""
        entry = str(entry)
        if not self._entries or self._entries[0] != entry:
            self._entries.appendleft(entry)

    def reset(self) -> None:
        self._cursor = None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    @staticmethod
    def _matches(entry: str, prefix: str) -> bool:
        return entry.startswith(prefix) and entry != prefix

    def next(self, prefix: str) -> str | None:
        """Move towards newer entries, returning the next one matching ``prefix``."""
        start = len(self) - (self._cursor or 0)
        for cursor in range(len(self) - 1 - start, -1, -1):
            if self._matches(self._entries[cursor], prefix):
                self._cursor = cursor
                return self._entries[cursor]
        self._cursor = None
        return None

    def prev(self, prefix: str) -> str | None:
        """Move towards older entries, returning the next one matching ``prefix``."""
        start = 0 if self._cursor is None else self._cursor + 1
        for cursor in range(start, len(self)):
            if self._matches(self._entries[cursor], prefix):
                self._cursor = cursor
                return self._entries[cursor]
        return None

    def get(self, index: int) -> str | None:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def entries(self) -> list[str]:
        """Return the entries, newest first."""
        return list(self._entries)