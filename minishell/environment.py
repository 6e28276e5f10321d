"""The shell's environment and state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


def format_entry(key: str, value: str) -> str:
    """Join a key and a value into a ``KEY=VALUE`` entry."""
    return f"{key}={value}"


class Environment:
    """An ordered list of ``KEY=VALUE`` entries, as handed to child programs."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def _index(self, key: str) -> int | None:
        prefix = key + "="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def get(self, name: str) -> str | None:
        """Return the value of *name*, or ``None`` when it is not set."""
        index = self._index(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1:]

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value*, replacing in place or appending at the end."""
        entry = format_entry(key, value)
        index = self._index(key)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, key: str) -> bool:
        """Remove *key*; return whether an entry was removed."""
        index = self._index(key)
        if index is None:
            return False
        del self._entries[index]
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"

    def as_list(self) -> list[str]:
        """Return a copy of the entries in order."""
        return list(self._entries)


@dataclass
class Shell:
    """The state a running shell carries between commands."""

    env: Environment = field(default_factory=Environment)
    status: int = 0

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Shell":
        """Build a shell whose environment copies *mapping*, status 0."""
        return cls(Environment(format_entry(k, v) for k, v in mapping.items()))