"""An ordered, bounded map from player names to scores."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

MAX_ELEMENTS = 10
UNDEFINED = -999

_INDENT = " " * 64
_RULE = "-" * 45


class ScoreMap:
    """Maps names to integer scores, keeping insertion order.

    Holds at most ``MAX_ELEMENTS`` entries. Inserting an existing key
    leaves the map unchanged.
    """

    def __init__(self) -> None:
        self._entries: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[tuple[str, int]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        return iter(list(self._entries.items()))

    def is_empty(self) -> bool:
        """Return True when the map holds no entries."""
        return not self._entries

    def is_full(self) -> bool:
        """Return True when the map is at capacity."""
        return len(self._entries) == MAX_ELEMENTS

    def value(self, key: str) -> int:
        """Return the value stored under ``key``, or ``UNDEFINED``."""
        return self._entries.get(key, UNDEFINED)

    def insert(self, key: str, value: int) -> None:
        """Store ``value`` under ``key`` unless ``key`` is already present."""
        if key in self._entries:
            return
        if self.is_full():
            raise OverflowError("map is full")
        self._entries[key] = value

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._entries.pop(key, None)

    def index_of_max(self) -> int:
        """Return the position of the first entry with the highest value."""
        if not self._entries:
            raise ValueError("index_of_max of empty map")
        values = list(self._entries.values())
        return values.index(max(values))

    def copy(self) -> ScoreMap:
        """Return an independent copy of the map."""
        duplicate = ScoreMap()
        duplicate._entries = dict(self._entries)
        return duplicate

    def render(self) -> str:
        """Return the map as a name/score table."""
        parts = [
            f"{_INDENT}{_RULE}",
            f"\n{_INDENT}|          NAMA          |       SKOR       |",
            f"\n{_INDENT}{_RULE}",
        ]
        parts.extend(
            f"\n{_INDENT}|          {key}          |        {value}        |"
            for key, value in self._entries.items()
        )
        parts.append(f"\n{_INDENT}{_RULE}\n")
        return "".join(parts)


@dataclass
class GameScores:
    """The scores recorded for one game."""

    name: str
    scores: ScoreMap = field(default_factory=ScoreMap)


class ScoreboardList:
    """An ordered list of per-game score maps, at most ``MAX_ELEMENTS`` long."""

    def __init__(self) -> None:
        self.games: list[GameScores] = []

    def __len__(self) -> int:
        return len(self.games)

    def append(self, game_scores: GameScores) -> None:
        """Add the scores of one more game at the end."""
        if len(self.games) == MAX_ELEMENTS:
            raise OverflowError("scoreboard list is full")
        self.games.append(game_scores)

    def delete_at(self, index: int) -> GameScores:
        """Remove and return the game scores at ``index``."""
        if not 0 <= index < len(self.games):
            raise IndexError(f"delete position {index} out of range")
        return self.games.pop(index)