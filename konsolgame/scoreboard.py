"""A score table sorted from highest to lowest, split by game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

CAPACITY = 100

GAME_SECTIONS = (
    ("RNG", "RNG"),
    ("DINER DASH", "Diner Dash"),
    ("TICTACTOE", "Tictactoe"),
    ("TOWER OF HANOI", "Tower of Hanoi"),
    ("SNAKE ON METEOR", "Snake on Meteor"),
    ("HANGMAN", "HANGMAN"),
)


@dataclass(frozen=True)
class ScoreEntry:
    """One recorded score."""

    name: str
    score: int
    game: str


class Scoreboard:
    """Scores kept in descending order.

    A new score is placed before existing equal scores. A score of zero
    marks the end of the table and is therefore never recorded.
    """

    def __init__(self) -> None:
        self._entries: list[ScoreEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(list(self._entries))

    def add(self, name: str, score: int, game: str) -> None:
        """Record ``score`` for ``name`` in ``game``."""
        if score == 0:
            return
        if len(self._entries) == CAPACITY:
            raise OverflowError("scoreboard is full")
        position = next(
            (i for i, entry in enumerate(self._entries) if entry.score <= score),
            len(self._entries),
        )
        self._entries.insert(position, ScoreEntry(name, score, game))

    def render(self) -> str:
        """Return the scores of every game, one section per game."""
        lines = []
        for title, game in GAME_SECTIONS:
            lines.append(f"SCOREBOARD GAME {title}")
            rows = [f"{e.name} {e.score}" for e in self._entries if e.game == game]
            lines.extend(rows or ["SCOREBOARD KOSONG"])
        return "\n".join(lines) + "\n"