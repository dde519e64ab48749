import pytest

from konsolgame.scoremap import (
    MAX_ELEMENTS,
    UNDEFINED,
    GameScores,
    ScoreboardList,
    ScoreMap,
)


def test_driver_scenario():
    scores = ScoreMap()
    assert scores.is_empty() is True
    assert scores.is_full() is False
    scores.insert("TES", 23)
    assert scores.is_empty() is False
    assert scores.value("TES") == 23
    rendered = scores.render()
    assert "|          TES          |        23        |" in rendered
    assert "NAMA" in rendered and "SKOR" in rendered


def test_missing_key_gives_undefined():
    scores = ScoreMap()
    scores.insert("ALICE", 5)
    assert scores.value("BOB") == UNDEFINED


def test_insert_existing_key_is_ignored():
    scores = ScoreMap()
    scores.insert("ALICE", 5)
    scores.insert("ALICE", 9)
    assert scores.value("ALICE") == 5
    assert len(scores) == 1


def test_iteration_keeps_insertion_order():
    scores = ScoreMap()
    scores.insert("B", 2)
    scores.insert("A", 1)
    scores.insert("C", 3)
    assert list(scores) == [("B", 2), ("A", 1), ("C", 3)]


def test_delete():
    scores = ScoreMap()
    scores.insert("A", 1)
    scores.insert("B", 2)
    scores.delete("A")
    assert "A" not in scores
    assert list(scores) == [("B", 2)]
    scores.delete("missing")
    assert len(scores) == 1


def test_full_map():
    scores = ScoreMap()
    for n in range(MAX_ELEMENTS):
        scores.insert(f"P{n}", n)
    assert scores.is_full()
    with pytest.raises(OverflowError):
        scores.insert("EXTRA", 1)


def test_index_of_max_picks_first_highest():
    scores = ScoreMap()
    scores.insert("A", 10)
    scores.insert("B", 30)
    scores.insert("C", 30)
    assert scores.index_of_max() == 1


def test_index_of_max_empty_raises():
    with pytest.raises(ValueError):
        ScoreMap().index_of_max()


def test_copy_is_independent():
    scores = ScoreMap()
    scores.insert("A", 1)
    duplicate = scores.copy()
    duplicate.insert("B", 2)
    assert list(scores) == [("A", 1)]
    assert list(duplicate) == [("A", 1), ("B", 2)]


def test_scoreboard_list_delete_at():
    boards = ScoreboardList()
    names = ["RNG", "DINER DASH", "HANGMAN"]
    for name in names:
        boards.append(GameScores(name))
    removed = boards.delete_at(1)
    assert removed.name == "DINER DASH"
    assert [game.name for game in boards.games] == ["RNG", "HANGMAN"]
    assert len(boards) == 2


def test_scoreboard_list_errors():
    boards = ScoreboardList()
    with pytest.raises(IndexError):
        boards.delete_at(0)
    for n in range(MAX_ELEMENTS):
        boards.append(GameScores(f"G{n}"))
    with pytest.raises(OverflowError):
        boards.append(GameScores("extra"))