from konsolgame.scoreboard import GAME_SECTIONS, Scoreboard, ScoreEntry


def test_entries_sorted_descending():
    board = Scoreboard()
    for name, score in [("a", 5), ("b", 20), ("c", 10), ("d", 1)]:
        board.add(name, score, "RNG")
    scores = [entry.score for entry in board]
    assert scores == sorted(scores, reverse=True)
    assert len(board) == 4


def test_equal_score_goes_before_existing():
    board = Scoreboard()
    board.add("first", 7, "RNG")
    board.add("second", 7, "RNG")
    assert [entry.name for entry in board] == ["second", "first"]


def test_zero_score_not_recorded():
    board = Scoreboard()
    board.add("a", 0, "RNG")
    assert len(board) == 0


def test_entry_fields():
    board = Scoreboard()
    board.add("budi", 12, "HANGMAN")
    assert list(board) == [ScoreEntry("budi", 12, "HANGMAN")]


def test_render_empty_board():
    lines = Scoreboard().render().splitlines()
    assert lines[0] == "SCOREBOARD GAME RNG"
    assert lines.count("SCOREBOARD KOSONG") == len(GAME_SECTIONS)


def test_render_groups_by_game():
    board = Scoreboard()
    board.add("ani", 50, "Diner Dash")
    board.add("budi", 3, "RNG")
    lines = board.render().splitlines()
    rng = lines.index("SCOREBOARD GAME RNG")
    diner = lines.index("SCOREBOARD GAME DINER DASH")
    assert lines[rng + 1] == "budi 3"
    assert lines[diner + 1] == "ani 50"
    assert lines.count("SCOREBOARD KOSONG") == len(GAME_SECTIONS) - 2