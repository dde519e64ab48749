# konsolgame

Two small games you play in a terminal, plus the simple containers they are built on.

## Games

Install the package, then start a game:

```
konsolgame-dinerdash
konsolgame-dinerdash --seed 42
konsolgame-tictactoe
```

Both games read one command per line from standard input and write to standard output.

### Diner Dash

You run a small kitchen. Each order `M<n>` has a cooking time, a shelf life and a
price. The game starts with three orders, and each turn you type one command:

- `COOK M<n>` starts cooking a waiting order.
- `SERVE M<n>` serves a finished dish. You can only serve the order at the head of the queue.
- `SKIP` lets a round go by.

If a command is rejected, you are asked again. Every accepted command adds a new
random order. Dishes in the kitchen count down, and a finished dish moves to the
serving list. Dishes on the serving list spoil and are thrown away when their shelf
life runs out. The game ends when more than seven orders are waiting, when fifteen
dishes have been served, or when the input runs out. Your final score is the money
you earned.

`--seed` makes the random orders repeatable. You can also drive the game from code
with `konsolgame.dinerdash.DinerDash`. It has `handle_command`, `advance_round`,
`render`, `is_over` and `play`, and it takes an optional `random.Random` and an
output stream.

### Tic Tac Toe

Two players take turns. Player 1 plays `X` and player 2 plays `O`. On each turn,
type a cell number from 1 to 9. A taken or invalid cell is refused and the same
player tries again. Completing a row, a column or a diagonal scores 100 and the
other player scores 0. A full board with no line scores 50 each. If the input ends
before the game does, the command exits with status 1.

`konsolgame.tictactoe` also provides `new_board`, `check_win`, `render_board` and
`play(input_stream, output)`. `play` returns the two players' scores.

## Library

You can use the containers on their own:

- `konsolgame.arraydin.DynamicArray`: a growable list of strings with insert, delete, reverse, copy and search.
- `konsolgame.stack.Stack`: a stack that holds at most 100 items. Pushing onto a full stack raises `StackFullError`.
- `konsolgame.stringqueue.StringQueue`: a FIFO queue of up to 100 strings. Adding to a full queue raises `QueueFullError`.
- `konsolgame.scoremap.ScoreMap`: maps names to scores, keeps insertion order and holds at most 10 entries. `GameScores` and `ScoreboardList` group these maps by game.
- `konsolgame.stringset.StringSet`: a set of up to 10 strings that keeps insertion order.
- `konsolgame.scoreboard.Scoreboard`: scores sorted from highest to lowest, printed in one section per game.
- `konsolgame.dinerqueue`: `Dish`, `DishList` and `OrderQueue`, which Diner Dash uses.
- `konsolgame.words`: `CharReader` and `WordReader` read a stream, and helpers such as `read_command`, `first_string`, `second_string` and `string_to_int` parse typed commands.

```python
from konsolgame.stack import Stack

s = Stack()
s.push("a")
s.push("b")
assert s.pop() == "b"
assert len(s) == 1
```

## What it does not do

There is no main menu that ties the games together. Scores are not saved to or loaded
from files. The score tables reserve sections for other games (RNG, Tower of Hanoi,
Snake on Meteor, Hangman), but this package does not include those games.

## Tests

```
pip install .[test]
pytest
```