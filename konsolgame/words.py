"""Character and line readers plus small helpers for parsing typed commands."""

from __future__ import annotations

from typing import TextIO

NMAX = 50
BLANK = " "
ENTER = "\n"
INVALID_NUMBER = -9999


class CharReader:
    """Reads a text stream one character at a time.

    ``current`` holds the character under the reading window and ``eop``
    turns true once the stream is exhausted. When the end is reached the
    last character read stays in ``current``.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.current: str | None = None
        self.eop = False
        self.advance()

    def advance(self) -> None:
        """Move the window forward by one character."""
        char = self._stream.read(1)
        if char:
            self.current = char
        else:
            self.eop = True


class WordReader:
    """Reads a stream line by line, each line being one word.

    Leading blanks are skipped before the first word only. A word longer
    than ``NMAX`` characters is cut to ``NMAX``. ``end_word`` turns true
    at an empty line or at the end of the stream.
    """

    def __init__(self, stream: TextIO) -> None:
        self._chars = CharReader(stream)
        self.current_word = ""
        self.end_word = False
        self._skip_blanks()
        if self._at_word_end():
            self.end_word = True
        else:
            self._copy_word()

    def advance(self) -> None:
        """Acquire the next word, or mark the end of words."""
        self._chars.advance()
        if self._at_word_end():
            self.end_word = True
        else:
            self._copy_word()

    def _skip_blanks(self) -> None:
        while not self._chars.eop and self._chars.current == BLANK:
            self._chars.advance()

    def _at_word_end(self) -> bool:
        return self._chars.eop or self._chars.current == ENTER

    def _copy_word(self) -> None:
        letters = []
        while not self._at_word_end():
            letters.append(self._chars.current)
            self._chars.advance()
        self.current_word = "".join(letters[:NMAX])


def read_command(stream: TextIO) -> str:
    """Read one line from ``stream`` without its newline.

    Raises EOFError when the stream is already exhausted.
    """
    letters = []
    while True:
        char = stream.read(1)
        if not char:
            if not letters:
                raise EOFError("no more input")
            break
        if char == ENTER:
            break
        letters.append(char)
    return "".join(letters)


def compare_str(first: str, second: str) -> bool:
    """Return True when both strings are identical."""
    return first == second


def count_space(text: str) -> int:
    """Count the blank characters in ``text``."""
    return text.count(BLANK)


def first_string(command: str) -> str:
    """Return the part of ``command`` before the first blank."""
    return command.partition(BLANK)[0]


def second_string(command: str) -> str:
    """Return everything after the first blank, or an empty string."""
    return command.partition(BLANK)[2]


def is_number(text: str) -> bool:
    """Return True when ``text`` holds no blanks."""
    return count_space(text) == 0


def _fold_digits(text: str) -> int:
    result = 0
    for char in text:
        result = result * 10 + ord(char) - ord("0")
    return result


def string_to_int(text: str) -> int:
    """Convert a digit string to an integer; text with blanks gives -9999."""
    if not is_number(text):
        return INVALID_NUMBER
    return _fold_digits(text)


def digits_to_int(word: str) -> int:
    """Convert a word made of digits to an integer."""
    return _fold_digits(word)