"""The Diner Dash game: cook and serve orders before the queue overflows."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import replace
from typing import TextIO

from konsolgame.dinerqueue import IDX_UNDEF, Dish, DishList, OrderQueue
from konsolgame.words import digits_to_int, first_string, read_command, second_string

DURATION_RANGE = (1, 5)
PRICE_RANGE = (10, 50)
PRICE_UNIT = 1000
INITIAL_ORDERS = 3
MAX_WAITING = 7
SERVE_TARGET = 15

INDENT = "\n" + " " * 58
_ORDER_PAD = " " * 68
_COOK_PAD = " " * 75
_SERVE_PAD = " " * 74
_PROMPT = INDENT + "          ENTER COMMAND: "


def food_id(text: str) -> int:
    """Return the number of a food code such as ``M12``, or -1."""
    if len(text) > 1 and text[0] == "M":
        return digits_to_int(text[1:])
    return IDX_UNDEF


def random_number(rng: random.Random, low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``."""
    return rng.randrange(low, high)


class DinerDash:
    """State and rules of one Diner Dash game."""

    def __init__(self, rng: random.Random | None = None, output: TextIO | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._output = output if output is not None else sys.stdout
        self.orders = OrderQueue()
        self.cooking = DishList()
        self.serving = DishList()
        self.balance = 0
        self.served = 0
        self._last_id = -1
        for _ in range(INITIAL_ORDERS):
            self.new_order()

    def _write(self, text: str) -> None:
        self._output.write(text)

    def new_order(self) -> Dish:
        """Create a random order with the next id and queue it."""
        self._last_id += 1
        dish = Dish(
            food_id=self._last_id,
            duration=random_number(self._rng, *DURATION_RANGE),
            durability=random_number(self._rng, *DURATION_RANGE),
            price=random_number(self._rng, *PRICE_RANGE) * PRICE_UNIT,
        )
        self.orders.enqueue(dish)
        return dish

    def advance_round(self) -> None:
        """Add an order, age served dishes and move finished dishes out of the kitchen."""
        self.new_order()

        for dish in self.serving:
            dish.durability -= 1
        spoiled = [i for i, dish in enumerate(self.serving) if dish.durability == 0]
        for index in reversed(spoiled):
            self.serving.remove_at(index)

        for dish in self.cooking:
            dish.duration -= 1
        done = [i for i, dish in enumerate(self.cooking) if dish.duration == 0]
        finished = [self.cooking[i] for i in done]
        for index in reversed(done):
            self.cooking.remove_at(index)
        for dish in finished:
            self.serving.add(dish)
            self._write(
                f"{' ' * 76}Makanan M{dish.food_id} telah selesai dimasak\n\n"
            )

    def render(self) -> str:
        """Return the tables of orders, dishes cooking and dishes ready."""
        order_rule = f"{_ORDER_PAD}{'-' * 48}\n"
        lines = [
            f"{_ORDER_PAD}SALDO: {self.balance}\n\n{' ' * 85}Daftar Pesanan\n\n",
            order_rule,
            f"{_ORDER_PAD}| Makanan | Durasi memasak | Ketahanan | Harga |\n",
            order_rule,
        ]
        lines.extend(
            f"{_ORDER_PAD}|    M{d.food_id}   |        {d.duration}       |"
            f"     {d.durability}     | {d.price} |\n"
            for d in self.orders
        )
        lines.append(order_rule)
        lines.append("\n\n")

        cook_rule = f"{_COOK_PAD}{'-' * 33}\n"
        lines.append(f"{_COOK_PAD}Daftar Makanan yang sedang dimasak\n")
        lines.append(cook_rule)
        lines.append(f"{_COOK_PAD}| Makanan | Sisa durasi memasak |\n")
        lines.append(cook_rule)
        if self.cooking.is_empty():
            lines.append(f"{_COOK_PAD}|         |                     |\n")
        else:
            lines.extend(
                f"{_COOK_PAD}|   M{d.food_id}    |          {d.duration}          |\n"
                for d in self.cooking
            )
        lines.append(cook_rule)
        lines.append("\n\n")

        serve_rule = f"{_SERVE_PAD}{'-' * 36}\n"
        lines.append(f"{_COOK_PAD}Daftar Makanan yang dapat disajikan\n")
        lines.append(serve_rule)
        lines.append(f"{_SERVE_PAD}| Makanan | Sisa ketahanan makanan |\n")
        lines.append(serve_rule)
        if self.serving.is_empty():
            lines.append(f"{_SERVE_PAD}|         |                        |\n")
        else:
            lines.extend(
                f"{_SERVE_PAD}|    M{d.food_id}   |           {d.durability}            |\n"
                for d in self.serving
            )
        lines.append(serve_rule)
        return "".join(lines)

    def is_over(self) -> bool:
        """Return True when too many orders wait or enough have been served."""
        return len(self.orders) > MAX_WAITING or self.served >= SERVE_TARGET

    def _head_id(self) -> int | None:
        return None if self.orders.is_empty() else self.orders.head().food_id

    def handle_command(self, command: str) -> bool:
        """Carry out one typed command; return False when it is rejected."""
        action = first_string(command)
        food = second_string(command)
        idx = food_id(food)
        head_id = self._head_id()

        can_cook = action == "COOK" and self.orders.search_id(idx) != IDX_UNDEF
        can_serve = (
            action == "SERVE"
            and self.serving.search_id(idx) != IDX_UNDEF
            and idx == head_id
        )
        if not (can_cook or can_serve or action == "SKIP"):
            if action == "SERVE" and idx != head_id:
                self._write(
                    f"{INDENT}        {food} belum dapat disajikan karena M{head_id} belum selesai\n\n"
                )
            else:
                self._write(f"{INDENT}                Masukan tidak valid. Silahkan coba lagi.\n\n")
            return False

        if can_cook:
            order = list(self.orders)[self.orders.search_id(idx)]
            self.cooking.add(replace(order, duration=order.duration + 1))
            self._write(f"\n\n{INDENT}                    Berhasil memasak {food}\n\n")
        elif can_serve:
            dish = self.serving.remove_at(self.serving.search_id(idx))
            self._write(f"\n\n{INDENT}                    Berhasil mengantar {food}\n\n")
            self.served += 1
            self.balance += dish.price
            self.orders.dequeue()
        else:
            self._write(f"\n\n{INDENT}                        Skip berhasil\n")

        self.advance_round()
        self._write(f"{INDENT}          {'=' * 48}\n\n")
        return True

    def play(self, input_stream: TextIO) -> int:
        """Run the game reading commands from ``input_stream``; return the final balance."""
        self._write(f"{INDENT}                  Selamat Datang di Diner Dash!\n\n")
        try:
            while not self.is_over():
                self._write(self.render())
                self._write(_PROMPT)
                while not self.handle_command(read_command(input_stream)):
                    self._write(_PROMPT)
        except EOFError:
            pass
        self._write(
            f"{INDENT}                        GAME OVER!!!\n\n"
            f"{' ' * 60}Skor akhir: {self.balance}\n\n"
        )
        return self.balance


def main(argv: list[str] | None = None) -> int:
    """Play Diner Dash on the terminal."""
    parser = argparse.ArgumentParser(description="Play Diner Dash.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    game = DinerDash(random.Random(args.seed), sys.stdout)
    game.play(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())