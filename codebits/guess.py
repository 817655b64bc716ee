"""A number guessing game with higher/lower hints."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Iterator

LOWEST = 1
HIGHEST = 100


def play(secret: int, guesses: Iterable[int]) -> int:
    """Return how many guesses it took to hit ``secret``.

    Raises ValueError if the guesses run out first.
    """
    for turns, value in enumerate(guesses, start=1):
        if value == secret:
            return turns
    raise ValueError("the secret number was never guessed")


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt))
        except ValueError:
            continue


def _ask(secret: int) -> Iterator[int]:
    try:
        value = _read_int(f"guess the number between {LOWEST} to {HIGHEST} : ")
        while True:
            yield value
            if value > secret:
                print("choose smaller number !!")
            else:
                print("choose greater number !!")
            value = _read_int("")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Pick a secret number and let the user guess it."""
    parser = argparse.ArgumentParser(description="Guess a number between 1 and 100.")
    parser.add_argument("--seed", type=int, help="seed for the random number generator")
    args = parser.parse_args(argv)
    if args.seed is not None:
        random.seed(args.seed)
    secret = random.randint(LOWEST, HIGHEST)
    try:
        turns = play(secret, _ask(secret))
    except ValueError:
        return 1
    print(f"you won !! in {turns} turns...")
    return 0