"""A hangman game over a fixed list of obfuscated website names."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

CHANCE = 6

WORDS = (
    "N~mqOlJ^tZletXodeYgs",
    "gCnDIfFQe^CdP^^B{hZpeLA^hv",
    "7urtrtwQv{dt`>^}FaR]i]XUug^GI",
    "aSwfXsxOsWAlXScVQmjAWJG",
    "cruD=idduvUdr=gmcauCmg]",
    "BQt`zncypFVjvIaTl]u=_?Aa}F",
    "iLvkKdT`yu~mWj[^gcO|",
    "jSiLyzJ=vPmnv^`N]^>ViAC^z_",
    "xo|RqqhO|nNstjmzfiuoiFfhwtdh~",
    "OHkttvxdp|[nnW]Drgaomdq",
)

_RULES = (
    "\n\t Be aware you can be hanged!!.\n"
    "\n\t Rules : \n"
    "\t - Maximum 6 mistakes are allowed.\n"
    "\t - All alphabet are in lower case.\n"
    "\t - All words are name of very popular Websites. eg. Google\n"
    "\t - If you enjoy continue, otherwise close it.\n"
    "\t Syntax : Alphabet\n"
    "\t Example : a \n"
)

_BODY_PARTS = ((0, "("), (1, ")"), (2, "/"), (3, "|"), (4, "\\"), (5, "/"), (6, "\\"))
_PART_AT_MISTAKE = (0, 2, 3, 4, 5, 6, 7)


def decrypt_word(code: str) -> str:
    """Recover the word hidden in an obfuscated entry of :data:`WORDS`."""
    if len(code) < 3:
        raise ValueError("encoded word is too short")
    offset = (len(code) - 3) // 3 + 2
    return "".join(
        chr(ord(ch) + index - 1 - offset)
        for index, ch in enumerate(code)
        if index % 3 == 2
    )


def render_body(mistakes: int) -> str:
    """Return the gallows drawing for the given number of mistakes."""
    body = [" "] * (CHANCE + 1)
    shown = _PART_AT_MISTAKE[min(max(mistakes, 0), CHANCE)]
    for slot, part in _BODY_PARTS[:shown]:
        body[slot] = part
    return (
        f"\tMistakes :{mistakes}\n"
        "\t _________\n"
        "\t|         |\n"
        f"\t|        {body[0]} {body[1]}\n"
        f"\t|        {body[2]}{body[3]}{body[4]}\n"
        f"\t|        {body[5]} {body[6]}\n"
        "\t|             \n"
        "\t|             "
    )


@dataclass
class HangmanGame:
    """State of one round: the hidden word, letters found and wrong guesses."""

    word: str
    max_mistakes: int = CHANCE
    wrong_letters: list[str] = field(default_factory=list)
    _found: set[str] = field(default_factory=set, init=False, repr=False)

    @property
    def mistakes(self) -> int:
        return len(self.wrong_letters)

    @property
    def progress(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return "".join(ch if ch in self._found else "_" for ch in self.word)

    @property
    def won(self) -> bool:
        return "_" not in self.progress

    @property
    def lost(self) -> bool:
        return not self.won and self.mistakes >= self.max_mistakes

    @property
    def finished(self) -> bool:
        return self.won or self.lost

    def guess(self, letter: str) -> bool:
        """Try one letter; return True if it occurs in the word."""
        if len(letter) != 1:
            raise ValueError("guess exactly one character")
        if self.finished:
            raise RuntimeError("the game is already over")
        if letter in self.word:
            self._found.add(letter)
            return True
        self.wrong_letters.append(letter)
        return False


def _format_word(progress: str) -> str:
    return "\t" + "".join(f"{ch} " for ch in progress) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Play one round of hangman on the terminal."""
    parser = argparse.ArgumentParser(description="Play hangman.")
    parser.add_argument("--index", type=int, choices=range(len(WORDS)), help="pick a fixed word")
    args = parser.parse_args(argv)
    index = args.index if args.index is not None else random.randrange(len(WORDS))
    game = HangmanGame(decrypt_word(WORDS[index]))

    print(_RULES)
    while not game.finished:
        print()
        print(render_body(game.mistakes))
        print()
        print("\tFalse Letters : " + ("".join(game.wrong_letters) or "None"))
        print()
        print(_format_word(game.progress))
        try:
            line = input("\tGive me a alphabet in lower case : ")
        except EOFError:
            return 1
        if line:
            game.guess(line[0])

    print()
    if game.won:
        print(_format_word(game.progress))
        print(f"\tCongrats! You have won : {game.word}\n")
    else:
        print(render_body(game.mistakes))
        print(f"\n\tBetter try next time. Word was {game.word}\n")
    return 0