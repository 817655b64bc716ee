"""Lengths in feet and inches, with an interactive calculator."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

INCHES_PER_FOOT = 12


@dataclass(frozen=True)
class Length:
    """A length expressed as whole feet and inches."""

    feet: int
    inches: int

    def total_inches(self) -> int:
        """Return the whole length in inches."""
        return self.feet * INCHES_PER_FOOT + self.inches

    def __add__(self, other: object) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return length_from_inches(self.total_inches() + other.total_inches())

    def __sub__(self, other: object) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return length_from_inches(self.total_inches() - other.total_inches())

    def __str__(self) -> str:
        return f"{self.feet}fts {self.inches}inchs"


def length_from_inches(inches: int) -> Length:
    """Split a count of inches into feet and inches, truncating toward zero."""
    sign = -1 if inches < 0 else 1
    feet, rest = divmod(abs(inches), INCHES_PER_FOOT)
    return Length(sign * feet, sign * rest)


def _read_length(label: str) -> Length:
    print(f"\nENTER LENGTH IN (FEETS AND INCHES FORMAT) FOR {label}")
    feet = int(input(" FEETS : "))
    inches = int(input(" INCHES : "))
    return Length(feet, inches)


def main(argv: list[str] | None = None) -> int:
    """Ask for two lengths and an operation, then print the result."""
    argparse.ArgumentParser(description="Add or subtract two lengths in feet and inches.").parse_args(argv)
    try:
        first = _read_length("FIRST")
        second = _read_length("SECOND")
        print("\nSELECT CHOICE")
        print("\n 1. For ADDITION")
        print("\n 2. For SUBTRACTION")
        choice = int(input("\nENTER CHOICE HERE :"))
    except (ValueError, EOFError):
        print("\nInvalid input.")
        return 1

    if choice == 1:
        print("\nRESULT OF ADDITION :")
        print(f"({first}) + ({second}) = {first + second}")
    elif choice == 2:
        print("\nRESULT OF SUBSTRACTION :")
        print(f"({first}) \u2013 ({second}) = {first - second}")
    else:
        print("\nYou have Entered Wrong Choice !!!")
        return 1
    return 0