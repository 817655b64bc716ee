"""Caesar cipher with an interactive encrypt/decrypt menu."""

from __future__ import annotations

import argparse
from string import ascii_lowercase, ascii_uppercase

_ALPHABET_SIZE = 26


def _shift(ch: str, key: int) -> str:
    for alphabet in (ascii_lowercase, ascii_uppercase):
        if ch in alphabet:
            return alphabet[(alphabet.index(ch) + key) % _ALPHABET_SIZE]
    return ch


def encrypt(message: str, key: int) -> str:
    """Shift every ASCII letter of ``message`` forward by ``key``, wrapping round."""
    return "".join(_shift(ch, key) for ch in message)


def decrypt(message: str, key: int) -> str:
    """Undo :func:`encrypt` with the same key."""
    return "".join(_shift(ch, -key) for ch in message)


def _run(action: str) -> int:
    cipher = encrypt if action == "encrypt" else decrypt
    message = input(f"Enter a message to {action}: ")
    try:
        key = int(input("Enter key: "))
    except ValueError:
        print("wrong Input")
        return 1
    label = "Encrypted" if action == "encrypt" else "Decrypted"
    print(f"{label} message: {cipher(message, key)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Offer a menu to encrypt or decrypt one message."""
    argparse.ArgumentParser(description="Encrypt or decrypt with a Caesar cipher.").parse_args(argv)
    print("Choose 1 to encryption of caesar cipher")
    print("Press 2 to decryption of caesar cipher")
    print("Press 3 to exit")
    print("Enter your choice:")
    try:
        choice = int(input())
    except ValueError:
        print("wrong Input")
        return 1
    except EOFError:
        return 1

    try:
        if choice == 1:
            return _run("encrypt")
        if choice == 2:
            return _run("decrypt")
    except EOFError:
        return 1
    if choice == 3:
        print("Thank you for using it:)")
        return 0
    print("wrong Input")
    return 1