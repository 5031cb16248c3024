"""Prompting helpers for console programs."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO


def _streams(stdin: TextIO | None, stdout: TextIO | None) -> tuple[TextIO, TextIO]:
    return (sys.stdin if stdin is None else stdin, sys.stdout if stdout is None else stdout)


def _read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("End of input while waiting for a response.")
    return line.rstrip("\r\n")


def get_integer(prompt="", stdin=None, stdout=None) -> int:
    """Prompt until the user enters a whole number, then return it."""
    stdin, stdout = _streams(stdin, stdout)
    while True:
        line = _read_line(prompt, stdin, stdout).strip()
        try:
            return int(line)
        except ValueError:
            stdout.write("Illegal integer format. Try again.\n")


def get_yes_or_no(prompt="", stdin=None, stdout=None) -> bool:
    """Prompt until the user answers with a word starting with Y or N."""
    stdin, stdout = _streams(stdin, stdout)
    while True:
        answer = _read_line(prompt, stdin, stdout).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        stdout.write("Please type a word that starts with 'Y' or 'N'.\n")


def make_selection_from(title: str, options: Sequence[str], stdin=None, stdout=None) -> int:
    """List the numbered options and return the index the user picks."""
    stdin, stdout = _streams(stdin, stdout)
    options = list(options)
    if not options:
        raise ValueError("Internal error: Requesting the user to pick an item from an empty list.")

    stdout.write(f"{title}\n")
    for index, option in enumerate(options):
        stdout.write(f"{index} {option}\n")

    while True:
        result = get_integer("Your choice: ", stdin, stdout)
        if 0 <= result < len(options):
            return result
        stdout.write(f"Please enter a number between 0 and {len(options) - 1}\n")


def make_file_selection(suffix: str, directory="res/", stdin=None, stdout=None) -> str:
    """Ask the user to pick a file ending in suffix from directory; return its path."""
    listing = sorted(os.listdir(directory or "."))
    options = [name for name in listing if name.endswith(suffix)]

    effective = directory or "."
    if not effective.endswith("/"):
        effective += "/"

    choice = make_selection_from("Please choose a demo file from this list:", options, stdin, stdout)
    return effective + options[choice]