"""Interactive menu for managing the password store."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from typing import TextIO

from passvault.passserver import PassServer

_MENU = (
    "\n\n"
    "l - Load From File\n"
    "a - Add User\n"
    "r - Remove User\n"
    "c - Change User Password\n"
    "f - Find User\n"
    "d - Dump HashTable\n"
    "s - HashTable Size\n"
    "w - Write to Password File\n"
    "x - Exit program\n"
    "\nEnter choice : "
)

_ASK_USER = "Enter username: "
_ASK_CURRENT = "Enter password: "
_ASK_NEW = "Enter new password: "

_WORD = 2**64


def menu(out: TextIO | None = None) -> None:
    """Write the menu of choices."""
    (sys.stdout if out is None else out).write(_MENU)


def _parse_capacity(text: str) -> int:
    match = re.match(r"\s*([+-]?)(\d+)", text)
    if match is None:
        return 0
    value = int(match.group(2))
    if match.group(1) == "-":
        value = -value % _WORD
    return min(value, _WORD - 1)


class _Shell:
    def __init__(self, lines: Iterator[str], out: TextIO) -> None:
        self.lines = lines
        self.out = out
        self.server: PassServer | None = None

    def ask(self, prompt: str) -> str:
        self.out.write(prompt)
        return next(self.lines, "")

    def say(self, text: str) -> None:
        self.out.write(text + "\n")

    def load(self, server: PassServer) -> None:
        name = self.ask("Enter password file name to load from: ")
        try:
            server.load(name)
        except OSError:
            self.say(f"Error: Cannot open file {name}.")

    def add(self, server: PassServer) -> None:
        username = self.ask(_ASK_USER)
        password = self.ask(_ASK_CURRENT)
        if server.add_user(username, password):
            self.say(f"User {username} added. ")
        else:
            self.say("*****Error: User already exists. Could not add user.")

    def remove(self, server: PassServer) -> None:
        username = self.ask(_ASK_USER)
        if server.remove_user(username):
            self.say(f"User {username} deleted.")
        else:
            self.say("*****Error: User not found.  Could not delete user.")

    def change(self, server: PassServer) -> None:
        username = self.ask(_ASK_USER)
        password = self.ask(_ASK_CURRENT)
        new_password = self.ask(_ASK_NEW)
        if server.change_password(username, password, new_password):
            self.say(f"Password changed for user {username}")
        else:
            self.say("*****Error: Could not change user password")

    def find(self, server: PassServer) -> None:
        username = self.ask(_ASK_USER)
        if server.find(username):
            self.say(f"User '{username}' found. ")
        else:
            self.say(f"User '{username}' not found. ")

    def dump(self, server: PassServer) -> None:
        server.dump()

    def size(self, server: PassServer) -> None:
        self.say(f"Size of hashtable: {len(server)}")

    def write(self, server: PassServer) -> None:
        name = self.ask("Enter password file name to write to: ")
        try:
            server.write_to_file(name)
        except OSError:
            self.say(f"*****Error: Cannot write to file {name}.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Manage a hashed password store.")
    parser.parse_args(argv)

    out = sys.stdout
    lines = (line.rstrip("\n") for line in sys.stdin)
    shell = _Shell(lines, out)

    out.write("Enter preferred hash table capacity:\n")
    server = PassServer(_parse_capacity(next(lines, "")), out)

    actions = {
        "l": shell.load,
        "a": shell.add,
        "r": shell.remove,
        "c": shell.change,
        "f": shell.find,
        "d": shell.dump,
        "s": shell.size,
        "w": shell.write,
    }

    menu(out)
    for choice in lines:
        if choice == "x":
            break
        action = actions.get(choice)
        if action is None:
            shell.say("****Error: Invalid entry. Try again.")
        else:
            action(server)
        menu(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())