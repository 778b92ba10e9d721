"""Singly linked list of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    data: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list that always holds at least one value."""

    def __init__(self, first: int) -> None:
        self._head = _Node(first)
        self._size = 1

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` in front of the current head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: int) -> None:
        """Append ``value`` after the last node."""
        node = self._head
        while node.next is not None:
            node = node.next
        node.next = _Node(value)
        self._size += 1

    def insert_after(self, value: int, position: int) -> None:
        """Insert ``value`` right after the node at index ``position``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is out of range")
        node = self._head
        for _ in range(position):
            assert node.next is not None
            node = node.next
        node.next = _Node(value, node.next)
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node: _Node | None = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Values each followed by ``->``; a lone head value is shown twice."""
        text = "".join(f"{value}->" for value in self)
        if self._head.next is None:
            text = f"{self._head.data}->" + text
        return text


_MENU = (
    "1.Insert at beginning\n"
    "2.Insert at end\n"
    "3.Insert at particular position\n"
    "4.Display\n"
    "69.End"
)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run the menu-driven list editor on standard input."""
    argparse.ArgumentParser(
        description="Edit a linked list of integers from a menu."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter first value:", end="")
        linked = LinkedList(int(next(tokens)))
        while True:
            print(_MENU)
            option = int(next(tokens))
            if option == 1:
                print("Enter value:", end="")
                linked.insert_at_beginning(int(next(tokens)))
            elif option == 2:
                print("Enter value:", end="")
                linked.insert_at_end(int(next(tokens)))
            elif option == 3:
                print("Enter value:", end="")
                value = int(next(tokens))
                print("Enter position:", end="")
                position = int(next(tokens))
                try:
                    linked.insert_after(value, position)
                except IndexError as error:
                    print(error, file=sys.stderr)
            elif option == 4:
                print(linked.render())
            elif option == 69:
                break
    except StopIteration:
        pass
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())