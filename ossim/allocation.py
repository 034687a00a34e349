"""Contiguous file allocation on a simulated disk with a bit vector."""

from __future__ import annotations

import argparse
import random as _random
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence


class AllocationError(Exception):
    """Raised when the requested blocks are busy or out of range."""


@dataclass(frozen=True)
class FileEntry:
    name: str
    start: int
    length: int


class ContiguousDisk:
    """A disk whose blocks are handed out in contiguous runs."""

    def __init__(self, bits: Iterable[int | bool]) -> None:
        self._bits = [1 if bit else 0 for bit in bits]
        self._files: list[FileEntry] = []

    @classmethod
    def random(cls, size: int, rng: _random.Random | None = None) -> ContiguousDisk:
        """A disk of ``size`` blocks, each marked allocated at random."""
        if size < 0:
            raise ValueError("disk size cannot be negative")
        rng = rng or _random.Random()
        return cls(rng.randrange(2) for _ in range(size))

    def __len__(self) -> int:
        return len(self._bits)

    def create(self, name: str, start: int, length: int) -> FileEntry:
        """Allocate ``length`` blocks from ``start`` to a new file."""
        end = start + length
        if (
            start < 0
            or length < 0
            or (length and end > len(self._bits))
            or any(self._bits[start:end])
        ):
            raise AllocationError(f"blocks {start}..{end - 1} are busy or out of range")
        self._bits[start:end] = [1] * length
        entry = FileEntry(name, start, length)
        self._files.append(entry)
        return entry

    def bit_vector(self) -> tuple[int, ...]:
        return tuple(self._bits)

    def directory(self) -> tuple[FileEntry, ...]:
        return tuple(self._files)


def _ask_create(disk: ContiguousDisk) -> None:
    parts = input("Enter Name, Start, Length: ").split()
    if len(parts) != 3:
        print("Error: expected a name, a start block and a length.")
        return
    name, start_text, length_text = parts
    try:
        start, length = int(start_text), int(length_text)
    except ValueError:
        print("Error: start and length must be integers.")
        return
    try:
        disk.create(name, start, length)
    except AllocationError:
        print("Error: Blocks busy or out of range.")
    else:
        print("Allocated.")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="allocation", description="Interactive contiguous file allocation."
    )
    parser.add_argument("--blocks", type=int, help="number of blocks on the disk")
    parser.add_argument("--seed", type=int, help="seed for the random initial allocation")
    args = parser.parse_args(argv)

    try:
        blocks = args.blocks
        if blocks is None:
            blocks = int(input("Enter number of blocks: "))
        disk = ContiguousDisk.random(blocks, _random.Random(args.seed))
    except (EOFError, ValueError) as exc:
        print(f"error: {exc or 'no block count given'}", file=sys.stderr)
        return 1

    while True:
        try:
            choice = input("\n1.Bit Vector 2.Create 3.Directory 4.Exit: ").strip()
            if choice == "1":
                print(" ".join(str(bit) for bit in disk.bit_vector()))
            elif choice == "2":
                _ask_create(disk)
            elif choice == "3":
                print("\nFile\tStart\tLength")
                for entry in disk.directory():
                    print(f"{entry.name}\t{entry.start}\t{entry.length}")
            elif choice == "4":
                return 0
            else:
                print("Invalid choice.")
        except EOFError:
            return 0


if __name__ == "__main__":
    sys.exit(main())