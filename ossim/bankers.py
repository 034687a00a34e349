"""Banker's algorithm: need matrix, safety check and printable reports."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

Matrix = tuple[tuple[int, ...], ...]


class SafetyScan(Enum):
    """How the safety algorithm looks for the next process it can run."""

    RESTART = "restart"  # after every grant, search again from the first process
    SWEEP = "sweep"  # keep sweeping forward; begin a new pass only at the end


def _as_matrix(rows: Sequence[Sequence[int]]) -> Matrix:
    return tuple(tuple(int(value) for value in row) for row in rows)


def _cells(row: Sequence[int]) -> str:
    return "".join(f"{value}\t" for value in row)


@dataclass(frozen=True)
class ResourceState:
    """A snapshot of allocated, maximum and available resource instances."""

    allocation: Matrix
    maximum: Matrix
    available: tuple[int, ...]

    def __post_init__(self) -> None:
        allocation = _as_matrix(self.allocation)
        maximum = _as_matrix(self.maximum)
        available = tuple(int(value) for value in self.available)
        if len(allocation) != len(maximum):
            raise ValueError("allocation and maximum must have the same number of processes")
        width = len(available)
        for label, matrix in (("allocation", allocation), ("maximum", maximum)):
            if any(len(row) != width for row in matrix):
                raise ValueError(f"every {label} row must have {width} resources")
        object.__setattr__(self, "allocation", allocation)
        object.__setattr__(self, "maximum", maximum)
        object.__setattr__(self, "available", available)

    @property
    def processes(self) -> int:
        return len(self.allocation)

    @property
    def resources(self) -> int:
        return len(self.available)

    def need(self) -> Matrix:
        """Remaining demand of every process: maximum minus allocation."""
        return tuple(
            tuple(most - held for most, held in zip(max_row, alloc_row))
            for max_row, alloc_row in zip(self.maximum, self.allocation)
        )

    def safe_sequence(self, scan: SafetyScan = SafetyScan.RESTART) -> tuple[int, ...] | None:
        """Return a safe order of process indices, or None if the state is unsafe."""
        need = self.need()
        work = list(self.available)
        pending = list(range(self.processes))
        order: list[int] = []

        def runnable(process: int) -> bool:
            return all(wanted <= free for wanted, free in zip(need[process], work))

        def grant(process: int) -> None:
            work[:] = [free + held for free, held in zip(work, self.allocation[process])]
            order.append(process)
            pending.remove(process)

        if scan is SafetyScan.RESTART:
            while (process := next((p for p in pending if runnable(p)), None)) is not None:
                grant(process)
        else:
            progressed = True
            while pending and progressed:
                progressed = False
                for process in list(pending):
                    if runnable(process):
                        grant(process)
                        progressed = True

        return None if pending else tuple(order)

    def is_safe(self) -> bool:
        return self.safe_sequence() is not None


def parse_state(text: str) -> ResourceState:
    """Read "n m", the allocation and maximum matrices, then the available vector."""
    tokens = text.split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"expected integers only: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("expected the number of processes and resources")
    processes, resources = numbers[0], numbers[1]
    if processes <= 0 or resources <= 0:
        raise ValueError("the numbers of processes and resources must be positive")
    cells = processes * resources
    expected = 2 + 2 * cells + resources
    if len(numbers) < expected:
        raise ValueError(f"expected {expected} integers, got {len(numbers)}")
    body = iter(numbers[2:expected])

    def take_matrix() -> list[list[int]]:
        return [[next(body) for _ in range(resources)] for _ in range(processes)]

    allocation = take_matrix()
    maximum = take_matrix()
    available = [next(body) for _ in range(resources)]
    return ResourceState(allocation, maximum, tuple(available))


def format_table(state: ResourceState) -> str:
    """Allocation, Max and Need side by side, followed by Available."""
    lines = ["Process\t\tAllocation\t\t\tMax\t\t\t\tNeed"]
    for index, (held, most, wanted) in enumerate(
        zip(state.allocation, state.maximum, state.need())
    ):
        lines.append(f"P{index}\t\t{_cells(held)}\t\t{_cells(most)}\t\t{_cells(wanted)}")
    lines.extend(["", "Available :", _cells(state.available)])
    return "\n".join(lines) + "\n"


def format_need(state: ResourceState) -> str:
    """The need matrix alone, one process per line."""
    rows = ("".join(f"{value} " for value in row) for row in state.need())
    return "Need Matrix:\n" + "".join(f"{row}\n" for row in rows)


def format_verdict(state: ResourceState, scan: SafetyScan = SafetyScan.RESTART) -> str:
    """Whether the state is safe and, if so, the safe sequence."""
    sequence = state.safe_sequence(scan)
    if scan is SafetyScan.RESTART:
        if sequence is None:
            return "System is in UNSAFE State!\nResources cant be Granted :("
        return (
            "System is in SAFE State, Resources can be Granted :)\nSAFE Sequence :\n"
            + "->".join(f"P{p}" for p in sequence)
        )
    if sequence is None:
        return "Resources cannot be Granted. System is NOT SAFE!"
    return "Resources can be Granted. System is SAFE.\nSafe Sequence: " + " ".join(
        f"P{p}" for p in sequence
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bankers",
        description="Check a resource-allocation snapshot with the banker's algorithm.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="file holding n m, allocation, max and available (default: standard input)",
    )
    parser.add_argument(
        "--scan",
        choices=[scan.value for scan in SafetyScan],
        default=SafetyScan.RESTART.value,
        help="how the next runnable process is searched for",
    )
    parser.add_argument(
        "--no-check", action="store_true", help="only show the matrices, skip the safety check"
    )
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    try:
        state = parse_state(text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    scan = SafetyScan(args.scan)
    if args.no_check:
        print(format_table(state), end="")
        return 0
    if scan is SafetyScan.RESTART:
        print(format_table(state))
    else:
        print(format_need(state))
    print(format_verdict(state, scan))
    return 0


if __name__ == "__main__":
    sys.exit(main())