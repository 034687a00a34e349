"""Disk scheduling: FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class Direction(Enum):
    """The way the head sweeps first."""

    LEFT = 0
    RIGHT = 1


@dataclass(frozen=True)
class Schedule:
    """The tracks visited in order and the total head movement."""

    algorithm: str
    start: int
    order: tuple[int, ...]
    movement: int

    @property
    def path(self) -> tuple[int, ...]:
        """The starting head position followed by every track visited."""
        return (self.start, *self.order)


def _travel(position: int, stops: Iterable[int]) -> tuple[list[int], int, int]:
    """Visit ``stops`` from ``position``; return the stops, movement and end position."""
    visited: list[int] = []
    movement = 0
    for stop in stops:
        movement += abs(stop - position)
        position = stop
        visited.append(stop)
    return visited, movement, position


def _schedule(algorithm: str, head: int, stops: Iterable[int]) -> Schedule:
    visited, movement, _ = _travel(head, stops)
    return Schedule(algorithm, head, tuple(visited), movement)


def _track(requests: Sequence[int], head: int, *bounds: int) -> tuple[list[int], int]:
    track = sorted([*requests, head, *bounds])
    return track, track.index(head)


def fcfs(requests: Sequence[int], head: int) -> Schedule:
    """Serve requests in the order they arrived."""
    return _schedule("FCFS", head, requests)


def sstf(requests: Sequence[int], head: int) -> Schedule:
    """Always serve the pending request nearest the head; ties go to the earliest."""
    pending = list(requests)
    order: list[int] = []
    movement = 0
    position = head
    while pending:
        nearest = min(range(len(pending)), key=lambda k: abs(pending[k] - position))
        track = pending.pop(nearest)
        movement += abs(track - position)
        position = track
        order.append(track)
    return Schedule("SSTF", head, tuple(order), movement)


def scan(
    requests: Sequence[int], head: int, max_track: int, direction: Direction | int
) -> Schedule:
    """Sweep to the disk edge in ``direction``, then sweep back."""
    direction = Direction(direction)
    track, pos = _track(requests, head, 0, max_track)
    if direction is Direction.LEFT:
        stops = [*reversed(track[:pos]), *track[pos + 1 : -1]]
    else:
        stops = [*track[pos + 1 :], *reversed(track[1:pos])]
    return _schedule("SCAN", head, stops)


def cscan(
    requests: Sequence[int], head: int, max_track: int, direction: Direction | int
) -> Schedule:
    """Sweep to the disk edge, jump to the opposite edge and keep going the same way.

    The jump between the edges counts as ``max_track`` tracks of movement.
    """
    direction = Direction(direction)
    track, pos = _track(requests, head, 0, max_track)
    if direction is Direction.RIGHT:
        first, after_jump, edge = track[pos + 1 :], track[1:pos], 0
    else:
        first, after_jump, edge = list(reversed(track[:pos])), list(
            reversed(track[pos + 1 : -1])
        ), max_track
    visited, movement, _ = _travel(head, first)
    rest, more, _ = _travel(edge, after_jump)
    order = (*visited, edge, *rest)
    return Schedule("C-SCAN", head, order, movement + abs(max_track) + more)


def look(requests: Sequence[int], head: int, direction: Direction | int) -> Schedule:
    """Sweep to the last request in ``direction``, then reverse."""
    direction = Direction(direction)
    track, pos = _track(requests, head)
    lower, upper = list(reversed(track[:pos])), track[pos + 1 :]
    stops = lower + upper if direction is Direction.LEFT else upper + lower
    return _schedule("LOOK", head, stops)


def clook(requests: Sequence[int], head: int, direction: Direction | int) -> Schedule:
    """Sweep to the last request in ``direction``, jump to the farthest one and continue."""
    direction = Direction(direction)
    track, pos = _track(requests, head)
    if direction is Direction.RIGHT:
        stops = [*track[pos + 1 :], *track[:pos]]
    else:
        stops = [*reversed(track[:pos]), *reversed(track[pos + 1 :])]
    return _schedule("C-LOOK", head, stops)


def format_schedule(schedule: Schedule) -> str:
    """A title, the head movement sequence and the total movement."""
    sequence = " -> ".join(str(track) for track in schedule.path)
    return (
        f"{schedule.algorithm}\n"
        f"Head Movement Sequence: {sequence}\n"
        f"Total Movements: {schedule.movement}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="disk", description="Simulate a disk scheduling algorithm."
    )
    parser.add_argument(
        "algorithm", choices=["fcfs", "sstf", "scan", "cscan", "look", "clook"]
    )
    parser.add_argument("requests", nargs="+", type=int, help="requested track numbers")
    parser.add_argument("--head", type=int, required=True, help="starting head position")
    parser.add_argument("--max", dest="max_track", type=int, help="highest track on the disk")
    parser.add_argument(
        "--direction",
        choices=["left", "right"],
        default="left",
        help="the way the head moves first",
    )
    args = parser.parse_args(argv)

    direction = Direction[args.direction.upper()]
    if args.algorithm in ("scan", "cscan") and args.max_track is None:
        print(f"error: {args.algorithm} needs --max", file=sys.stderr)
        return 2

    if args.algorithm == "fcfs":
        result = fcfs(args.requests, args.head)
    elif args.algorithm == "sstf":
        result = sstf(args.requests, args.head)
    elif args.algorithm == "scan":
        result = scan(args.requests, args.head, args.max_track, direction)
    elif args.algorithm == "cscan":
        result = cscan(args.requests, args.head, args.max_track, direction)
    elif args.algorithm == "look":
        result = look(args.requests, args.head, direction)
    else:
        result = clook(args.requests, args.head, direction)
    print(format_schedule(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())