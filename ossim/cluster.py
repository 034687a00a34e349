"""Scatter random numbers over workers, reduce each chunk and combine the results."""

from __future__ import annotations

import argparse
import random as _random
import sys
from enum import Enum
from typing import Callable, Sequence


class Reduction(Enum):
    """What each worker computes over its chunk and how the results combine."""

    SUM = "sum"
    EVEN_SUM = "even-sum"
    ODD_SUM = "odd-sum"
    MAX = "max"
    MIN = "min"


_LOCAL: dict[Reduction, Callable[[Sequence[int]], int]] = {
    Reduction.SUM: sum,
    Reduction.EVEN_SUM: lambda chunk: sum(value for value in chunk if value % 2 == 0),
    Reduction.ODD_SUM: lambda chunk: sum(value for value in chunk if value % 2 != 0),
    Reduction.MAX: max,
    Reduction.MIN: min,
}

_COMBINE: dict[Reduction, Callable[[Sequence[int]], int]] = {
    Reduction.SUM: sum,
    Reduction.EVEN_SUM: sum,
    Reduction.ODD_SUM: sum,
    Reduction.MAX: max,
    Reduction.MIN: min,
}

_DEFAULT_UPPER = {
    Reduction.SUM: 100,
    Reduction.EVEN_SUM: 100,
    Reduction.ODD_SUM: 100,
    Reduction.MAX: 10000,
    Reduction.MIN: 10000,
}


def random_numbers(
    count: int = 1000, upper: int = 100, rng: _random.Random | None = None
) -> tuple[int, ...]:
    """``count`` random integers in the range ``0 <= value < upper``."""
    if count < 0:
        raise ValueError("count cannot be negative")
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    rng = rng or _random.Random()
    return tuple(rng.randrange(upper) for _ in range(count))


def scatter(data: Sequence[int], workers: int) -> tuple[tuple[int, ...], ...]:
    """Split ``data`` into ``workers`` equal chunks; any remainder is left out."""
    if workers <= 0:
        raise ValueError("the number of workers must be positive")
    size = len(data) // workers
    return tuple(tuple(data[k * size : (k + 1) * size]) for k in range(workers))


def reduce_chunks(data: Sequence[int], workers: int, reduction: Reduction | str) -> int:
    """Reduce every worker's chunk locally, then combine the local results."""
    reduction = Reduction(reduction)
    chunks = scatter(data, workers)
    if reduction in (Reduction.MAX, Reduction.MIN) and not chunks[0]:
        raise ValueError("every worker needs at least one number")
    local = _LOCAL[reduction]
    return _COMBINE[reduction]([local(chunk) for chunk in chunks])


def average(total: int, count: int) -> float:
    """The mean of ``count`` numbers adding up to ``total``."""
    if count <= 0:
        raise ValueError("count must be positive")
    return total / count


def _report(reduction: Reduction, result: int, count: int) -> str:
    if reduction is Reduction.SUM:
        return f"Total Sum: {result}\nAverage: {average(result, count):.2f}"
    if reduction is Reduction.EVEN_SUM:
        return f"Total sum of even numbers: {result}"
    if reduction is Reduction.ODD_SUM:
        return f"Final Sum of Odd Numbers: {result}"
    if reduction is Reduction.MAX:
        return f"The maximum number is: {result}"
    return f"The minimum number is: {result}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cluster",
        description="Reduce randomly generated numbers split over several workers.",
    )
    parser.add_argument("reduction", choices=[r.value for r in Reduction])
    parser.add_argument("--count", type=int, default=1000, help="how many numbers to generate")
    parser.add_argument("--workers", type=int, default=4, help="number of workers")
    parser.add_argument("--upper", type=int, help="numbers are drawn below this bound")
    parser.add_argument("--seed", type=int, help="seed for the random numbers")
    args = parser.parse_args(argv)

    reduction = Reduction(args.reduction)
    upper = args.upper if args.upper is not None else _DEFAULT_UPPER[reduction]
    try:
        data = random_numbers(args.count, upper, _random.Random(args.seed))
        result = reduce_chunks(data, args.workers, reduction)
        print(_report(reduction, result, args.count))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())