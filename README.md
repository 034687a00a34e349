# ossim

Small, dependency-free simulations of the algorithms met in an operating
systems course:

- **Banker's algorithm**: need matrix, safety check and safe sequence
  (`ossim.bankers`).
- **Contiguous file allocation** on a disk with a bit vector of used
  blocks and a directory of files (`ossim.allocation`).
- **Disk scheduling**: FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK, with the
  order in which requests are served and the total head movement
  (`ossim.disk`).
- **Scatter and reduce**: split a list of random numbers into equal chunks
  for a number of workers, reduce each chunk and combine the results
  (sum with average, even sum, odd sum, minimum, maximum) (`ossim.cluster`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `ossim-bankers`

Reads whitespace-separated integers from a file, or from standard input
when no file is given: `n m`, then the `n x m` allocation matrix, the
`n x m` max matrix and the `m` available instances.

```
ossim-bankers snapshot.txt              # table of Allocation, Max, Need; then the verdict
ossim-bankers --scan sweep snapshot.txt # need matrix; then the verdict
ossim-bankers --no-check snapshot.txt   # only the table
```

`--scan` chooses how the next runnable process is looked for:
`restart` (the default) searches again from the first process after each
grant; `sweep` keeps going forward and starts a new pass only at the end.
Invalid input prints an error and exits with status 1.

### `ossim-alloc`

An interactive menu over a disk whose blocks start out randomly allocated:

```
ossim-alloc --blocks 20 --seed 1
```

Without `--blocks` the number of blocks is asked for. The menu offers
`1.Bit Vector 2.Create 3.Directory 4.Exit`; creating a file asks for a
name, a start block and a length, and fails if any of those blocks is
busy or past the end of the disk.

### `ossim-disk`

```
ossim-disk fcfs 55 58 39 18 90 160 150 38 184 --head 50
ossim-disk sstf 186 89 44 70 102 22 51 124 --head 70
ossim-disk scan 86 147 91 170 95 130 102 70 --head 125 --max 199 --direction left
ossim-disk cscan 33 99 142 52 197 79 46 65 --head 72 --max 199 --direction left
ossim-disk look 176 79 34 60 92 11 41 114 --head 65 --direction left
ossim-disk clook 176 79 34 60 92 11 41 114 --head 65 --direction right
```

`--head` is required; `--max` is required for `scan` and `cscan`;
`--direction` is `left` (default) or `right`. The output is the algorithm
name, the head movement sequence and the total movement.

### `ossim-cluster`

```
ossim-cluster sum --count 1000 --workers 4 --seed 7
ossim-cluster max --workers 8
```

The reduction is one of `sum`, `even-sum`, `odd-sum`, `max`, `min`.
`--count` (default 1000) numbers are drawn below `--upper` (default 100
for the sums, 10000 for `max` and `min`); `--workers` defaults to 4.
`sum` also prints the average over all `--count` numbers.

## Library use

### Banker's algorithm

```python
from ossim.bankers import parse_state, format_table, format_need, format_verdict, SafetyScan

state = parse_state(text)        # n and m, allocation, max, available
print(format_table(state))       # allocation, max and need per process, then available
print(format_need(state))        # the need matrix alone
print(state.is_safe())
print(format_verdict(state, SafetyScan.SWEEP))
```

`ResourceState(allocation, maximum, available)` can also be built
directly; it raises `ValueError` if the shapes do not agree.
`ResourceState.need()` gives the need matrix (max minus allocation), and
`ResourceState.safe_sequence(scan)` a tuple of process indices in the
order they can finish, or `None` when the state is unsafe.

### Contiguous allocation

```python
import random
from ossim.allocation import ContiguousDisk, AllocationError

disk = ContiguousDisk.random(20, random.Random(1))
try:
    disk.create("notes", 3, 4)
except AllocationError as exc:
    print(exc)                   # blocks busy or out of range
print(disk.bit_vector())         # tuple of 0/1 per block
for entry in disk.directory():   # FileEntry(name, start, length)
    print(entry)
```

`ContiguousDisk(bits)` starts from a given bit vector instead.

### Disk scheduling

```python
from ossim.disk import fcfs, sstf, scan, cscan, look, clook, Direction, format_schedule

print(format_schedule(fcfs([55, 58, 39, 18, 90, 160, 150, 38, 184], 50)))
print(format_schedule(sstf([186, 89, 44, 70, 102, 22, 51, 124], 70)))
print(format_schedule(scan([86, 147, 91, 170, 95, 130, 102, 70], 125, 199, Direction.LEFT)))
print(format_schedule(look([176, 79, 34, 60, 92, 11, 41, 114], 65, Direction.LEFT)))
```

Every function returns a `Schedule` with `algorithm`, `start`, `order`
(the tracks served) and `movement` (total head movement); `path` is the
start followed by the order. The direction may be a `Direction` or `0`
(left) / `1` (right). SSTF breaks ties in favour of the earlier request.
SCAN and C-SCAN add tracks 0 and `max_track` as stops; C-SCAN counts the
jump between the two edges as `max_track` tracks of movement.

### Scatter and reduce

```python
import random
from ossim.cluster import random_numbers, scatter, reduce_chunks, average, Reduction

data = random_numbers(1000, 100, random.Random(7))
chunks = scatter(data, 4)        # 4 equal chunks; any remainder is left out
total = reduce_chunks(data, 4, Reduction.SUM)
print(total, average(total, len(data)))
```

## What it does not do

`ossim.cluster` does not run anything in parallel or across machines:
the workers are simulated by splitting the data into chunks within a
single process. The allocation menu keeps its disk in memory only; it
is not saved between runs.