# ossim

Small, readable simulations of the algorithms met in an operating-systems
course. Each module can be used as a library or run as a command.

| Module | What it covers | Command |
| --- | --- | --- |
| `ossim.scheduling` | Preemptive SJF (SRTF) and round-robin CPU scheduling | `ossim-schedule` |
| `ossim.bankers` | Banker's algorithm: need matrix and safe sequence | `ossim-bankers` |
| `ossim.paging` | FIFO, LRU and optimal page replacement | `ossim-paging` |
| `ossim.disk` | SSTF, SCAN and C-LOOK disk scheduling | `ossim-disk` |
| `ossim.processes` | Zombie/orphan demo, sort-then-run-another-program demo | `ossim-processes` |
| `ossim.sync` | Producer–consumer and readers–writers with threads | `ossim-sync` |
| `ossim.ipc` | Text statistics over named pipes, shared memory | `ossim-ipc` |

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it as a library

### CPU scheduling

`srtf(jobs)` and `round_robin(jobs, quantum)` take `(arrival, burst)` pairs
and return `ScheduledProcess` records (in input order) with `pid`,
`arrival`, `burst`, `completion`, `turnaround` and `waiting`.

```python
from ossim.scheduling import srtf, round_robin, format_table, average_waiting, average_turnaround

jobs = [(0, 8), (1, 4), (2, 9), (3, 5)]
results = round_robin(jobs, quantum=2)
print(format_table(results))
print(average_waiting(results), average_turnaround(results))
```

A non-positive quantum or an invalid burst time raises `ValueError`.

### Banker's algorithm

```python
from ossim.bankers import need_matrix, safe_sequence, UnsafeStateError

available = [3, 3, 2]
allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]

print(need_matrix(allocation, maximum))
try:
    order = safe_sequence(available, allocation, maximum)
    print(" -> ".join(f"P{p}" for p in order))
except UnsafeStateError as error:
    print(error, "finished before stalling:", error.completed)
```

### Page replacement

Each algorithm returns a `PagingResult` with `steps` (the page referenced and
the frame contents after it), `faults` and `hits`. `format_frames` renders a
frame tuple, showing `-` for an empty frame.

```python
from ossim.paging import fifo, lru, optimal, format_frames

pages = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
for algorithm in (fifo, lru, optimal):
    result = algorithm(pages, 3)
    print(algorithm.__name__, result.faults)
```

### Disk scheduling

Each algorithm returns a `SeekResult` with the `sequence` of cylinders
visited and the `total` head movement. `scan` sweeps to cylinder 0 or to
`disk_end` (200 by default) before reversing; `c_look` jumps to the far end
of the requests.

```python
from ossim.disk import sstf, scan, c_look, Direction

requests = [98, 183, 37, 122, 14, 124, 65, 67]
print(sstf(requests, 53))
print(scan(requests, 53, Direction.LEFT))
print(c_look(requests, 53, Direction.RIGHT))
```

### Synchronisation

`BoundedBuffer(capacity)` offers blocking `put` and `get`;
`ReadersWriters` offers `read(reader_id)` and `write(writer_id)` on a shared
counter, letting readers share access while a writer has it alone.
`run_producer_consumer(count, capacity, delay)` and
`run_readers_writers(readers, writers, rounds, delay)` run the threaded
demonstrations and print what each thread does.

### Inter-process communication

`count_details(text)` returns a `TextStats` of characters, words and lines.
`fifo_exchange(sentence, fifo_dir, output_path)` forks a child that receives
the sentence over a named pipe, writes the counts to `output_path`, and sends
them back. `write_shared(name, data)` stores text in a named shared-memory
segment of 1024 bytes; `read_shared(name)` reads it and removes the segment.

## Using the commands

```
ossim-schedule srtf 0:8 1:4 2:9 3:5
ossim-schedule rr 0:8 1:4 2:9 3:5 --quantum 2
ossim-bankers                       # prompts for the matrices on stdin
ossim-paging                        # built-in reference string, 3 frames
ossim-paging 1 2 3 4 1 2 5 --frames 4
ossim-disk sstf 98 183 37 122 14 124 65 67 --head 53
ossim-disk scan 98 183 37 122 14 124 65 67 --head 53 --direction left --disk-end 199
ossim-disk c-look 98 183 37 122 14 124 65 67 --head 53
ossim-processes zombie 5 2 9 1 5 --delay 10
ossim-processes exec 4 1 3          # prompts for the values if none are given
ossim-processes reverse 1 3 4
ossim-sync producer-consumer --count 10 --capacity 5 --delay 1
ossim-sync readers-writers --readers 5 --writers 2 --rounds 3 --delay 1
ossim-ipc count --fifo-dir /tmp --output output.txt
ossim-ipc shm-write --name shmfile
ossim-ipc shm-read --name shmfile
```

Pass `--help` to any of them to see the options it accepts.

## Limitations

- The synchronisation demos run for a set number of items or rounds and then
  stop; they do not run forever.
- `ossim-processes exec` runs the reverse-display step as a new Python
  process (`python -m ossim.processes reverse ...`), not a separate compiled
  program.
- The process and IPC demonstrations use `fork`, named pipes and shared
  memory, so they need a POSIX system.