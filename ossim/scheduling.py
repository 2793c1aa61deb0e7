"""CPU scheduling: preemptive shortest-remaining-time-first and round robin."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

_RULE = "-" * 56


@dataclass
class ScheduledProcess:
    """A process with its arrival and burst times and, once run, its completion time."""

    pid: int
    arrival: int
    burst: int
    completion: int = 0

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


def _prepare(jobs: Iterable[tuple[int, int]], *, allow_zero_burst: bool) -> list[ScheduledProcess]:
    processes = []
    for pid, (arrival, burst) in enumerate(jobs, start=1):
        if burst < 0 or (burst == 0 and not allow_zero_burst):
            raise ValueError(f"process P{pid} has an invalid burst time: {burst}")
        processes.append(ScheduledProcess(pid=pid, arrival=arrival, burst=burst))
    return processes


def srtf(jobs: Iterable[tuple[int, int]]) -> list[ScheduledProcess]:
    """Run preemptive SJF (shortest remaining time first) on (arrival, burst) pairs.

    Time advances one unit at a time; on a tie the earlier process wins.
    Results come back in input order.
    """
    processes = _prepare(jobs, allow_zero_burst=False)
    remaining = [p.burst for p in processes]
    pending = set(range(len(processes)))
    time = 0
    while pending:
        ready = [i for i in sorted(pending) if processes[i].arrival <= time]
        if not ready:
            time = min(processes[i].arrival for i in pending)
            continue
        current = min(ready, key=lambda i: remaining[i])
        remaining[current] -= 1
        time += 1
        if remaining[current] == 0:
            processes[current].completion = time
            pending.discard(current)
    return processes


def round_robin(jobs: Iterable[tuple[int, int]], quantum: int) -> list[ScheduledProcess]:
    """Run round-robin scheduling with the given time quantum on (arrival, burst) pairs.

    Results come back in input order.
    """
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    processes = _prepare(jobs, allow_zero_burst=True)
    if not processes:
        return []

    remaining = [p.burst for p in processes]
    first = min(range(len(processes)), key=lambda i: processes[i].arrival)
    time = processes[first].arrival
    queue = deque([first])
    queued = {first}
    done: set[int] = set()

    while len(done) < len(processes):
        if not queue:
            waiting = [i for i in range(len(processes)) if i not in done and i not in queued]
            if waiting:
                upcoming = min(waiting, key=lambda i: processes[i].arrival)
                time = processes[upcoming].arrival
                queue.append(upcoming)
                queued.add(upcoming)
            continue

        current = queue.popleft()
        if remaining[current] > quantum:
            time += quantum
            remaining[current] -= quantum
        else:
            time += remaining[current]
            remaining[current] = 0
            processes[current].completion = time
            done.add(current)

        for index, process in enumerate(processes):
            if process.arrival <= time and index not in queued and index not in done:
                queue.append(index)
                queued.add(index)

        if remaining[current] > 0:
            queue.append(current)

    return processes


def average_waiting(results: Sequence[ScheduledProcess]) -> float:
    """Mean waiting time of the scheduled processes."""
    if not results:
        raise ValueError("no processes to average")
    return sum(p.waiting for p in results) / len(results)


def average_turnaround(results: Sequence[ScheduledProcess]) -> float:
    """Mean turnaround time of the scheduled processes."""
    if not results:
        raise ValueError("no processes to average")
    return sum(p.turnaround for p in results) / len(results)


def format_table(results: Iterable[ScheduledProcess]) -> str:
    """Tab-separated table of PID, AT, BT, CT, TAT and WT."""
    lines = ["PID\tAT\tBT\tCT\tTAT\tWT"]
    lines.extend(
        f"{p.pid}\t{p.arrival}\t{p.burst}\t{p.completion}\t{p.turnaround}\t{p.waiting}"
        for p in results
    )
    return "\n".join(lines)


def _job(text: str) -> tuple[int, int]:
    for separator in (":", ","):
        if separator in text:
            arrival, _, burst = text.partition(separator)
            break
    else:
        raise argparse.ArgumentTypeError(f"expected ARRIVAL:BURST, got {text!r}")
    try:
        return int(arrival), int(burst)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integers in {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate CPU scheduling algorithms.")
    parser.add_argument("algorithm", choices=("srtf", "rr"))
    parser.add_argument("jobs", nargs="+", type=_job, metavar="ARRIVAL:BURST")
    parser.add_argument("-q", "--quantum", type=int, help="time quantum for round robin")
    args = parser.parse_args(argv)

    if args.algorithm == "rr" and args.quantum is None:
        parser.error("round robin needs --quantum")

    try:
        if args.algorithm == "srtf":
            results = srtf(args.jobs)
        else:
            results = round_robin(args.jobs, args.quantum)
    except ValueError as error:
        parser.error(str(error))

    if args.algorithm == "srtf":
        print("\n--- Preemptive Shortest Job First (SRTF) Scheduling ---")
        print()
        print(format_table(results))
        print(f"\nAverage Waiting Time: {average_waiting(results):.2f}")
        print(f"Average Turnaround Time: {average_turnaround(results):.2f}")
    else:
        print()
        print(_RULE)
        print(format_table(results))
        print(_RULE)
        print(f"Average Turnaround Time: {average_turnaround(results):.2f}")
        print(f"Average Waiting Time: {average_waiting(results):.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())