"""Disk scheduling: shortest seek time first, SCAN and C-LOOK."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Sequence

DISK_END = 200


class Direction(IntEnum):
    """Direction the head moves in first."""

    LEFT = 0
    RIGHT = 1


@dataclass
class SeekResult:
    """Cylinders visited in order and the total head movement."""

    sequence: list[int] = field(default_factory=list)
    total: int = 0

    @classmethod
    def from_path(cls, head: int, sequence: Iterable[int]) -> "SeekResult":
        sequence = list(sequence)
        stops = [head, *sequence]
        total = sum(abs(after - before) for before, after in zip(stops, stops[1:]))
        return cls(sequence=sequence, total=total)


def sstf(requests: Iterable[int], head: int) -> SeekResult:
    """Always serve the pending request nearest the head; ties go to the earlier request."""
    pending = list(requests)
    sequence = []
    current = head
    while pending:
        nearest = min(range(len(pending)), key=lambda i: abs(pending[i] - current))
        current = pending.pop(nearest)
        sequence.append(current)
    return SeekResult.from_path(head, sequence)


def scan(
    requests: Iterable[int],
    head: int,
    direction: Direction | int = Direction.RIGHT,
    disk_end: int = DISK_END,
) -> SeekResult:
    """Elevator algorithm: sweep to the end of the disk, then reverse."""
    direction = Direction(direction)
    ordered = sorted(requests)
    if disk_end < 0:
        raise ValueError("disk end must not be negative")
    if not 0 <= head <= disk_end:
        raise ValueError(f"head position {head} is outside the disk (0-{disk_end})")
    for request in ordered:
        if not 0 <= request <= disk_end:
            raise ValueError(f"request {request} is outside the disk (0-{disk_end})")

    if direction is Direction.LEFT:
        outward = [r for r in reversed(ordered) if r <= head]
        back = [r for r in ordered if r > head]
        sequence = [*outward, 0, *back]
    else:
        outward = [r for r in ordered if r >= head]
        back = [r for r in reversed(ordered) if r < head]
        sequence = [*outward, disk_end, *back]
    return SeekResult.from_path(head, sequence)


def c_look(requests: Iterable[int], head: int, direction: Direction | int = Direction.RIGHT) -> SeekResult:
    """Circular LOOK: sweep to the last request, then jump to the far end and sweep the same way."""
    direction = Direction(direction)
    ordered = sorted(requests)
    if direction is Direction.RIGHT:
        sequence = [r for r in ordered if r >= head] + [r for r in ordered if r < head]
    else:
        descending = ordered[::-1]
        sequence = [r for r in descending if r <= head] + [r for r in descending if r > head]
    return SeekResult.from_path(head, sequence)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate disk scheduling algorithms.")
    parser.add_argument("algorithm", choices=("sstf", "scan", "c-look"))
    parser.add_argument("requests", nargs="+", type=int, help="cylinder requests")
    parser.add_argument("--head", type=int, required=True, help="initial head position")
    parser.add_argument("-d", "--direction", choices=("left", "right"), default="right")
    parser.add_argument("--disk-end", type=int, default=DISK_END, help="last cylinder for SCAN")
    args = parser.parse_args(argv)
    direction = Direction[args.direction.upper()]

    try:
        if args.algorithm == "sstf":
            result = sstf(args.requests, args.head)
        elif args.algorithm == "scan":
            result = scan(args.requests, args.head, direction, args.disk_end)
        else:
            result = c_look(args.requests, args.head, direction)
    except ValueError as error:
        parser.error(str(error))

    print("\n\n Seek Sequence: " + "".join(f"{cylinder} " for cylinder in result.sequence))
    if args.algorithm == "sstf":
        print(f" Total Number of Seek Operations = {result.total}")
    else:
        print(f" Total number of seek operations = {result.total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())