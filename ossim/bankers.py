"""Banker's algorithm: deadlock avoidance by searching for a safe sequence."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence, TextIO

Matrix = Sequence[Sequence[int]]


class UnsafeStateError(Exception):
    """Raised when no safe sequence exists."""

    def __init__(self, completed: list[int]):
        super().__init__("System is in an UNSAFE state. No safe sequence exists.")
        self.completed = completed


def need_matrix(allocation: Matrix, maximum: Matrix) -> list[list[int]]:
    """Remaining need of each process: maximum minus allocation."""
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum have different numbers of processes")
    need = []
    for process, (alloc_row, max_row) in enumerate(zip(allocation, maximum)):
        if len(alloc_row) != len(max_row):
            raise ValueError(f"process P{process} has mismatched resource counts")
        need.append([m - a for a, m in zip(alloc_row, max_row)])
    return need


def safe_sequence(available: Sequence[int], allocation: Matrix, maximum: Matrix) -> list[int]:
    """Return process indices in a safe order, or raise UnsafeStateError."""
    need = need_matrix(allocation, maximum)
    if any(len(row) != len(available) for row in need):
        raise ValueError("matrix rows must have one entry per resource")

    work = list(available)
    finished = [False] * len(need)
    sequence: list[int] = []
    while len(sequence) < len(need):
        progressed = False
        for process, row in enumerate(need):
            if finished[process]:
                continue
            if all(n <= w for n, w in zip(row, work)):
                work = [w + a for w, a in zip(work, allocation[process])]
                finished[process] = True
                sequence.append(process)
                progressed = True
        if not progressed:
            raise UnsafeStateError(sequence)
    return sequence


def _tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        yield from (int(token) for token in line.split())


def _read_matrix(tokens: Iterator[int], rows: int, cols: int, label: str) -> list[list[int]]:
    print(f"Enter the {label} matrix (P x R): ")
    matrix = []
    for process in range(rows):
        print(f"For Process P{process}: ", end="")
        matrix.append([next(tokens) for _ in range(cols)])
    return matrix


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check for a safe state with the banker's algorithm (input read from stdin)."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        print("Enter the number of processes: ", end="")
        processes = next(tokens)
        print("Enter the number of resources: ", end="")
        resources = next(tokens)
        print("Enter the available resources (e.g., R1 R2 R3): ", end="")
        available = [next(tokens) for _ in range(resources)]
        allocation = _read_matrix(tokens, processes, resources, "allocation")
        maximum = _read_matrix(tokens, processes, resources, "maximum")
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    try:
        sequence = safe_sequence(available, allocation, maximum)
    except UnsafeStateError as error:
        print(f"\n{error}")
        return 0
    order = " -> ".join(f"P{process}" for process in sequence)
    print(f"\nSystem is in a SAFE state. Safe sequence: {order}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())