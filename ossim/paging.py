"""Page replacement algorithms: FIFO, LRU and optimal."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

REFERENCE_STRING = (7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1)

Frames = tuple[Optional[int], ...]


@dataclass
class PagingResult:
    """Frame contents after each page reference, and the number of page faults."""

    steps: list[tuple[int, Frames]] = field(default_factory=list)
    faults: int = 0

    @property
    def hits(self) -> int:
        return len(self.steps) - self.faults


def _check_frames(frame_count: int) -> None:
    if frame_count < 1:
        raise ValueError("frame count must be at least 1")


def _first_empty(frames: list[Optional[int]]) -> Optional[int]:
    try:
        return frames.index(None)
    except ValueError:
        return None


def fifo(pages: Iterable[int], frame_count: int) -> PagingResult:
    """First-in first-out replacement."""
    _check_frames(frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    oldest = 0
    result = PagingResult()
    for page in pages:
        if page not in frames:
            result.faults += 1
            frames[oldest] = page
            oldest = (oldest + 1) % frame_count
        result.steps.append((page, tuple(frames)))
    return result


def lru(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Least-recently-used replacement."""
    _check_frames(frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    last_used = [-1] * frame_count
    result = PagingResult()
    for time, page in enumerate(pages):
        if page in frames:
            last_used[frames.index(page)] = time
        else:
            result.faults += 1
            slot = _first_empty(frames)
            if slot is None:
                slot = min(range(frame_count), key=lambda j: last_used[j])
            frames[slot] = page
            last_used[slot] = time
        result.steps.append((page, tuple(frames)))
    return result


def optimal(pages: Sequence[int], frame_count: int) -> PagingResult:
    """Optimal replacement: evict the page whose next use lies farthest ahead."""
    _check_frames(frame_count)
    pages = list(pages)
    frames: list[Optional[int]] = [None] * frame_count
    result = PagingResult()
    for position, page in enumerate(pages):
        if page not in frames:
            result.faults += 1
            slot = _first_empty(frames)
            if slot is None:
                future = pages[position + 1:]

                def next_use(j: int) -> float:
                    try:
                        return future.index(frames[j])
                    except ValueError:
                        return float("inf")

                # max() keeps the first of equal candidates
                slot = max(range(frame_count), key=next_use)
            frames[slot] = page
        result.steps.append((page, tuple(frames)))
    return result


def format_frames(frames: Iterable[Optional[int]]) -> str:
    """Render frame contents, with '-' for an empty frame."""
    return "".join(" - " if page is None else f" {page} " for page in frames)


_ALGORITHMS: tuple[tuple[str, str, Callable[[Sequence[int], int], PagingResult]], ...] = (
    ("FCFS", "FCFS", fifo),
    ("LRU", "LRU", lru),
    ("Optimal", "Optimal", optimal),
)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare page replacement algorithms.")
    parser.add_argument("pages", nargs="*", type=int, help="page reference string")
    parser.add_argument("-f", "--frames", type=int, default=3, help="number of frames")
    args = parser.parse_args(argv)
    if args.frames < 1:
        parser.error("frame count must be at least 1")
    pages = args.pages or list(REFERENCE_STRING)

    for title, label, algorithm in _ALGORITHMS:
        result = algorithm(pages, args.frames)
        print(f"\n--- {title} Page Replacement ---")
        for page, frames in result.steps:
            print(f"Page {page}: {format_frames(frames)}")
        print(f"Total {label} Page Faults: {result.faults}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())