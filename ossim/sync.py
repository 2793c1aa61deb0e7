"""Classic synchronisation problems: bounded-buffer producer/consumer and readers/writers."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections import deque
from functools import partial
from typing import Any, Callable, Optional, Sequence

Announce = Optional[Callable[[str], None]]
_print = partial(print, flush=True)


class BoundedBuffer:
    """Fixed-capacity buffer guarded by counting semaphores and a mutex."""

    def __init__(self, capacity: int = 5, announce: Announce = None):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._empty = threading.Semaphore(capacity)
        self._full = threading.Semaphore(0)
        self._lock = threading.Lock()
        self._announce = announce

    def put(self, item: Any) -> None:
        """Insert an item, waiting while the buffer is full."""
        self._empty.acquire()
        with self._lock:
            self._items.append(item)
            if self._announce:
                self._announce(f"Produced: {item}")
        self._full.release()

    def get(self) -> Any:
        """Remove the oldest item, waiting while the buffer is empty."""
        self._full.acquire()
        with self._lock:
            item = self._items.popleft()
            if self._announce:
                self._announce(f"Consumed: {item}")
        self._empty.release()
        return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class ReadersWriters:
    """Shared counter with readers-preference access: many readers or one writer."""

    def __init__(self, delay: float = 0.0, announce: Announce = None):
        self.data = 0
        self.delay = delay
        self.peak_readers = 0
        self._announce = announce
        self._readcount = 0
        self._mutex = threading.Lock()
        self._write_lock = threading.Semaphore(1)

    def read(self, reader_id: int) -> int:
        """Read the shared value alongside any other readers."""
        with self._mutex:
            self._readcount += 1
            self.peak_readers = max(self.peak_readers, self._readcount)
            if self._readcount == 1:
                self._write_lock.acquire()
        try:
            value = self.data
            if self._announce:
                self._announce(f"Reader {reader_id} is reading the data: {value}")
            time.sleep(self.delay)
        finally:
            with self._mutex:
                self._readcount -= 1
                if self._readcount == 0:
                    self._write_lock.release()
        return value

    def write(self, writer_id: int) -> int:
        """Increment the shared value with exclusive access and return the new value."""
        with self._write_lock:
            self.data += 1
            value = self.data
            if self._announce:
                self._announce(f"Writer {writer_id} has written data: {value}")
            time.sleep(self.delay)
        return value


def run_producer_consumer(count: int, capacity: int = 5, delay: float = 1.0) -> tuple[list[int], list[int]]:
    """Run one producer and one consumer for count random items; return both item lists."""
    if count < 0:
        raise ValueError("count must not be negative")
    buffer = BoundedBuffer(capacity, announce=_print)
    produced: list[int] = []
    consumed: list[int] = []

    def producer() -> None:
        for _ in range(count):
            item = random.randrange(100)
            buffer.put(item)
            produced.append(item)
            time.sleep(delay)

    def consumer() -> None:
        for _ in range(count):
            consumed.append(buffer.get())
            time.sleep(delay)

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return produced, consumed


def run_readers_writers(readers: int = 5, writers: int = 2, rounds: int = 3, delay: float = 1.0) -> int:
    """Run reader and writer threads for a number of rounds each; return the final shared value."""
    if readers < 0 or writers < 0 or rounds < 0:
        raise ValueError("counts must not be negative")
    shared = ReadersWriters(delay=delay, announce=_print)

    def reader(reader_id: int) -> None:
        for _ in range(rounds):
            shared.read(reader_id)
            time.sleep(delay)

    def writer(writer_id: int) -> None:
        for _ in range(rounds):
            shared.write(writer_id)
            time.sleep(delay)

    threads = [threading.Thread(target=reader, args=(i,)) for i in range(1, readers + 1)]
    threads += [threading.Thread(target=writer, args=(i,)) for i in range(1, writers + 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return shared.data


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Synchronisation problem demos.")
    commands = parser.add_subparsers(dest="command", required=True)

    pc = commands.add_parser("producer-consumer")
    pc.add_argument("--count", type=int, default=10)
    pc.add_argument("--capacity", type=int, default=5)
    pc.add_argument("--delay", type=float, default=1.0)

    rw = commands.add_parser("readers-writers")
    rw.add_argument("--readers", type=int, default=5)
    rw.add_argument("--writers", type=int, default=2)
    rw.add_argument("--rounds", type=int, default=3)
    rw.add_argument("--delay", type=float, default=1.0)

    args = parser.parse_args(argv)
    try:
        if args.command == "producer-consumer":
            run_producer_consumer(args.count, args.capacity, args.delay)
        else:
            run_readers_writers(args.readers, args.writers, args.rounds, args.delay)
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())