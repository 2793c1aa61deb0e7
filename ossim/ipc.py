"""Inter-process communication: named pipes between two processes, and shared memory."""

from __future__ import annotations

import argparse
import os
import sys
import traceback
from dataclasses import dataclass
from multiprocessing import resource_tracker
from multiprocessing.shared_memory import SharedMemory
from pathlib import Path
from typing import Sequence, Union

SEGMENT_SIZE = 1024
DEFAULT_SEGMENT = "shmfile"

PathLike = Union[str, "os.PathLike[str]"]
_TRACK_OPTIONS = {"track": False} if sys.version_info >= (3, 13) else {}


@dataclass(frozen=True)
class TextStats:
    """Character, word and line counts of a piece of text."""

    chars: int
    words: int
    lines: int

    def __str__(self) -> str:
        return f"Characters: {self.chars}\nWords: {self.words}\nLines: {self.lines}"


def count_details(text: str) -> TextStats:
    """Count characters, words and lines.

    Every space or newline ends a word and every newline ends a line; a trailing
    partial word or line also counts.
    """
    if not text:
        return TextStats(0, 0, 0)
    separators = sum(1 for char in text if char in " \n")
    last = text[-1]
    words = separators + int(last not in " \n")
    lines = text.count("\n") + int(last != "\n")
    return TextStats(len(text), words, lines)


def _flush() -> None:
    sys.stdout.flush()
    sys.stderr.flush()


def _count_over_fifos(inbound: Path, outbound: Path, output_path: Path) -> None:
    with open(inbound, encoding="utf-8") as pipe:
        sentence = pipe.read()
    stats = count_details(sentence)
    output_path.write_text(f"{stats}\n", encoding="utf-8")
    with open(outbound, "w", encoding="utf-8") as pipe:
        pipe.write(str(stats))


def fifo_exchange(sentence: str, fifo_dir: PathLike = "/tmp", output_path: PathLike = "output.txt") -> str:
    """Send a sentence to a child process over a FIFO and return the counts it sends back.

    The child also writes the counts to output_path.
    """
    fifo_dir = Path(fifo_dir)
    to_child = fifo_dir / "fifo1"
    to_parent = fifo_dir / "fifo2"
    for path in (to_child, to_parent):
        try:
            os.mkfifo(path, 0o666)
        except FileExistsError:
            pass

    _flush()
    pid = os.fork()
    if pid == 0:
        code = 1
        try:
            _count_over_fifos(to_child, to_parent, Path(output_path))
            code = 0
        except BaseException:
            traceback.print_exc()
        finally:
            _flush()
            os._exit(code)

    try:
        with open(to_child, "w", encoding="utf-8") as pipe:
            pipe.write(sentence)
        with open(to_parent, encoding="utf-8") as pipe:
            result = pipe.read()
    finally:
        _, status = os.waitpid(pid, 0)
        for path in (to_child, to_parent):
            path.unlink(missing_ok=True)
    exit_code = os.waitstatus_to_exitcode(status)
    if exit_code != 0:
        raise ChildProcessError(f"counting process exited with status {exit_code}")
    return result


def _open_segment(name: str) -> SharedMemory:
    try:
        return SharedMemory(name=name, create=True, size=SEGMENT_SIZE, **_TRACK_OPTIONS)
    except FileExistsError:
        return SharedMemory(name=name, **_TRACK_OPTIONS)


def write_shared(name: str, data: str) -> str:
    """Store text in a named shared-memory segment, creating it if needed.

    The segment outlives this process. Text longer than the segment allows is cut;
    the text actually stored is returned.
    """
    encoded = data.encode("utf-8")[: SEGMENT_SIZE - 1]
    stored = encoded.decode("utf-8", errors="ignore")
    encoded = stored.encode("utf-8")
    segment = _open_segment(name)
    if not _TRACK_OPTIONS:
        # keep the segment alive after this process exits
        resource_tracker.unregister(segment._name, "shared_memory")
    try:
        segment.buf[: len(encoded)] = encoded
        segment.buf[len(encoded)] = 0
    finally:
        segment.close()
    return stored


def read_shared(name: str) -> str:
    """Read the text in a named shared-memory segment, then remove the segment."""
    segment = _open_segment(name)
    try:
        raw = bytes(segment.buf)
    finally:
        segment.close()
        segment.unlink()
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inter-process communication demos.")
    commands = parser.add_subparsers(dest="command", required=True)

    count = commands.add_parser("count", help="count a sentence in a second process over FIFOs")
    count.add_argument("--fifo-dir", default="/tmp")
    count.add_argument("--output", default="output.txt")

    writer = commands.add_parser("shm-write", help="write a line of input to shared memory")
    writer.add_argument("--name", default=DEFAULT_SEGMENT)

    reader = commands.add_parser("shm-read", help="read and remove shared memory")
    reader.add_argument("--name", default=DEFAULT_SEGMENT)

    args = parser.parse_args(argv)

    if args.command == "count":
        print("Process 1: Enter a sentence: ", end="", flush=True)
        sentence = sys.stdin.readline()
        try:
            result = fifo_exchange(sentence, args.fifo_dir, args.output)
        except OSError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        print(f"Process 1: Result from Process 2 -\n{result}")
    elif args.command == "shm-write":
        print("Enter data to write into shared memory: ", end="", flush=True)
        line = sys.stdin.readline()
        try:
            write_shared(args.name, line)
        except OSError as error:
            print(f"Shared memory write failed: {error}", file=sys.stderr)
            return 1
        print("Data written to shared memory.")
    else:
        try:
            data = read_shared(args.name)
        except OSError as error:
            print(f"Shared memory read failed: {error}", file=sys.stderr)
            return 1
        print(f"Data read from shared memory: {data}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())