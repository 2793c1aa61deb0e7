"""Process creation demos: zombie and orphan children, and handing data to a new program."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
import traceback
from pathlib import Path
from typing import Callable, Iterable, Iterator, NoReturn, Sequence

DEFAULT_VALUES = (5, 2, 9, 1, 5)
_MODULE = "ossim.processes"


def format_values(values: Iterable[int]) -> str:
    """Space-terminated list of values, as the demos print them."""
    return "".join(f"{value} " for value in values)


def _flush() -> None:
    sys.stdout.flush()
    sys.stderr.flush()


def _run_child(work: Callable[..., None], *args: object) -> NoReturn:
    code = 1
    try:
        work(*args)
        code = 0
    except BaseException:
        traceback.print_exc()
    finally:
        _flush()
        os._exit(code)


def _sorting_child(values: list[int]) -> None:
    print("\n--- CHILD PROCESS ---")
    print(f"Child PID: {os.getpid()}, Parent PID: {os.getppid()}")
    print(f"Sorted array by child: {format_values(sorted(values))}")
    print("Child exiting now...")
    print("Child becomes ZOMBIE until parent calls wait().")


def _orphan_child(delay: float) -> None:
    print("\n--- NEW CHILD PROCESS (Orphan Demo) ---")
    print(f"Child PID: {os.getpid()}, Parent PID: {os.getppid()}")
    print(f"Sleeping {delay:g} seconds so parent exits first...")
    _flush()
    time.sleep(delay)
    print(f"Now my Parent PID changed to {os.getppid()} (init/systemd)")
    print("I am now an ORPHAN process.")


def zombie_orphan_demo(values: Iterable[int], delay: float = 10.0) -> int:
    """Fork a child that sorts and exits (a zombie until reaped), then fork one meant to be orphaned.

    Returns the pid of the second child, which outlives this call.
    """
    values = list(values)
    print(f"Unsorted array: {format_values(values)}")
    _flush()
    pid = os.fork()
    if pid == 0:
        _run_child(_sorting_child, values)

    print("\n--- PARENT PROCESS ---")
    print(f"Parent PID: {os.getpid()}, Child PID: {pid}")
    print(f"Parent sleeping for {delay:g} seconds... (Child will finish and become Zombie)")
    print(f"Check zombie using: ps -l | grep {pid}")
    _flush()
    time.sleep(delay)
    os.waitpid(pid, 0)
    print("\nParent collected zombie (wait done)")
    _flush()

    orphan = os.fork()
    if orphan == 0:
        _run_child(_orphan_child, delay / 2)
    print("\nParent exiting now... (Next child will become orphan)")
    _flush()
    return orphan


def _child_env() -> dict[str, str]:
    root = str(Path(__file__).resolve().parent.parent)
    env = dict(os.environ)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = root if not existing else root + os.pathsep + existing
    return env


def sort_and_exec(values: Iterable[int]) -> list[int]:
    """Sort the values and run a new program that prints them in reverse; return the sorted list."""
    ordered = sorted(values)
    print(f"\n[Main Program] Sorted array: {format_values(ordered)}")
    print("\n[Child] Executing display program...")
    _flush()
    subprocess.run(
        [sys.executable, "-m", _MODULE, "reverse", *map(str, ordered)],
        check=True,
        env=_child_env(),
    )
    print("\n[Main Program] Child process finished.")
    return ordered


def display_reverse(argv: Sequence[str]) -> list[int]:
    """Print the integers given as arguments in reverse order and return them."""
    values = [int(argument) for argument in argv]
    reversed_values = values[::-1]
    print(f"\n[Display Program] Array in reverse order: {format_values(reversed_values)}")
    return reversed_values


def _tokens() -> Iterator[int]:
    for line in sys.stdin:
        yield from (int(token) for token in line.split())


def _read_values() -> list[int]:
    tokens = _tokens()
    print("Enter number of elements: ", end="", flush=True)
    count = next(tokens)
    if count < 0:
        raise ValueError("number of elements must not be negative")
    print(f"Enter {count} elements:", flush=True)
    return [next(tokens) for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Process creation demos.")
    commands = parser.add_subparsers(dest="command", required=True)

    zombie = commands.add_parser("zombie", help="zombie and orphan processes")
    zombie.add_argument("values", nargs="*", type=int)
    zombie.add_argument("--delay", type=float, default=10.0)

    execute = commands.add_parser("exec", help="sort, then run the reverse-display program")
    execute.add_argument("values", nargs="*", type=int)

    reverse = commands.add_parser("reverse", help="print arguments in reverse order")
    reverse.add_argument("values", nargs="*")

    args = parser.parse_args(argv)

    if args.command == "zombie":
        zombie_orphan_demo(args.values or DEFAULT_VALUES, args.delay)
    elif args.command == "exec":
        values = args.values
        if not values:
            try:
                values = _read_values()
            except StopIteration:
                parser.error("unexpected end of input")
            except ValueError as error:
                parser.error(str(error))
        try:
            sort_and_exec(values)
        except subprocess.CalledProcessError as error:
            print(f"display program failed: {error}", file=sys.stderr)
            return 1
    else:
        try:
            display_reverse(args.values)
        except ValueError as error:
            parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())