"""Simulations of classic operating-system algorithms: CPU and disk scheduling,
the banker's algorithm, page replacement, process, synchronisation and IPC demos."""

__version__ = "0.1.0"

__all__ = [
    "bankers",
    "disk",
    "ipc",
    "paging",
    "processes",
    "scheduling",
    "sync",
]