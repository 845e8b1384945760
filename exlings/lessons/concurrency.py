"""Sharing data between threads and waiting on work done in the background."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence


def _strided_sum(numbers: Sequence[int], offset: int, step: int) -> int:
    return sum(numbers[offset::step])


def offset_sums(numbers: Sequence[int] = range(100), workers: int = 8) -> list[int]:
    """Sum every workers-th value, one thread per offset; return sums by offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(_strided_sum, shared, offset, workers) for offset in range(workers)
        ]
        sums = [future.result() for future in futures]
    for offset, total in enumerate(sums):
        print(f"Sum of offset {offset} is {total}")
    return sums


class JobStatus:
    """A thread-safe count of completed jobs."""

    def __init__(self) -> None:
        self._completed = 0
        self._lock = threading.Lock()

    def complete_one(self) -> None:
        with self._lock:
            self._completed += 1

    def completed(self) -> int:
        with self._lock:
            return self._completed


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_interval: float = 0.5) -> int:
    """Complete jobs in a background thread while polling; return how often it waited."""
    status = JobStatus()

    def worker() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            status.complete_one()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    waits = 0
    while status.completed() < jobs:
        print("waiting... ")
        waits += 1
        time.sleep(poll_interval)
    thread.join()
    return waits