"""Worker threads: collecting their results, sharing state and sending values."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue

_CLOSED = object()


def run_timed_workers(count: int = 10, delay: float = 0.25) -> list[int]:
    """Run ``count`` threads that each sleep ``delay`` seconds.

    Return how many whole milliseconds each one took, in thread order.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")

    def work(index: int) -> int:
        start = time.perf_counter()
        time.sleep(delay)
        print(f"thread {index} is complete")
        return int((time.perf_counter() - start) * 1000)

    if count == 0:
        return []
    with ThreadPoolExecutor(max_workers=count) as pool:
        results = list(pool.map(work, range(count)))

    if len(results) != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    print()
    for index, result in enumerate(results):
        print(f"thread {index} took {result}ms")
    return results


@dataclass
class JobStatus:
    """A count of finished jobs that threads may update safely."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def _complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def complete_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run ``count`` threads that each record one finished job."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        status._complete_one()

    handles = [threading.Thread(target=job) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Values to send, split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel: SimpleQueue, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves of the queue on the channel from two threads.

    Each sender puts a closing marker on the channel when it is done.
    Return the started sender threads.
    """

    def sender(values: list[int]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                channel.put(value)
                time.sleep(delay)
        finally:
            channel.put(_CLOSED)

    senders = [
        threading.Thread(target=sender, args=(queue.first_half,)),
        threading.Thread(target=sender, args=(queue.second_half,)),
    ]
    for thread in senders:
        thread.start()
    return senders


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Send the queue's values and receive every one of them.

    Raise RuntimeError if the number received differs from ``queue.length``.
    """
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)
    received: list[int] = []
    closed = 0
    while closed < len(senders):
        item = channel.get()
        if item is _CLOSED:
            closed += 1
            continue
        print(f"Got: {item}")
        received.append(item)
    for thread in senders:
        thread.join()

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(f"received {len(received)} numbers, expected {queue.length}")
    return received