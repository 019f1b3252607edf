"""Fixed-capacity queue that overwrites its oldest item when full."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence


class CircularQueue:
    """A bounded FIFO queue; enqueuing into a full queue drops the oldest item."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._items: deque[int] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._items.maxlen or 0

    def enqueue(self, value: int) -> None:
        """Append a value, discarding the oldest one if the queue is full."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the oldest value."""
        if not self._items:
            raise IndexError("Queue is empty. No data to dequeue.")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Queue is empty. Nothing to display."
        values = "".join(f"{value} " for value in self._items)
        return f"Data in the queue (oldest to newest):\n{values}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration sequence and print the queue after each step."""
    argparse.ArgumentParser(description="Circular queue demo").parse_args(argv)
    queue = CircularQueue(7)
    for value in range(1, 5):
        queue.enqueue(value)
    print(queue)
    for value in range(5, 8):
        queue.enqueue(value)
    print(queue)
    queue.enqueue(8)
    print(queue)
    for _ in range(2):
        try:
            queue.dequeue()
        except IndexError as exc:
            print(exc)
        print(queue)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())