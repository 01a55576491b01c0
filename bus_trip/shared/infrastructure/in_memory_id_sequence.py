import threading

from bus_trip.shared.domain import IdSequence


class InMemoryIdSequence(IdSequence):
    """プロセス内カウンタによる採番"""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_values(self, count: int) -> list[int]:
        if count < 1:
            raise ValueError(f"count must be positive: {count}")
        with self._lock:
            first = self._next
            self._next += count
        return list(range(first, first + count))
