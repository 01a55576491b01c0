import threading
from unittest.mock import MagicMock

import pytest

from bus_trip.shared.infrastructure import DynamoDBIdSequence, InMemoryIdSequence


class TestInMemoryIdSequence:
    def test_values_are_monotonic(self):
        sequence = InMemoryIdSequence()
        assert sequence.next_value() == 1
        assert sequence.next_values(3) == [2, 3, 4]
        assert sequence.next_value() == 5

    def test_count_must_be_positive(self):
        with pytest.raises(ValueError):
            InMemoryIdSequence().next_values(0)

    def test_concurrent_allocation_never_repeats(self):
        """複数スレッドから採番しても重複しない"""
        sequence = InMemoryIdSequence()
        allocated: list[int] = []
        lock = threading.Lock()

        def worker():
            values = [sequence.next_value() for _ in range(100)]
            with lock:
                allocated.extend(values)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(allocated) == len(set(allocated)) == 800


class TestDynamoDBIdSequence:
    def test_next_values_uses_atomic_counter(self):
        # Arrange
        table = MagicMock()
        table.update_item.return_value = {"Attributes": {"current_value": 40}}
        sequence = DynamoDBIdSequence("seat", table=table)

        # Act
        values = sequence.next_values(5)

        # Assert
        assert values == [36, 37, 38, 39, 40]
        kwargs = table.update_item.call_args.kwargs
        assert kwargs["Key"] == {"PK": "SEQUENCE#seat", "SK": "SEQUENCE"}
        assert kwargs["ExpressionAttributeValues"] == {":count": 5}
