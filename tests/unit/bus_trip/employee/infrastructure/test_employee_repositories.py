import threading
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.employee.infrastructure import (
    DynamoDBEmployeeRepository,
    InMemoryEmployeeRepository,
)
from bus_trip.shared.domain import CommissionPercent, EmailAddress
from bus_trip.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from bus_trip.shared.infrastructure import InMemoryIdSequence


def _conditional_check_failed() -> ClientError:
    return ClientError(
        {"Error": {"Code": "ConditionalCheckFailedException", "Message": "failed"}},
        "PutItem",
    )


class TestInMemoryEmployeeRepository:
    def test_save_and_find(self, create_employee):
        repository = InMemoryEmployeeRepository()
        repository.save(create_employee(employee_id=1, name="Alice"))

        found = repository.find_by_id(EmployeeId(value=1))

        assert str(found.name) == "Alice"

    def test_save_twice_is_a_conflict(self, create_employee):
        repository = InMemoryEmployeeRepository()
        repository.save(create_employee(employee_id=1))

        with pytest.raises(DuplicateResourceException):
            repository.save(create_employee(employee_id=1))

    def test_update_missing(self):
        with pytest.raises(ResourceNotFoundException):
            InMemoryEmployeeRepository().update(
                EmployeeId(value=1), {"phone": "555-0100"}
            )

    def test_update_returns_merged_copy(self, create_employee):
        repository = InMemoryEmployeeRepository()
        repository.save(create_employee(employee_id=1, name="Alice"))

        updated = repository.update(EmployeeId(value=1), {"role": "manager"})
        updated.apply({"phone": "555-0100"})

        stored = repository.find_by_id(EmployeeId(value=1))
        assert stored.role == "manager"
        assert str(stored.name) == "Alice"
        assert stored.phone is None

    def test_rejected_change_leaves_employee_untouched(self, create_employee):
        repository = InMemoryEmployeeRepository()
        repository.save(create_employee(employee_id=1))

        with pytest.raises(BusinessRuleViolationException):
            repository.update(EmployeeId(value=1), {"phone": "555-0100", "role": None})

        assert repository.find_by_id(EmployeeId(value=1)).phone is None

    def test_concurrent_updates_of_different_fields_are_not_lost(
        self, create_employee
    ):
        """別項目への同時更新はすべて反映される"""
        repository = InMemoryEmployeeRepository()
        repository.save(create_employee(employee_id=1, commission_percent="10"))
        employee_id = EmployeeId(value=1)
        changes = [
            {"commission_percent": CommissionPercent("20")},
            {"role": "manager"},
            {"phone": "555-0100"},
            {"email": EmailAddress("alice@example.com")},
        ] * 10
        barrier = threading.Barrier(len(changes))

        def worker(change):
            barrier.wait()
            repository.update(employee_id, change)

        threads = [threading.Thread(target=worker, args=(c,)) for c in changes]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stored = repository.find_by_id(employee_id)
        assert stored.commission_percent.value == Decimal("20")
        assert stored.role == "manager"
        assert stored.phone == "555-0100"
        assert str(stored.email) == "alice@example.com"

    def test_reads_return_copies(self, create_employee):
        repository = InMemoryEmployeeRepository()
        repository.save(create_employee(employee_id=1))

        snapshot = repository.find_by_id(EmployeeId(value=1))
        snapshot.apply({"phone": "555-0100"})

        assert repository.find_by_id(EmployeeId(value=1)).phone is None

    def test_next_id_is_monotonic(self):
        repository = InMemoryEmployeeRepository()
        assert repository.next_id() == EmployeeId(value=1)
        assert repository.next_id() == EmployeeId(value=2)


class TestDynamoDBEmployeeRepository:
    @pytest.fixture
    def table(self):
        return MagicMock()

    @pytest.fixture
    def repository(self, table):
        return DynamoDBEmployeeRepository(table=table, sequence=InMemoryIdSequence())

    def test_save_writes_item(self, repository, table, create_employee):
        repository.save(create_employee(employee_id=3, name="Alice"))

        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "EMPLOYEE#3"
        assert item["SK"] == "EMPLOYEE"
        assert item["name"] == "Alice"
        assert item["commission_percent"] == "12"
        assert item["GSI1PK"] == "EMPLOYEES"
        assert item["version"] == 1

    def test_save_conflict(self, repository, table, create_employee):
        table.put_item.side_effect = _conditional_check_failed()

        with pytest.raises(DuplicateResourceException):
            repository.save(create_employee())

    def test_update_missing(self, repository, table):
        table.get_item.return_value = {}

        with pytest.raises(ResourceNotFoundException):
            repository.update(EmployeeId(value=3), {"role": "manager"})
        table.put_item.assert_not_called()

    def test_update_bumps_version(self, repository, table, create_employee):
        # Arrange
        repository.save(create_employee(employee_id=3, name="Alice"))
        table.get_item.return_value = {"Item": table.put_item.call_args.kwargs["Item"]}

        # Act
        employee = repository.update(EmployeeId(value=3), {"role": "manager"})

        # Assert
        assert employee.role == "manager"
        kwargs = table.put_item.call_args.kwargs
        assert kwargs["Item"]["version"] == 2
        assert kwargs["Item"]["role"] == "manager"
        assert kwargs["Item"]["name"] == "Alice"
        assert "ConditionExpression" in kwargs

    def test_update_retries_on_conflict(self, repository, table, create_employee):
        repository.save(create_employee(employee_id=3))
        table.get_item.return_value = {"Item": table.put_item.call_args.kwargs["Item"]}
        table.put_item.side_effect = [_conditional_check_failed(), None]

        employee = repository.update(EmployeeId(value=3), {"phone": "555-0100"})

        assert employee.phone == "555-0100"
        assert table.get_item.call_count == 2

    def test_update_gives_up_after_repeated_conflicts(
        self, repository, table, create_employee
    ):
        repository.save(create_employee(employee_id=3))
        table.get_item.return_value = {"Item": table.put_item.call_args.kwargs["Item"]}
        table.put_item.side_effect = _conditional_check_failed()

        with pytest.raises(OptimisticLockException):
            repository.update(EmployeeId(value=3), {"phone": "555-0100"})

    def test_find_by_id_round_trips_item(self, repository, table, create_employee):
        repository.save(create_employee(employee_id=3, email="alice@example.com"))
        table.get_item.return_value = {"Item": table.put_item.call_args.kwargs["Item"]}

        employee = repository.find_by_id(EmployeeId(value=3))

        assert employee.id == EmployeeId(value=3)
        assert str(employee.email) == "alice@example.com"
        assert employee.active is True

    def test_find_by_id_missing(self, repository, table):
        table.get_item.return_value = {}
        assert repository.find_by_id(EmployeeId(value=3)) is None

    def test_list_all_follows_pagination(self, repository, table, create_employee):
        repository.save(create_employee(employee_id=1))
        first = table.put_item.call_args.kwargs["Item"]
        repository.save(create_employee(employee_id=2))
        second = table.put_item.call_args.kwargs["Item"]
        table.query.side_effect = [
            {"Items": [first], "LastEvaluatedKey": {"PK": "x"}},
            {"Items": [second]},
        ]

        employees = repository.list_all()

        assert [e.id.value for e in employees] == [1, 2]
