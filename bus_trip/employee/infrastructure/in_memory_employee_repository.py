import copy
import threading

from bus_trip.employee.domain.entity import Employee, EmployeeChanges
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.shared.domain import IdSequence
from bus_trip.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from bus_trip.shared.infrastructure import InMemoryIdSequence


class InMemoryEmployeeRepository(EmployeeRepository):
    """プロセス内メモリを使用した EmployeeRepository の具象実装"""

    def __init__(self, sequence: IdSequence | None = None) -> None:
        self._sequence = sequence or InMemoryIdSequence()
        self._employees: dict[EmployeeId, Employee] = {}
        self._lock = threading.RLock()

    def next_id(self) -> EmployeeId:
        return EmployeeId(value=self._sequence.next_value())

    def save(self, employee: Employee) -> None:
        with self._lock:
            if employee.id in self._employees:
                raise DuplicateResourceException(
                    f"Employee already exists: {employee.id}"
                )
            self._employees[employee.id] = copy.deepcopy(employee)

    def update(self, employee_id: EmployeeId, changes: EmployeeChanges) -> Employee:
        """読み込み・適用・書き戻しをロック内で行う"""
        with self._lock:
            current = self._employees.get(employee_id)
            if current is None:
                raise ResourceNotFoundException(
                    f"Employee with ID {employee_id} not found"
                )
            updated = copy.deepcopy(current)
            updated.apply(changes)
            self._employees[employee_id] = updated
            return copy.deepcopy(updated)

    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        with self._lock:
            return copy.deepcopy(self._employees.get(employee_id))

    def list_all(self) -> list[Employee]:
        with self._lock:
            return copy.deepcopy(list(self._employees.values()))
