from abc import abstractmethod

from bus_trip.employee.domain.entity import Employee, EmployeeChanges
from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.shared.domain import Repository


class EmployeeRepository(Repository[Employee, EmployeeId]):
    """従業員レポジトリのインターフェース（削除は提供しない）"""

    @abstractmethod
    def save(self, employee: Employee) -> None:
        """新規の従業員を保存する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, employee_id: EmployeeId, changes: EmployeeChanges) -> Employee:
        """保存済みの従業員に部分更新を原子的に適用し、更新後の従業員を返す

        読み込みから書き戻しまでを1つの操作とし、同時に行われた
        別項目の更新を上書きしない。

        Raises:
            ResourceNotFoundException: 従業員が存在しない場合
            OptimisticLockException: 競合が解消しなかった場合
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        """従業員IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Employee]:
        """全ての従業員を返す"""
        raise NotImplementedError

    @abstractmethod
    def next_id(self) -> EmployeeId:
        raise NotImplementedError
