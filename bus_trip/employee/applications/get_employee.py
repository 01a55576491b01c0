from bus_trip.employee.domain.entity import Employee
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.shared.domain.exception import (
    InvalidInputException,
    ResourceNotFoundException,
)


class EmployeeQueryService:
    """従業員参照ユースケース"""

    def __init__(self, repository: EmployeeRepository) -> None:
        self._repository = repository

    def list_employees(self) -> list[Employee]:
        return self._repository.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        """従業員を取得する

        Raises:
            InvalidInputException: IDが数値でない場合
            ResourceNotFoundException: 従業員が存在しない場合
        """
        employee = self._repository.find_by_id(parse_employee_id(employee_id))
        if employee is None:
            raise ResourceNotFoundException(f"Employee with ID {employee_id} not found")
        return employee


def parse_employee_id(value: str) -> EmployeeId:
    try:
        return EmployeeId.from_string(value)
    except ValueError as e:
        raise InvalidInputException(str(e)) from e
