from bus_trip.employee.domain.entity import Employee
from bus_trip.employee.domain.factory import EmployeeDetails, EmployeeFactory
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.shared.domain.exception import InvalidInputException


class RegisterEmployeeService:
    """従業員登録ユースケース"""

    def __init__(
        self,
        repository: EmployeeRepository,
        factory: EmployeeFactory,
    ) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, details: EmployeeDetails) -> Employee:
        """従業員を登録する

        Raises:
            InvalidInputException: 名前が無い・空、メールアドレスや手数料率が不正な場合
        """
        # 1. 採番より前に入力を検証する
        try:
            self._factory.validate(details)
        except KeyError as e:
            raise InvalidInputException(f"Missing required field: {e.args[0]}") from e
        except ValueError as e:
            raise InvalidInputException(str(e)) from e

        # 2. Factory でエンティティを生成
        employee = self._factory.create(self._repository.next_id(), details)

        # 3. Repository で永続化
        self._repository.save(employee)
        return employee
